"""Human readable durations"""
import math

def elapsed_pretty(seconds: float) -> str:
    """
    Format a number of seconds for display.

    Examples:
        0.25  -> "250 ms"
        42    -> "42 sec"
        3600  -> "60 min"
        4500  -> "1 hr 15 min"
        90060 -> "1 d 1 hr 1 min"
    """
    if 0 < seconds < 1:
        return f"{math.floor(seconds * 1000)} ms"
    if seconds < 60:
        return f"{math.floor(seconds)} sec"

    minutes = math.floor(seconds / 60)
    # Up to 70 minutes reads better without an hour part
    if minutes < 70:
        return f"{minutes} min"

    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    parts = []
    if days:
        parts.append(f"{days} d")
    if hours or (days and minutes):
        parts.append(f"{hours} hr")
    if minutes:
        parts.append(f"{minutes} min")
    return ' '.join(parts)
