import pytest

from listening_stats.utils.duration import elapsed_pretty


@pytest.mark.parametrize('seconds, expected', [
    (0, '0 sec'),
    (0.25, '250 ms'),
    (1, '1 sec'),
    (59.9, '59 sec'),
    (60, '1 min'),
    (3600, '60 min'),
    (4199, '69 min'),
    (4200, '1 hr 10 min'),
    (7200, '2 hr'),
    (86400, '1 d'),
    (86400 + 60, '1 d 0 hr 1 min'),
    (90060, '1 d 1 hr 1 min'),
    (3 * 86400 + 5 * 3600, '3 d 5 hr'),
])
def test_elapsed_pretty(seconds, expected) -> None:
    assert elapsed_pretty(seconds) == expected
