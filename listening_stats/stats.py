"""Yearly listening stats aggregation"""
import logging
import math
from collections import defaultdict
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple

from listening_stats.models.listening import ListeningSession, MediaProgressRecord
from listening_stats.models.stats import FinishedBook, ListenedEntry, ListenedMonth, YearlyStatsReport
from listening_stats.utils.duration import elapsed_pretty

logger = logging.getLogger(__name__)

# Catalog tags that describe the format rather than the genre
IGNORED_GENRE_MARKERS = ('audiobook', 'audio book')

def round_seconds(seconds: float) -> int:
    """Round to the nearest whole second, halves going up"""
    return math.floor(seconds + 0.5)

def is_listed_genre(genre: str) -> bool:
    """False for format tags such as "Audiobook" or "Audio Books" that are not real genres"""
    lowered = genre.lower()
    return not any(marker in lowered for marker in IGNORED_GENRE_MARKERS)

def arg_max(totals: Dict[Hashable, float]) -> Optional[Tuple[Hashable, float]]:
    """
    Key with the largest accumulated value, or None for an empty mapping.

    Keys are visited in ascending order and only a strictly greater value
    replaces the current best, so ties go to the smallest key.
    """
    best = None
    for key in sorted(totals):
        if best is None or totals[key] > best[1]:
            best = (key, totals[key])
    return best

class YearlyStatsAggregator:
    """Reduces a user's listening sessions and finished books for one year into a report"""

    def __init__(self, storage, format_duration: Callable[[float], str] = elapsed_pretty):
        """
        Args:
            storage: Provides get_listening_sessions_for_year and
                get_finished_book_progress_for_year (see StorageService)
            format_duration: Turns a number of seconds into display text
        """
        self.storage = storage
        self.format_duration = format_duration

    def fetch_sessions(self, user_id: str, year: int) -> List[ListeningSession]:
        sessions = self.storage.get_listening_sessions_for_year(user_id, year)
        logger.debug(f"Fetched {len(sessions)} listening sessions for user {user_id} in {year}")
        return sessions

    def fetch_finished_book_progress(self, user_id: str, year: int) -> List[MediaProgressRecord]:
        progresses = self.storage.get_finished_book_progress_for_year(user_id, year)
        logger.debug(f"Fetched {len(progresses)} finished books for user {user_id} in {year}")
        return progresses

    def compute_year_stats(self, user_id: str, year: int) -> YearlyStatsReport:
        """Build the yearly stats report. Storage errors propagate unchanged."""
        sessions = self.fetch_sessions(user_id, year)

        total_time = 0
        total_book_time = 0
        total_podcast_time = 0

        author_time = defaultdict(float)
        narrator_time = defaultdict(float)
        genre_time = defaultdict(float)
        month_time = defaultdict(float)

        for session in sessions:
            seconds = session.listened_seconds
            total_time += seconds
            # 0 = January
            month_time[session.created_at.month - 1] += seconds

            if session.is_book:
                total_book_time += seconds
                metadata = session.media_metadata
                for author in metadata.authors:
                    author_time[author.name] += seconds
                for narrator in metadata.narrators:
                    narrator_time[narrator] += seconds
                for genre in filter(is_listed_genre, metadata.genres):
                    genre_time[genre] += seconds
            else:
                total_podcast_time += seconds

        total_time = round_seconds(total_time)
        total_book_time = round_seconds(total_book_time)
        total_podcast_time = round_seconds(total_podcast_time)

        progresses = self.fetch_finished_book_progress(user_id, year)

        report = YearlyStatsReport(
            total_listening_sessions=len(sessions),
            total_listening_time=total_time,
            total_listening_time_pretty=self.format_duration(total_time),
            total_book_listening_time=total_book_time,
            total_book_listening_time_pretty=self.format_duration(total_book_time),
            total_podcast_listening_time=total_podcast_time,
            total_podcast_listening_time_pretty=self.format_duration(total_podcast_time),
            most_listened_author=self._most_listened(author_time),
            most_listened_narrator=self._most_listened(narrator_time),
            most_listened_genre=self._most_listened(genre_time),
            most_listened_month=self._most_listened_month(month_time),
            num_books_finished=len(progresses),
            longest_audiobook_finished=self._longest_finished(progresses)
        )
        logger.info(f"Computed {year} stats for user {user_id}: {len(sessions)} sessions, "
                    f"{total_time}s listened, {len(progresses)} books finished")
        return report

    def _most_listened(self, totals: Dict[str, float]) -> Optional[ListenedEntry]:
        best = arg_max(totals)
        if best is None:
            return None
        name, seconds = best
        seconds = round_seconds(seconds)
        return ListenedEntry(name=name, time=seconds, pretty_time=self.format_duration(seconds))

    def _most_listened_month(self, totals: Dict[int, float]) -> Optional[ListenedMonth]:
        best = arg_max(totals)
        if best is None:
            return None
        month, seconds = best
        seconds = round_seconds(seconds)
        return ListenedMonth(month=month, time=seconds, pretty_time=self.format_duration(seconds))

    def _longest_finished(self, progresses: Iterable[MediaProgressRecord]) -> Optional[FinishedBook]:
        """Finished book with the greatest duration. Unknown or zero durations never qualify."""
        longest = None
        # Earliest finish, then smallest id, wins a tie
        for progress in sorted(progresses, key=lambda p: (p.finished_at, p.media_item.id)):
            if progress.duration and (longest is None or progress.duration > longest.duration):
                longest = progress

        if longest is None:
            return None
        duration = round_seconds(longest.duration)
        return FinishedBook(
            id=longest.media_item.id,
            title=longest.media_item.title,
            duration_seconds=duration,
            duration_pretty=self.format_duration(duration),
            finished_at=longest.finished_at
        )
