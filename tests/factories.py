from datetime import datetime
from typing import Iterable, Optional

from listening_stats.models.listening import (
    Author,
    ListeningSession,
    MediaItemRef,
    MediaMetadata,
    MediaProgressRecord,
)


class FakeStorage:
    """In-memory stand-in for StorageService that records how it was called"""

    def __init__(self, sessions=None, progresses=None):
        self.sessions = list(sessions or [])
        self.progresses = list(progresses or [])
        self.calls = []

    def get_listening_sessions_for_year(self, user_id, year):
        self.calls.append(('sessions', user_id, year))
        return list(self.sessions)

    def get_finished_book_progress_for_year(self, user_id, year):
        self.calls.append(('progress', user_id, year))
        return list(self.progresses)


def book_session(
    seconds: Optional[float],
    created_at: datetime = datetime(2024, 6, 15, 12, 0),
    authors: Iterable[str] = (),
    narrators: Iterable[str] = (),
    genres: Iterable[str] = (),
) -> ListeningSession:
    return ListeningSession(
        user_id='user-1',
        media_item_type='book',
        created_at=created_at,
        time_listening=seconds,
        media_metadata=MediaMetadata(
            authors=[Author(name=name) for name in authors],
            narrators=list(narrators),
            genres=list(genres),
        ),
    )


def podcast_session(seconds: Optional[float], created_at: datetime = datetime(2024, 6, 15, 12, 0)) -> ListeningSession:
    return ListeningSession(
        user_id='user-1',
        media_item_type='podcast',
        created_at=created_at,
        time_listening=seconds,
    )


def finished_book(
    book_id: str,
    title: str,
    duration: Optional[float],
    finished_at: datetime = datetime(2024, 3, 1, 9, 30),
) -> MediaProgressRecord:
    return MediaProgressRecord(
        user_id='user-1',
        media_item_type='book',
        finished_at=finished_at,
        media_item=MediaItemRef(id=book_id, title=title),
        duration=duration,
    )
