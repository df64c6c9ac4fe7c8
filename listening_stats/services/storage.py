"""Database storage service for listening sessions and media progress"""
import logging
import datetime
from typing import List, Tuple
from sqlalchemy import and_
from sqlalchemy.orm import Session, contains_eager
from sqlalchemy.exc import SQLAlchemyError

from listening_stats.config import MEDIA_TYPE_BOOK
from listening_stats.models.db import PlaybackSession, MediaProgress
from listening_stats.models.listening import ListeningSession, MediaProgressRecord

logger = logging.getLogger(__name__)

def year_bounds(year: int) -> Tuple[datetime.datetime, datetime.datetime]:
    """Half-open [start, end) interval covering the calendar year"""
    return datetime.datetime(year, 1, 1), datetime.datetime(year + 1, 1, 1)

class StorageService:
    """Handles all database reads for the yearly stats"""

    def __init__(self, session: Session):
        self.session = session

    def get_listening_sessions_for_year(self, user_id: str, year: int) -> List[ListeningSession]:
        """All of the user's listening sessions created during the year, in no particular order"""
        start, end = year_bounds(year)
        try:
            rows = (
                self.session.query(PlaybackSession)
                .filter(
                    and_(
                        PlaybackSession.user_id == user_id,
                        PlaybackSession.created_at >= start,
                        PlaybackSession.created_at < end
                    )
                )
                .all()
            )
            return [ListeningSession.from_row(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching listening sessions for user {user_id} in {year}: {e}")
            # Rollback in case of error during read
            self.session.rollback()
            raise

    def get_finished_book_progress_for_year(self, user_id: str, year: int) -> List[MediaProgressRecord]:
        """
        Book progress records the user finished during the year.

        Inner join on the book: progress rows whose book no longer exists are left out.
        """
        start, end = year_bounds(year)
        try:
            rows = (
                self.session.query(MediaProgress)
                .join(MediaProgress.book)
                .options(contains_eager(MediaProgress.book))
                .filter(
                    and_(
                        MediaProgress.user_id == user_id,
                        MediaProgress.media_item_type == MEDIA_TYPE_BOOK,
                        MediaProgress.finished_at >= start,
                        MediaProgress.finished_at < end
                    )
                )
                .all()
            )
            return [MediaProgressRecord.from_row(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching finished books for user {user_id} in {year}: {e}")
            self.session.rollback()
            raise
