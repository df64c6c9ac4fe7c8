"""SQLAlchemy database models for the media library tables read by the stats queries"""
import datetime
import uuid

from sqlalchemy import Column, String, Float, DateTime, Boolean, JSON
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

def _new_id() -> str:
    return str(uuid.uuid4())

def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC).replace(tzinfo=None)

class Book(Base):
    """Book media item. Only the columns the stats need are mapped."""
    __tablename__ = 'books'

    id = Column(String, primary_key=True, default=_new_id)
    title = Column(String, nullable=False)
    subtitle = Column(String, nullable=True)
    duration = Column(Float, nullable=True)
    narrators = Column(JSON, nullable=True)
    genres = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=_utcnow)

class PlaybackSession(Base):
    """
    One recorded listening interval for a user.
    media_metadata is a denormalised snapshot: {"authors": [{"name": ...}], "narrators": [...], "genres": [...]}
    """
    __tablename__ = 'playback_sessions'

    id = Column(String, primary_key=True, default=_new_id)
    user_id = Column(String, nullable=False, index=True)
    media_item_id = Column(String, nullable=True)
    media_item_type = Column(String, nullable=False)
    display_title = Column(String, nullable=True)
    display_author = Column(String, nullable=True)
    duration = Column(Float, nullable=True)
    time_listening = Column(Float, nullable=True)
    media_metadata = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

class MediaProgress(Base):
    """
    A user's progress through one media item.
    media_item_id points at a book or a podcast episode depending on media_item_type,
    so the link to Book is a typed join rather than a foreign key.
    """
    __tablename__ = 'media_progresses'

    id = Column(String, primary_key=True, default=_new_id)
    user_id = Column(String, nullable=False, index=True)
    media_item_id = Column(String, nullable=False)
    media_item_type = Column(String, nullable=False)
    duration = Column(Float, nullable=True)
    current_time = Column(Float, nullable=True)
    is_finished = Column(Boolean, default=False)
    finished_at = Column(DateTime, nullable=True, index=True)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    book = relationship(
        'Book',
        primaryjoin="and_(foreign(MediaProgress.media_item_id) == Book.id, "
                    "MediaProgress.media_item_type == 'book')",
        viewonly=True,
        uselist=False
    )
