"""Domain models for listening sessions and finished media progress"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Any

from listening_stats.config import MEDIA_TYPE_BOOK

def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []

@dataclass
class Author:
    """Author entry of a session's metadata snapshot"""
    name: str

@dataclass
class MediaMetadata:
    """Denormalised media metadata captured with a listening session"""
    authors: List[Author] = field(default_factory=list)
    narrators: List[str] = field(default_factory=list)
    genres: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, raw: Any) -> 'MediaMetadata':
        """Build from the stored JSON blob, treating anything malformed as empty"""
        if not isinstance(raw, dict):
            return cls()

        authors = []
        for author in _as_list(raw.get('authors')):
            name = author.get('name') if isinstance(author, dict) else None
            if isinstance(name, str):
                authors.append(Author(name=name))

        return cls(
            authors=authors,
            narrators=[n for n in _as_list(raw.get('narrators')) if isinstance(n, str)],
            genres=[g for g in _as_list(raw.get('genres')) if isinstance(g, str)]
        )

@dataclass
class ListeningSession:
    """One listening interval, as read from the session store"""
    user_id: str
    media_item_type: str
    created_at: datetime
    time_listening: Optional[float] = None
    media_metadata: MediaMetadata = field(default_factory=MediaMetadata)

    @property
    def is_book(self) -> bool:
        return self.media_item_type == MEDIA_TYPE_BOOK

    @property
    def listened_seconds(self) -> float:
        return self.time_listening or 0

    @classmethod
    def from_row(cls, row) -> 'ListeningSession':
        """Convert a PlaybackSession row"""
        return cls(
            user_id=row.user_id,
            media_item_type=row.media_item_type,
            created_at=row.created_at,
            time_listening=row.time_listening,
            media_metadata=MediaMetadata.from_json(row.media_metadata)
        )

@dataclass
class MediaItemRef:
    """Identity of the finished media item"""
    id: str
    title: str

@dataclass
class MediaProgressRecord:
    """A finished book progress joined with its book"""
    user_id: str
    media_item_type: str
    finished_at: datetime
    media_item: MediaItemRef
    duration: Optional[float] = None

    @classmethod
    def from_row(cls, row) -> 'MediaProgressRecord':
        """Convert a MediaProgress row with its book loaded"""
        return cls(
            user_id=row.user_id,
            media_item_type=row.media_item_type,
            finished_at=row.finished_at,
            media_item=MediaItemRef(id=row.book.id, title=row.book.title),
            duration=row.duration
        )
