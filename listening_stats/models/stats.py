"""Yearly stats report model definitions"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class _ReportModel(BaseModel):
    """Serialises with camelCase keys, accepts either spelling on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

class ListenedEntry(_ReportModel):
    """Author, narrator or genre with the most listening time"""
    name: str = Field(description="Author name, narrator name or genre")
    time: int = Field(description="Accumulated listening time in seconds (rounded)")
    pretty_time: str = Field(description="Human readable listening time")

class ListenedMonth(_ReportModel):
    """Month with the most listening time"""
    month: int = Field(description="Month index, 0 = January")
    time: int = Field(description="Accumulated listening time in seconds (rounded)")
    pretty_time: str = Field(description="Human readable listening time")

class FinishedBook(_ReportModel):
    """Longest audiobook finished during the year"""
    id: str = Field(description="Book ID")
    title: str = Field(description="Book title")
    duration_seconds: int = Field(description="Book duration in seconds (rounded)")
    duration_pretty: str = Field(description="Human readable book duration")
    finished_at: datetime = Field(description="When the book was finished")

class YearlyStatsReport(_ReportModel):
    """
    Yearly listening summary for one user.

    Totals are rounded seconds. The most_listened_* descriptors are None when
    nothing was listened to in that category, longest_audiobook_finished is None
    when no finished book has a known duration.
    """
    total_listening_sessions: int = 0
    total_listening_time: int = 0
    total_listening_time_pretty: str
    total_book_listening_time: int = 0
    total_book_listening_time_pretty: str
    total_podcast_listening_time: int = 0
    total_podcast_listening_time_pretty: str
    most_listened_author: Optional[ListenedEntry] = None
    most_listened_narrator: Optional[ListenedEntry] = None
    most_listened_genre: Optional[ListenedEntry] = None
    most_listened_month: Optional[ListenedMonth] = None
    num_books_finished: int = 0
    longest_audiobook_finished: Optional[FinishedBook] = None
