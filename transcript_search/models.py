"""
Data models for the transcript database and search results.

The collector writes camelCase JSON (`publishedAt`, `viewCount`, ...);
`Video` and `CorpusMetadata` accept both the aliases and the snake_case field
names.
"""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Video(BaseModel):
    """One transcript record (a long-form interview video)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str = ""
    description: str = ""
    transcript: str = ""
    published_at: Optional[str] = Field(default=None, alias="publishedAt")
    thumbnail: str = ""
    url: str = ""
    duration_seconds: int = Field(default=0, alias="durationSeconds")
    duration_formatted: str = Field(default="", alias="durationFormatted")
    view_count: int = Field(default=0, alias="viewCount")
    transcript_available: bool = Field(default=False, alias="transcriptAvailable")
    word_count: int = Field(default=0, alias="wordCount")

    @field_validator("title", "description", "transcript", "thumbnail", "url", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        # The collector emits null for missing snippet fields
        return "" if value is None else value


class CorpusMetadata(BaseModel):
    """Collection summary written by the collector."""

    model_config = ConfigDict(populate_by_name=True)

    channel_url: Optional[str] = Field(default=None, alias="channelUrl")
    channel_title: Optional[str] = Field(default=None, alias="channelTitle")
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    collected_at: Optional[str] = Field(default=None, alias="collectedAt")
    total_videos: int = Field(default=0, alias="totalVideos")
    with_transcripts: int = Field(default=0, alias="withTranscripts")
    failed_transcripts: int = Field(default=0, alias="failedTranscripts")
    total_words: int = Field(default=0, alias="totalWords")
    status: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class ScoredVideo:
    """A video joined with its relevance score and best excerpt for one query"""
    video: Video
    score: int
    excerpt: str


@dataclass(frozen=True)
class Span:
    """Fragment of a text, flagged when it is a query-term match"""
    text: str
    highlight: bool = False


def join_spans(spans: List[Span]) -> str:
    """Reassemble the original text from its spans."""
    return "".join(span.text for span in spans)
