"""
Transcript corpus loading.

The collector writes a single JSON database:

{
    "metadata": {"channelTitle": "...", "collectedAt": "...", "totalVideos": 42, ...},
    "videos": [
        {"id": "...", "title": "...", "transcript": "...", "transcriptAvailable": true, ...},
        ...
    ]
}

The whole file is loaded into memory once; search scans it directly.
"""

import hashlib
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from .models import CorpusMetadata, Video

logger = logging.getLogger(__name__)


class CorpusError(Exception):
    """Transcript database missing, unreadable or malformed"""


@dataclass
class TranscriptCorpus:
    """In-memory transcript database"""
    metadata: CorpusMetadata
    videos: List[Video] = field(default_factory=list)
    fingerprint: Optional[str] = None  # SHA256 of the source file

    def searchable(self) -> List[Video]:
        """Videos whose transcript was fetched successfully"""
        return [video for video in self.videos if video.transcript_available]

    def get(self, video_id: str) -> Optional[Video]:
        for video in self.videos:
            if video.id == video_id:
                return video
        return None

    @property
    def total_words(self) -> int:
        return sum(video.word_count for video in self.searchable())


def empty_corpus(message: str, status: str = "pending") -> TranscriptCorpus:
    """
    Placeholder corpus used when no transcript data is available.

    Args:
        message: Human-readable reason (shown by /health)
        status: "pending" (nothing collected yet) or "error"
    """
    metadata = CorpusMetadata(
        collected_at=datetime.now(timezone.utc).isoformat(),
        status=status,
        message=message,
    )
    return TranscriptCorpus(metadata=metadata)


def load_corpus(path: Union[str, Path]) -> TranscriptCorpus:
    """
    Load the collector's JSON database.

    Args:
        path: Path to transcripts.json

    Returns:
        TranscriptCorpus with all videos (use .searchable() for search)

    Raises:
        CorpusError: File missing, invalid JSON, or schema mismatch
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise CorpusError(f"Cannot read transcript database {path}: {e}") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CorpusError(f"Transcript database {path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise CorpusError(f"Transcript database {path} must be a JSON object")

    try:
        metadata = CorpusMetadata.model_validate(payload.get("metadata") or {})
        videos = [Video.model_validate(item) for item in payload.get("videos") or []]
    except ValidationError as e:
        raise CorpusError(f"Transcript database {path} failed validation: {e}") from e

    corpus = TranscriptCorpus(
        metadata=metadata,
        videos=videos,
        fingerprint=hashlib.sha256(raw).hexdigest(),
    )

    logger.info(
        f"Loaded {len(videos)} videos ({len(corpus.searchable())} with transcripts, "
        f"{corpus.total_words} words) from {path}"
    )
    if metadata.status and metadata.status != "ok":
        logger.warning(f"Transcript database status={metadata.status}: {metadata.message}")

    return corpus
