"""Unit test configuration - sample corpus and isolated environment"""

import json
import os
import tempfile
from pathlib import Path

import pytest

# Set env vars BEFORE any test imports transcript_search.main
# (main configures logging and reads limits at module level)
os.environ.setdefault("ANSWER_ENABLED", "false")
os.environ.setdefault(
    "LOG_FILE",
    str(Path(tempfile.gettempdir()) / "transcript-search-tests" / "transcript-search.log"),
)

from transcript_search.models import Video


FILLER = (
    "we talked about hiring our first engineers and how the team grew over "
    "the years while the product slowly found its audience in the market "
)


@pytest.fixture
def make_video():
    """Factory for Video objects with sensible defaults"""
    def _make(video_id="v1", title="", description="", transcript="", **extra):
        return Video(
            id=video_id,
            title=title,
            description=description,
            transcript=transcript,
            transcript_available=extra.pop("transcript_available", True),
            **extra,
        )
    return _make


@pytest.fixture
def corpus_payload():
    """Collector-style JSON database (camelCase keys)"""
    return {
        "metadata": {
            "channelUrl": "https://www.youtube.com/@starterstory",
            "channelTitle": "Starter Story",
            "collectedAt": "2025-01-10T08:00:00.000Z",
            "totalVideos": 4,
            "withTranscripts": 3,
            "failedTranscripts": 1,
            "totalWords": 3000,
        },
        "videos": [
            {
                "id": "saas1",
                "title": "How I bootstrapped my SaaS to $1M",
                "description": "Bootstrapping a B2B SaaS without investors.",
                "publishedAt": "2024-03-05T15:00:00Z",
                "thumbnail": "https://i.ytimg.com/vi/saas1/hqdefault.jpg",
                "url": "https://www.youtube.com/watch?v=saas1",
                "durationSeconds": 1325,
                "durationFormatted": "22:05",
                "viewCount": 1234567,
                "transcriptAvailable": True,
                "transcript": FILLER * 3 + "our pricing was too low so we raised pricing twice " + FILLER * 3,
                "wordCount": 1200,
            },
            {
                "id": "agency",
                "title": "Starting an agency from my bedroom",
                "description": "Cold email and pricing lessons.",
                "publishedAt": "2024-02-01T10:00:00Z",
                "url": "https://www.youtube.com/watch?v=agency",
                "durationSeconds": 900,
                "durationFormatted": "15:00",
                "viewCount": 15400,
                "transcriptAvailable": True,
                "transcript": FILLER * 2 + "cold email got us the first clients " + FILLER,
                "wordCount": 800,
            },
            {
                "id": "ecom",
                "title": "Ecommerce brand doing $50k/month",
                "description": "",
                "publishedAt": "2023-12-24T09:00:00Z",
                "url": "https://www.youtube.com/watch?v=ecom",
                "durationSeconds": 600,
                "durationFormatted": "10:00",
                "viewCount": 999,
                "transcriptAvailable": True,
                "transcript": FILLER * 4,
                "wordCount": 1000,
            },
            {
                "id": "missing",
                "title": "Pricing masterclass",
                "description": None,
                "publishedAt": "2023-11-01T09:00:00Z",
                "transcriptAvailable": False,
                "transcript": "",
                "wordCount": 0,
            },
        ],
    }


@pytest.fixture
def transcripts_file(tmp_path, corpus_payload):
    """corpus_payload written to a temporary transcripts.json"""
    path = tmp_path / "transcripts.json"
    path.write_text(json.dumps(corpus_payload), encoding="utf-8")
    return path
