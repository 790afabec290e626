"""
Transcript Search - FastAPI application for searching founder interviews

Keyword search over an in-memory corpus of long-form interview transcripts:
- Heuristic relevance ranking (title / description / transcript matches)
- Best-excerpt extraction and term highlighting per result
- Optional AI answer synthesized by Gemini from the top interviews

The corpus is the JSON database written by the transcript collector; it is
loaded once at startup and scanned directly on every query.
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

# Load environment variables from .env.local (local dev) or .env (production)
from dotenv import load_dotenv

env_local = Path(__file__).parent.parent / ".env.local"
env_file = Path(__file__).parent.parent / ".env"

if env_local.exists():
    load_dotenv(env_local, override=True)
elif env_file.exists():
    load_dotenv(env_file, override=True)

# Configure logging: console (brief) + file (detailed)
from transcript_search.logging_config import setup_logging

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
setup_logging(
    log_file=os.getenv("LOG_FILE", "logs/transcript-search.log"),
    console_level=getattr(logging, log_level, logging.INFO),
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)


from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .answering import (
    AnsweringFactory,
    BaseAnswerer,
    NO_MATCHES_ANSWER,
    NOT_CONFIGURED_ANSWER,
    build_context,
)
from .corpus import CorpusError, TranscriptCorpus, empty_corpus, load_corpus
from .formatting import format_date, format_number
from .models import ScoredVideo, Span
from .search import highlight_terms, rank_videos

# Configuration from environment variables
DEFAULT_TRANSCRIPTS_PATH = "data/transcripts.json"
PORT = int(os.getenv("PORT", "8080"))
SEARCH_RESULT_LIMIT = int(os.getenv("SEARCH_RESULT_LIMIT", "25"))
EXCERPT_MAX_LENGTH = int(os.getenv("EXCERPT_MAX_LENGTH", "350"))
SEARCH_WORKERS = int(os.getenv("SEARCH_WORKERS", "0"))
PREVIEW_LENGTH = 250

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.now(timezone.utc)

# Global instances
corpus: TranscriptCorpus = empty_corpus("Transcript database not loaded yet")
answerer: Optional[BaseAnswerer] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the transcript corpus and the optional answerer"""
    global corpus, answerer

    transcripts_path = os.getenv("TRANSCRIPTS_PATH", DEFAULT_TRANSCRIPTS_PATH)
    logger.info(f"Loading transcript database from {transcripts_path}...")
    try:
        corpus = await asyncio.to_thread(load_corpus, transcripts_path)
    except CorpusError as e:
        logger.error(f"Failed to load transcript database: {e}")
        corpus = empty_corpus(str(e), status="error")

    try:
        answerer = AnsweringFactory.create()
    except ValueError as e:
        logger.warning(f"AI answers disabled: {e}")
        answerer = None
    logger.info(f"AI answers {'enabled' if answerer else 'disabled'}")

    yield

    logger.info("Shutting down...")
    AnsweringFactory.cleanup()
    answerer = None


app = FastAPI(
    title="Transcript Search API",
    description="Keyword and AI search over founder interview transcripts",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float
    videos: int
    searchable_videos: int
    corpus_status: Optional[str] = None
    corpus_message: Optional[str] = None
    corpus_fingerprint: Optional[str] = None
    answers_enabled: bool


class SpanItem(BaseModel):
    text: str
    highlight: bool


class SearchRequest(BaseModel):
    query: str = Field(..., description="Free-text query", min_length=1, max_length=500)
    limit: int = Field(
        default=SEARCH_RESULT_LIMIT,
        ge=1,
        le=100,
        description="Maximum number of results"
    )
    excerpt_length: int = Field(
        default=EXCERPT_MAX_LENGTH,
        ge=100,
        le=2000,
        description="Excerpt window length in characters"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "query": "cold email outreach",
                "limit": 10,
            }
        }


class SearchResultItem(BaseModel):
    id: str
    title: str
    url: str
    thumbnail: str
    published_at: Optional[str] = None
    published_formatted: str
    duration_formatted: str
    view_count: int
    views_formatted: str
    word_count: int
    score: int
    excerpt: str
    highlights: List[SpanItem]


class SearchResponse(BaseModel):
    query: str
    results: List[SearchResultItem]
    total: int


class AiSearchRequest(BaseModel):
    query: str = Field(..., description="Question about the interviews", min_length=1, max_length=500)


class AiSearchResponse(BaseModel):
    query: str
    answer: str
    model: Optional[str] = None
    fallback: bool = False
    results: List[SearchResultItem]
    total: int


class HighlightRequest(BaseModel):
    text: str = Field(..., description="Text to segment")
    query: str = Field(default="", description="Query whose terms are highlighted")


class HighlightResponse(BaseModel):
    spans: List[SpanItem]


class VideoSummary(BaseModel):
    id: str
    title: str
    url: str
    published_formatted: str
    duration_formatted: str
    views_formatted: str
    word_count: int
    preview: str


class VideoListResponse(BaseModel):
    total: int
    total_words: int
    videos: List[VideoSummary]


def _span_items(spans: List[Span]) -> List[SpanItem]:
    # Empty fragments carry nothing to display
    return [SpanItem(text=span.text, highlight=span.highlight) for span in spans if span.text]


def _result_item(item: ScoredVideo, query: str) -> SearchResultItem:
    video = item.video
    return SearchResultItem(
        id=video.id,
        title=video.title,
        url=video.url,
        thumbnail=video.thumbnail,
        published_at=video.published_at,
        published_formatted=format_date(video.published_at),
        duration_formatted=video.duration_formatted,
        view_count=video.view_count,
        views_formatted=format_number(video.view_count),
        word_count=video.word_count,
        score=item.score,
        excerpt=item.excerpt,
        highlights=_span_items(highlight_terms(item.excerpt, query)),
    )


async def _ranked(query: str, limit: int, excerpt_length: int) -> List[ScoredVideo]:
    # CPU-bound scan: keep it off the event loop
    return await asyncio.to_thread(
        rank_videos,
        corpus.searchable(),
        query,
        limit,
        excerpt_length,
        None,
        SEARCH_WORKERS,
    )


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "Transcript Search API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check: degraded when the transcript database failed to load"""
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()
    corpus_status = corpus.metadata.status

    return HealthResponse(
        status="degraded" if corpus_status == "error" else "healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME.isoformat(),
        uptime_seconds=round(uptime, 2),
        videos=len(corpus.videos),
        searchable_videos=len(corpus.searchable()),
        corpus_status=corpus_status,
        corpus_message=corpus.metadata.message,
        corpus_fingerprint=corpus.fingerprint,
        answers_enabled=answerer is not None,
    )


@app.get("/v1/videos", response_model=VideoListResponse)
async def list_videos():
    """List every interview with a transcript, newest first as collected"""
    videos = corpus.searchable()
    return VideoListResponse(
        total=len(videos),
        total_words=corpus.total_words,
        videos=[
            VideoSummary(
                id=video.id,
                title=video.title,
                url=video.url,
                published_formatted=format_date(video.published_at),
                duration_formatted=video.duration_formatted,
                views_formatted=format_number(video.view_count),
                word_count=video.word_count,
                preview=video.transcript[:PREVIEW_LENGTH] + "...",
            )
            for video in videos
        ],
    )


@app.post("/v1/search", response_model=SearchResponse)
async def search(request: SearchRequest):
    """
    Keyword search over interview transcripts.

    **Scoring (per query term):**
    - +5 term in title, +2 term in description
    - +1 per transcript occurrence (capped at 20 per term)
    - +15 exact query phrase in transcript, +25 in title

    Videos scoring 0 are dropped; ties keep collection order.
    Each result carries the densest excerpt and its highlight spans.
    """
    ranked = await _ranked(request.query, request.limit, request.excerpt_length)
    results = [_result_item(item, request.query) for item in ranked]

    logger.info(f"Search {request.query!r}: {len(results)} results")
    return SearchResponse(query=request.query, results=results, total=len(results))


@app.post("/v1/ai-search", response_model=AiSearchResponse, response_model_exclude_none=True)
async def ai_search(request: AiSearchRequest):
    """
    Keyword search plus an AI answer synthesized from the top 6 interviews.

    The answer always degrades to a fixed message (no matches, not
    configured, provider error); keyword results are returned regardless.
    """
    ranked = await _ranked(request.query, SEARCH_RESULT_LIMIT, EXCERPT_MAX_LENGTH)
    results = [_result_item(item, request.query) for item in ranked]

    if not ranked:
        answer, model, fallback = NO_MATCHES_ANSWER, None, True
    elif answerer is None:
        answer, model, fallback = NOT_CONFIGURED_ANSWER, None, True
    else:
        result = await answerer.answer(request.query, build_context(ranked))
        answer, model, fallback = result.answer, result.model or None, result.fallback

    logger.info(f"AI search {request.query!r}: {len(results)} results, fallback={fallback}")
    return AiSearchResponse(
        query=request.query,
        answer=answer,
        model=model,
        fallback=fallback,
        results=results,
        total=len(results),
    )


@app.post("/v1/highlight", response_model=HighlightResponse)
async def highlight(request: HighlightRequest):
    """Split text into highlighted / plain spans for the query terms"""
    return HighlightResponse(spans=_span_items(highlight_terms(request.text, request.query)))


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "transcript_search.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,  # Development only
    )
