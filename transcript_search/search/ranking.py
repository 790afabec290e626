"""
Ranking pipeline - scores a video collection and keeps the best matches.

Steps:
1. Score every video and extract its excerpt
2. Drop videos scoring 0
3. Stable sort by score (descending): equal scores keep input order
4. Truncate to `limit`

Per-video work is independent, so it can be fanned out over a thread pool;
results are collected in input order before sorting, which keeps the output
identical to the sequential path.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from ..models import ScoredVideo, Video
from .excerpt import DEFAULT_EXCERPT_LENGTH, extract_excerpt
from .scorer import RelevanceScorer

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 25


def rank_videos(
    videos: Iterable[Video],
    query: Optional[str],
    limit: int = DEFAULT_RESULT_LIMIT,
    max_length: int = DEFAULT_EXCERPT_LENGTH,
    scorer: Optional[RelevanceScorer] = None,
    workers: Optional[int] = None
) -> List[ScoredVideo]:
    """
    Rank videos by relevance to a query.

    Args:
        videos: Video collection (not modified)
        query: Raw user query
        limit: Maximum number of results (default: 25)
        max_length: Excerpt window length (default: 350)
        scorer: Relevance scorer (default weights if None)
        workers: Thread pool size for per-video scoring
            None or <= 1: score inline

    Returns:
        Scored videos with score > 0, highest first, at most `limit`

    Example:
        >>> results = rank_videos(corpus.searchable(), "cold outreach")
        >>> [(r.video.title, r.score) for r in results[:2]]
        [('How I got my first 100 customers', 57), ('Sales playbook', 31)]
    """
    scorer = scorer or RelevanceScorer()
    videos = list(videos)

    def score_one(video: Video) -> ScoredVideo:
        return ScoredVideo(
            video=video,
            score=scorer.score(video, query),
            excerpt=extract_excerpt(video.transcript, query, max_length),
        )

    if workers and workers > 1 and len(videos) > 1:
        with ThreadPoolExecutor(max_workers=min(workers, len(videos))) as pool:
            scored = list(pool.map(score_one, videos))
    else:
        scored = [score_one(video) for video in videos]

    matches = [item for item in scored if item.score > 0]
    matches.sort(key=lambda item: item.score, reverse=True)

    logger.debug(
        f"Ranked {len(videos)} videos for query {query!r}: "
        f"{len(matches)} matches, returning {min(len(matches), max(limit, 0))}"
    )

    return matches[:max(limit, 0)]
