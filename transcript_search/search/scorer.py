"""
Heuristic relevance scorer for transcript search.

Intentionally NOT a statistical IR model (no TF-IDF/BM25): the corpus is
tens of interviews, and a transparent weighting is easy to tune and explain.

Formula:
    score = Σ_term [ 5·in_title + 2·in_description + min(count_in_transcript, 20) ]
            + 15·phrase_in_transcript + 25·phrase_in_title

Where:
    term      = tokenized query term (lowercase, length > 1)
    in_*      = 1 if the term is a substring of the field (case-insensitive)
    count     = non-overlapping literal occurrences in the transcript
    phrase_*  = 1 if the whole lower-cased query appears verbatim in the field

The per-term transcript cap keeps a repeated filler word from dominating
the ranking.
"""

from dataclasses import dataclass
from typing import Optional

from ..models import Video
from .patterns import count_occurrences
from .tokenizer import tokenize

TITLE_TERM_WEIGHT = 5
DESCRIPTION_TERM_WEIGHT = 2
TRANSCRIPT_TERM_CAP = 20
TRANSCRIPT_PHRASE_BONUS = 15
TITLE_PHRASE_BONUS = 25


@dataclass(frozen=True)
class ScoringWeights:
    """Tunable weights for RelevanceScorer"""
    title_term: int = TITLE_TERM_WEIGHT
    description_term: int = DESCRIPTION_TERM_WEIGHT
    transcript_term_cap: int = TRANSCRIPT_TERM_CAP
    transcript_phrase: int = TRANSCRIPT_PHRASE_BONUS
    title_phrase: int = TITLE_PHRASE_BONUS


class RelevanceScorer:
    """
    Weighted multi-field relevance scoring.

    Stateless apart from its weights, so one instance can be shared across
    threads and queries.
    """

    def __init__(self, weights: Optional[ScoringWeights] = None):
        """
        Initialize scorer.

        Args:
            weights: Field weights and bonuses
                Default: title 5, description 2, transcript count capped
                at 20, exact phrase in transcript 15, in title 25
        """
        self.weights = weights or ScoringWeights()

    def score(self, video: Video, query: Optional[str]) -> int:
        """
        Compute the relevance score of a video for a query.

        Args:
            video: Video to score (only title, description and transcript
                are read)
            query: Raw user query

        Returns:
            Non-negative integer score (0 = not relevant)

        Example:
            >>> scorer = RelevanceScorer()
            >>> scorer.score(
            ...     Video(id="x", title="How I bootstrapped my SaaS to $1M",
            ...           transcript="saas " * 5 + "bootstrap " * 3),
            ...     "bootstrap SaaS",
            ... )
            18
        """
        terms = tokenize(query)
        if not terms:
            return 0

        weights = self.weights
        title = (video.title or "").lower()
        description = (video.description or "").lower()
        transcript = (video.transcript or "").lower()

        score = 0
        for term in terms:
            if term in title:
                score += weights.title_term
            if term in description:
                score += weights.description_term
            score += min(count_occurrences(transcript, term), weights.transcript_term_cap)

        phrase = query.lower()
        if phrase in transcript:
            score += weights.transcript_phrase
        if phrase in title:
            score += weights.title_phrase

        return score


_default_scorer = RelevanceScorer()


def score_relevance(video: Video, query: Optional[str]) -> int:
    """Score a video with the default weights (see RelevanceScorer.score)."""
    return _default_scorer.score(video, query)
