"""
Keyword search engine for interview transcripts.

Relevance is recomputed by direct text scanning on every query over the
in-memory corpus: no index, no stemming, no fuzzy matching.

Components:
- patterns: literal-to-pattern escaping shared by every matcher
- tokenizer: query → lowercase terms (length > 1)
- scorer: weighted title/description/transcript scoring
- excerpt: sliding-window excerpt with the densest term cluster
- highlight: lossless matched/unmatched span segmentation
- ranking: score, filter, stable sort and truncate a collection
"""

from .tokenizer import tokenize
from .patterns import count_occurrences, literal_pattern, terms_pattern
from .scorer import RelevanceScorer, ScoringWeights, score_relevance
from .excerpt import extract_excerpt
from .highlight import highlight_terms
from .ranking import rank_videos

__all__ = [
    "tokenize",
    "count_occurrences",
    "literal_pattern",
    "terms_pattern",
    "RelevanceScorer",
    "ScoringWeights",
    "score_relevance",
    "extract_excerpt",
    "highlight_terms",
    "rank_videos",
]
