"""
Highlight segmenter - splits text into matched/unmatched spans for display.

The split is lossless: joining the span texts gives back the input, and
empty fragments between adjacent matches are kept.
"""

from typing import List, Optional

from ..models import Span
from .patterns import terms_pattern
from .tokenizer import tokenize


def highlight_terms(text: Optional[str], query: Optional[str]) -> List[Span]:
    """
    Partition text into alternating non-matching and matching spans.

    Args:
        text: Text to segment (usually an excerpt)
        query: Raw user query

    Returns:
        Ordered spans; a single non-highlighted span when there is nothing
        to match

    Examples:
        >>> [(s.text, s.highlight) for s in highlight_terms("Grow MRR fast", "mrr")]
        [('Grow ', False), ('MRR', True), (' fast', False)]
    """
    text = text or ""
    if not text or not query:
        return [Span(text=text, highlight=False)]

    terms = tokenize(query)
    if not terms:
        return [Span(text=text, highlight=False)]

    pattern = terms_pattern(terms)
    fragments = pattern.split(text)

    return [
        Span(
            text=fragment,
            highlight=bool(fragment) and (
                pattern.fullmatch(fragment) is not None
                or fragment.lower() in terms
            ),
        )
        for fragment in fragments
    ]
