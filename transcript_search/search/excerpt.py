"""
Excerpt locator - finds the transcript window densest in query terms.

Algorithm:
1. Slide a `max_length` window over the lower-cased text in 30-char steps
   (stop while fewer than 100 chars remain after the window start)
2. Window score = total literal occurrences of all query terms
3. Keep the first window with the highest score (earliest wins ties)
4. Snap the start back to a word boundary, trim the end at the last word
   boundary if it lies past 70% of the window
5. Mark truncation on either side with "..."

Brute force: O(len(text) / step × terms × max_length). Fine for interview
transcripts of a few thousand words.
"""

from typing import Optional

from .patterns import count_occurrences
from .tokenizer import tokenize

ELLIPSIS = "..."
DEFAULT_EXCERPT_LENGTH = 350
WINDOW_STEP = 30
MIN_WINDOW_TAIL = 100
END_TRIM_RATIO = 0.7


def _last_whitespace(text: str, end: int) -> int:
    """Index of the last whitespace char in text[:end], -1 if none."""
    for i in range(min(end, len(text)) - 1, -1, -1):
        if text[i].isspace():
            return i
    return -1


def _densest_window(lower: str, terms, max_length: int) -> int:
    best_pos = 0
    best_score = 0

    for start in range(0, len(lower) - MIN_WINDOW_TAIL, WINDOW_STEP):
        window = lower[start:start + max_length]
        window_score = sum(count_occurrences(window, term) for term in terms)
        if window_score > best_score:
            best_score = window_score
            best_pos = start

    return best_pos


def extract_excerpt(
    text: Optional[str],
    query: Optional[str],
    max_length: int = DEFAULT_EXCERPT_LENGTH
) -> str:
    """
    Extract the most relevant excerpt of a transcript for a query.

    Args:
        text: Full transcript text
        query: Raw user query
        max_length: Window length in characters (default: 350)

    Returns:
        Excerpt, at most max_length chars plus a leading and trailing "..."
        Empty string if text is empty

    Example:
        >>> extract_excerpt("short transcript", "pricing")
        'short transcript'
    """
    if not text:
        return ""

    if not query or not query.strip():
        return text[:max_length] + (ELLIPSIS if len(text) > max_length else "")

    terms = tokenize(query)
    best_pos = _densest_window(text.lower(), terms, max_length)

    # Start just after the whitespace at or before best_pos
    start = _last_whitespace(text, best_pos + 1) + 1
    excerpt = text[start:start + max_length]

    last_space = _last_whitespace(excerpt, len(excerpt))
    if last_space > max_length * END_TRIM_RATIO:
        excerpt = excerpt[:last_space]

    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if start + len(excerpt) < len(text) else ""

    return prefix + excerpt + suffix
