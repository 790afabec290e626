"""
Query tokenizer for transcript search.

Tokenization pipeline:
1. Lowercase conversion
2. Split on runs of whitespace
3. Drop single-character tokens ("a", "I", "&" are noise)

No stemming and no stopword removal: terms are matched as literal
substrings, so "bootstrap" already matches "bootstrapped".
"""

from typing import List, Optional

# Tokens of this length or shorter are dropped
MIN_TERM_LENGTH = 1


def tokenize(query: Optional[str]) -> List[str]:
    """
    Turn a raw query string into an ordered list of lowercase terms.

    Args:
        query: Raw user query (may be empty or None)

    Returns:
        List of lowercase terms, each longer than one character

    Examples:
        >>> tokenize("How to Bootstrap a SaaS")
        ['how', 'to', 'bootstrap', 'saas']

        >>> tokenize("a")
        []

        >>> tokenize("   ")
        []
    """
    if not query:
        return []

    return [term for term in query.lower().split() if len(term) > MIN_TERM_LENGTH]
