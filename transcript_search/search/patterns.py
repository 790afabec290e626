"""
Literal-to-pattern helpers shared by scoring, excerpt location and highlighting.

Query terms come straight from user input, so they are always treated as
literal text: every regex metacharacter is escaped before a term is embedded
in a pattern.

Examples:
- "c++"   → matches "C++" literally (not "c" followed by repetition)
- "$1m"   → matches "$1M" (not an end-of-line anchor)
- "(saas" → no unbalanced-group error
"""

import re
from typing import Iterable


def literal_pattern(term: str) -> re.Pattern:
    """
    Compile a case-insensitive pattern matching `term` as literal text.

    Args:
        term: Raw query term (untrusted)

    Returns:
        Compiled regex

    Examples:
        >>> literal_pattern("a.b").findall("A.B axb")
        ['A.B']
    """
    return re.compile(re.escape(term), re.IGNORECASE)


def terms_pattern(terms: Iterable[str]) -> re.Pattern:
    """
    Compile a capturing alternation of escaped terms (case-insensitive).

    The single capturing group makes `re.split` keep the matched fragments.

    Examples:
        >>> terms_pattern(["saas", "mrr"]).split("SaaS at 10k MRR")
        ['', 'SaaS', ' at 10k ', 'MRR', '']
    """
    alternation = "|".join(re.escape(term) for term in terms)
    return re.compile(f"({alternation})", re.IGNORECASE)


def count_occurrences(text: str, term: str) -> int:
    """
    Count non-overlapping, case-insensitive literal occurrences of a term.

    Examples:
        >>> count_occurrences("Growth, growth, GROWTH", "growth")
        3
        >>> count_occurrences("aaaa", "aa")
        2
    """
    if not text or not term:
        return 0
    return len(literal_pattern(term).findall(text))
