"""
Unit tests for sliding-window excerpt extraction.
"""

import pytest
from transcript_search.search.excerpt import extract_excerpt, ELLIPSIS


def _cluster_text():
    """~1000 chars with six 'pricing' mentions between chars 400 and 448"""
    return "word " * 80 + "pricing " * 6 + "word " * 110


class TestExtractExcerpt:
    """Test window selection, boundary cleanup and ellipsis markers"""

    def test_empty_text(self):
        assert extract_excerpt("", "pricing") == ""
        assert extract_excerpt(None, "pricing") == ""

    def test_blank_query_returns_head(self):
        """Test blank query returns the first max_length chars"""
        text = "x" * 500
        assert extract_excerpt(text, "") == "x" * 350 + ELLIPSIS
        assert extract_excerpt(text, "   ") == "x" * 350 + ELLIPSIS

    def test_blank_query_short_text_untouched(self):
        assert extract_excerpt("short transcript", "") == "short transcript"

    def test_short_text_returned_whole(self):
        """Test text shorter than the scan tail is returned as-is"""
        text = "We raised our pricing."
        assert extract_excerpt(text, "pricing") == text

    def test_selects_densest_cluster(self):
        """Test window moves to the mid-document cluster with ellipses on both sides"""
        text = _cluster_text()
        excerpt = extract_excerpt(text, "pricing", 350)

        assert excerpt.startswith(ELLIPSIS)
        assert excerpt.endswith(ELLIPSIS)
        assert excerpt.count("pricing") == 6

        inner = excerpt[len(ELLIPSIS):-len(ELLIPSIS)]
        start = text.find(inner)
        assert start > 0
        # Starts right after whitespace, ends right before whitespace
        assert text[start - 1] == " "
        assert text[start + len(inner)] == " "

    def test_no_match_defaults_to_start(self):
        """Test position 0 is used when no window contains a term"""
        text = "word " * 200
        excerpt = extract_excerpt(text, "pricing", 350)

        assert not excerpt.startswith(ELLIPSIS)
        # Trimmed at the last space before the 350-char cutoff
        assert excerpt == text[:349] + ELLIPSIS

    def test_tie_keeps_earliest_window(self):
        """Test equal-density windows resolve to the first one scanned"""
        text = "word " * 40 + "pricing " + "word " * 100 + "pricing " + "word " * 60
        excerpt = extract_excerpt(text, "pricing", 350)

        # Window at 0 already holds one mention; later windows only tie
        assert not excerpt.startswith(ELLIPSIS)
        assert excerpt.count("pricing") == 1

    def test_hard_cutoff_without_whitespace(self):
        """Test a text with no word boundaries keeps the hard cut"""
        text = "x" * 1000
        excerpt = extract_excerpt(text, "xx", 350)
        assert excerpt == "x" * 350 + ELLIPSIS

    def test_case_insensitive_window_scoring(self):
        text = "word " * 80 + "PRICING Pricing pricing " + "word " * 120
        excerpt = extract_excerpt(text, "pricing")
        assert excerpt.startswith(ELLIPSIS)
        assert "PRICING Pricing pricing" in excerpt

    def test_metacharacter_query(self):
        """Test untrusted query text never breaks pattern compilation"""
        text = "word " * 80 + "we wrote c++ (pricing) " + "word " * 120
        excerpt = extract_excerpt(text, "c++ (pricing)")
        assert "c++ (pricing)" in excerpt

    @pytest.mark.parametrize("max_length", [100, 200, 350, 500])
    @pytest.mark.parametrize("query", ["", "pricing", "word pricing", "zzz", "a"])
    def test_length_bound(self, max_length, query):
        """Test excerpt never exceeds max_length plus two ellipsis markers"""
        excerpt = extract_excerpt(_cluster_text(), query, max_length)
        assert len(excerpt) <= max_length + 2 * len(ELLIPSIS)
