"""Unit tests for display formatting helpers"""

import pytest

from transcript_search.formatting import format_date, format_duration, format_number, parse_duration


class TestFormatNumber:

    @pytest.mark.parametrize("value,expected", [
        (None, "0"),
        (0, "0"),
        (999, "999"),
        (1_000, "1K"),
        (1_500, "2K"),
        (15_400, "15K"),
        (999_999, "1000K"),
        (1_000_000, "1.0M"),
        (1_234_567, "1.2M"),
    ])
    def test_format_number(self, value, expected):
        assert format_number(value) == expected


class TestFormatDate:

    def test_iso_with_z(self):
        assert format_date("2024-01-05T15:30:00Z") == "Jan 5, 2024"

    def test_date_only(self):
        assert format_date("2023-12-24") == "Dec 24, 2023"

    def test_empty(self):
        assert format_date("") == ""
        assert format_date(None) == ""

    def test_unparseable_returned_as_is(self):
        assert format_date("sometime last year") == "sometime last year"


class TestDurations:

    @pytest.mark.parametrize("value,expected", [
        ("PT12M5S", 725),
        ("PT1H2M3S", 3723),
        ("PT45S", 45),
        ("PT2H", 7200),
        ("PT0S", 0),
        ("P1D", 0),
        ("", 0),
        (None, 0),
    ])
    def test_parse_duration(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0:00"),
        (65, "1:05"),
        (725, "12:05"),
        (3723, "1:02:03"),
    ])
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected
