"""Display formatting for view counts, publish dates and durations"""

import math
import re
from datetime import datetime
from typing import Optional

_ISO_DURATION = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def format_number(n: Optional[int]) -> str:
    """
    Compact view count.

    Examples:
        >>> format_number(1_234_567)
        '1.2M'
        >>> format_number(15_400)
        '15K'
        >>> format_number(None)
        '0'
    """
    if not n:
        return "0"
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        # Round half up (1500 → 2K)
        return f"{math.floor(n / 1_000 + 0.5)}K"
    return str(n)


def format_date(value: Optional[str]) -> str:
    """
    Format an ISO 8601 timestamp as 'Jan 5, 2024'.

    Returns the input unchanged when it cannot be parsed.
    """
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def parse_duration(iso8601: Optional[str]) -> int:
    """
    Convert an ISO 8601 duration ('PT1H2M3S') to seconds.

    Examples:
        >>> parse_duration("PT12M5S")
        725
        >>> parse_duration("P1D")
        0
    """
    match = _ISO_DURATION.match(iso8601 or "")
    if not match:
        return 0
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def format_duration(seconds: int) -> str:
    """'1:02:03' for an hour or more, otherwise '12:05'."""
    hours, rest = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
