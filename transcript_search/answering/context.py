"""
Prompt context built from the top-ranked interviews.

Format (per interview, separated by "\\n\\n---\\n\\n"):

    [Interview 1: "How I bootstrapped my SaaS to $1M" — Jan 5, 2024]
    <first 3000 transcript characters>
"""

from typing import List

from ..formatting import format_date
from ..models import ScoredVideo

CONTEXT_DOCUMENTS = 6
CONTEXT_CHARS_PER_DOCUMENT = 3000
CONTEXT_SEPARATOR = "\n\n---\n\n"


def build_context(
    results: List[ScoredVideo],
    max_documents: int = CONTEXT_DOCUMENTS,
    max_chars: int = CONTEXT_CHARS_PER_DOCUMENT
) -> str:
    """
    Concatenate the leading transcript text of the best matches.

    Falls back to the excerpt when a video has no transcript text.
    Returns "" when there are no results.
    """
    blocks = []
    for n, item in enumerate(results[:max_documents], start=1):
        video = item.video
        text = video.transcript[:max_chars] or item.excerpt
        header = f'[Interview {n}: "{video.title}" — {format_date(video.published_at)}]'
        blocks.append(f"{header}\n{text}")
    return CONTEXT_SEPARATOR.join(blocks)
