"""
AI answer synthesis over the best-matching interviews.

Usage:
    from transcript_search.answering import build_context, get_answerer

    answerer = get_answerer()
    if answerer:
        result = await answerer.answer(query, build_context(ranked))
"""

from typing import Optional
from .base import (
    AnswerResult,
    BaseAnswerer,
    EMPTY_ANSWER,
    NO_MATCHES_ANSWER,
    NOT_CONFIGURED_ANSWER,
    UNAVAILABLE_ANSWER,
)
from .context import build_context
from .gemini import GeminiAnswerer
from .factory import AnsweringFactory


def get_answerer(force_reload: bool = False) -> Optional[BaseAnswerer]:
    """
    Get configured answerer instance (factory convenience function).

    Returns None if AI answers disabled via ANSWER_ENABLED=false
    """
    return AnsweringFactory.create(force_reload=force_reload)


__all__ = [
    'AnswerResult',
    'BaseAnswerer',
    'GeminiAnswerer',
    'build_context',
    'get_answerer',
    'EMPTY_ANSWER',
    'NO_MATCHES_ANSWER',
    'NOT_CONFIGURED_ANSWER',
    'UNAVAILABLE_ANSWER',
]
