"""
Abstract base class for answer synthesis implementations.

An answerer turns a question plus transcript context into a short written
answer. All answerers implement this interface to be swappable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

NOT_CONFIGURED_ANSWER = (
    "AI search is not configured. Set ANSWER_ENABLED=true and ANSWER_MODEL in "
    "environment variables. Keyword search still works!"
)
UNAVAILABLE_ANSWER = "AI search temporarily unavailable. Try keyword search instead."
NO_MATCHES_ANSWER = "No relevant interviews found for this query. Try different keywords."
EMPTY_ANSWER = "No response generated."


@dataclass
class AnswerResult:
    """Synthesized answer"""
    answer: str
    model: str = ""      # Model that produced the answer ("" for fallbacks)
    fallback: bool = False  # True when a fixed message replaced a model answer


class BaseAnswerer(ABC):
    """Abstract base class for answer synthesis implementations."""

    @abstractmethod
    async def answer(self, query: str, context: str) -> AnswerResult:
        """
        Answer a question using transcript context.

        Args:
            query: User question
            context: Transcript excerpts (see build_context)

        Returns:
            AnswerResult; provider errors yield a fallback answer, never raise
        """
        pass

    @abstractmethod
    def get_model_info(self) -> dict:
        """Get information about the answer model."""
        pass

    def close(self):
        """Optional cleanup (close API clients, etc.)"""
        pass
