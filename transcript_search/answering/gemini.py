"""
Gemini answer synthesis using Google GenAI SDK.

Sends the top interview transcripts plus the user's question to Gemini and
returns a short analyst-style answer. Keyword results are always shown next
to the answer, so any provider failure degrades to a fixed message instead of
an HTTP error.
"""

import asyncio
import logging
import os

from google import genai
from google.genai import types

from .base import BaseAnswerer, AnswerResult, EMPTY_ANSWER, UNAVAILABLE_ANSWER

logger = logging.getLogger(__name__)


class GeminiAnswerer(BaseAnswerer):
    """
    LLM answer synthesis with Gemini models on Vertex AI.

    One generate_content call per question; the blocking SDK call runs in a
    worker thread so the event loop stays free.
    """

    SYSTEM_PROMPT = """You are an expert analyst helping a user extract actionable wisdom from founder interview transcripts.

Your job:
- Synthesize insights across multiple interviews to answer the user's question
- Reference specific founders/companies by name when possible
- Be concise, practical, and actionable
- Use concrete numbers and examples from the transcripts
- If the transcripts don't have relevant info, say so honestly
- Format with short paragraphs, no bullet points unless specifically listing items"""

    USER_PROMPT_TEMPLATE = """Based on these founder interview transcripts:

{context}

---

Question: {query}"""

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        project_id: str = None,
        location: str = "us-central1",
        temperature: float = 0.3,
        max_output_tokens: int = 1200
    ):
        """
        Initialize Gemini answerer.

        Args:
            model_name: Gemini model to use (default: gemini-2.5-flash)
            project_id: GCP project ID (reads from GOOGLE_CLOUD_PROJECT env if not provided)
            location: GCP region (default: us-central1)
            temperature: Sampling temperature
            max_output_tokens: Answer length limit
        """
        self.model_name = model_name
        self.project_id = project_id or os.getenv("GOOGLE_CLOUD_PROJECT")
        self.location = location
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

        if not self.project_id:
            raise ValueError(
                "GCP project ID required. Set GOOGLE_CLOUD_PROJECT env var or pass project_id parameter."
            )

        try:
            self.client = genai.Client(
                vertexai=True,
                project=self.project_id,
                location=self.location
            )
            logger.info(
                f"Gemini answerer initialized: {model_name} "
                f"(project={self.project_id}, location={self.location})"
            )
        except Exception as e:
            logger.error(f"Failed to initialize Gemini client: {e}")
            raise

    def _generate(self, query: str, context: str) -> str:
        response = self.client.models.generate_content(
            model=self.model_name,
            contents=self.USER_PROMPT_TEMPLATE.format(context=context, query=query),
            config=types.GenerateContentConfig(
                system_instruction=self.SYSTEM_PROMPT,
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            )
        )
        return (response.text or "").strip()

    async def answer(self, query: str, context: str) -> AnswerResult:
        """Answer a question from transcript context with Gemini."""
        logger.info(
            f"Generating answer with Gemini ({self.model_name}): "
            f"query={query!r}, context={len(context)} chars"
        )

        try:
            text = await asyncio.to_thread(self._generate, query, context)
        except Exception as e:
            logger.error(f"Gemini API error: {e}")
            return AnswerResult(answer=UNAVAILABLE_ANSWER, model=self.model_name, fallback=True)

        if not text:
            logger.warning("Gemini returned an empty answer")
            return AnswerResult(answer=EMPTY_ANSWER, model=self.model_name, fallback=True)

        logger.debug(f"Gemini answer (first 200 chars): {text[:200]}")
        return AnswerResult(answer=text, model=self.model_name)

    def get_model_info(self) -> dict:
        """Get information about the Gemini answerer."""
        return {
            "name": self.model_name,
            "type": "gemini-llm",
            "provider": "Google Vertex AI",
            "project": self.project_id,
            "location": self.location,
            "temperature": self.temperature,
            "max_output_tokens": self.max_output_tokens,
        }

    def close(self):
        """Cleanup (Gemini client doesn't require explicit cleanup)."""
        logger.info("Gemini answerer closed")
