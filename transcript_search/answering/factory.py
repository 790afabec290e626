"""
Factory to create answerer instances based on configuration.
"""

from typing import Optional
import os
import logging

from .base import BaseAnswerer
from .gemini import GeminiAnswerer

logger = logging.getLogger(__name__)


class AnsweringFactory:
    """Factory to create answerer instances based on configuration."""

    _instance: Optional[BaseAnswerer] = None  # Singleton cache

    @classmethod
    def create(cls, force_reload: bool = False) -> Optional[BaseAnswerer]:
        """
        Create answerer based on environment configuration.

        Config (env vars):
            ANSWER_ENABLED: "true" to enable AI answers
            ANSWER_MODEL: Gemini model identifier
            GCP_PROJECT_ID / GOOGLE_CLOUD_PROJECT: Vertex AI project
            GCP_REGION / GOOGLE_CLOUD_LOCATION: Vertex AI location

        Args:
            force_reload: If True, recreate instance even if cached

        Returns:
            Answerer instance, or None if disabled
        """
        if cls._instance is not None and not force_reload:
            logger.info(f"Returning cached answerer instance: {cls._instance}")
            return cls._instance

        enabled_value = os.getenv("ANSWER_ENABLED")
        if not enabled_value:
            raise ValueError("ANSWER_ENABLED environment variable is required")
        enabled = enabled_value.lower() == "true"
        logger.info(f"Answerer config check: ANSWER_ENABLED={enabled_value} (enabled={enabled})")

        if not enabled:
            return None

        model = os.getenv("ANSWER_MODEL")
        if not model:
            raise ValueError("ANSWER_MODEL environment variable is required when AI answers enabled")

        project_id = os.getenv("GOOGLE_CLOUD_PROJECT") or os.getenv("GCP_PROJECT_ID")
        location = os.getenv("GOOGLE_CLOUD_LOCATION") or os.getenv("GCP_REGION")
        if not location:
            raise ValueError("GCP_REGION or GOOGLE_CLOUD_LOCATION environment variable is required")

        try:
            logger.info(f"Creating Gemini answerer: {model}")
            cls._instance = GeminiAnswerer(
                model_name=model,
                project_id=project_id,
                location=location
            )
        except Exception as e:
            logger.error(f"Failed to create answerer ({model}): {e}")
            raise

        return cls._instance

    @classmethod
    def cleanup(cls):
        """Cleanup cached answerer instance."""
        if cls._instance is not None:
            logger.info("Cleaning up answerer instance")
            cls._instance.close()
            cls._instance = None
