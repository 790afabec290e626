"""Shared fixtures for integration tests

Integration tests call REAL Gemini models on Vertex AI. NO MOCKS.

IMPORTANT: Integration tests FAIL LOUDLY if not configured.
They should NOT be silently skipped - if they fail, something is broken!

To run integration tests:
    export GCP_PROJECT_ID=your-project-id
    gcloud auth application-default login
    pytest tests/integration/

To skip integration tests explicitly:
    pytest tests/unit/                    # Only unit tests
    pytest -m 'not integration'           # Skip integration marker

Requirements:
- GCP_PROJECT_ID environment variable (REQUIRED)
- GCP_REGION environment variable (optional, defaults to us-central1)
- ANSWER_MODEL environment variable (optional, defaults to gemini-2.5-flash)
- Vertex AI API enabled in project
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env.local for integration tests (same as main.py does)
env_local = Path(__file__).parent.parent.parent / ".env.local"
if env_local.exists():
    load_dotenv(env_local, override=True)


@pytest.fixture(scope="session")
def gemini_answerer():
    """
    Real GeminiAnswerer shared across the session.

    FAILS LOUDLY if not configured - integration tests should not be silently skipped!
    """
    from transcript_search.answering import GeminiAnswerer

    project_id = os.getenv("GOOGLE_CLOUD_PROJECT") or os.getenv("GCP_PROJECT_ID")
    location = os.getenv("GCP_REGION", "us-central1")

    if not project_id:
        pytest.fail(
            "\n\n"
            "GCP_PROJECT_ID not set! Integration tests require a real Vertex AI connection.\n"
            "\n"
            "Options:\n"
            "1. Set GCP_PROJECT_ID and configure credentials:\n"
            "   export GCP_PROJECT_ID=your-project-id\n"
            "   gcloud auth application-default login\n"
            "\n"
            "2. Skip integration tests explicitly:\n"
            "   pytest tests/unit/\n"
            "   pytest -m 'not integration'\n"
        )

    answerer = GeminiAnswerer(
        model_name=os.getenv("ANSWER_MODEL", "gemini-2.5-flash"),
        project_id=project_id,
        location=location,
    )
    yield answerer
    answerer.close()
