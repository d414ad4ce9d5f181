"""Text-generation seam.

Everything in the workflow talks to a ``TextGenerator``: prompt in, raw text
out. The production implementation is Google Gemini; tests plug in a stub
through FastAPI's dependency overrides.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional, Protocol

import google.generativeai as genai

from errors import UpstreamError

logger = logging.getLogger(__name__)

# Problems and feedback use the stronger model; hints favour latency.
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-pro")
GEMINI_HINT_MODEL = os.getenv("GEMINI_HINT_MODEL", "gemini-2.5-flash")


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


class GeminiTextGenerator:
    """Single-shot Gemini calls. No streaming, no tools, no retries."""

    def __init__(self, model_name: str, api_key: Optional[str] = None):
        self.api_key = api_key or os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise UpstreamError("GOOGLE_API_KEY not configured on server.")
        self.model_name = model_name
        genai.configure(api_key=self.api_key)
        self._model = genai.GenerativeModel(model_name)

    def generate(self, prompt: str) -> str:
        try:
            response = self._model.generate_content(prompt)
            # .text raises ValueError when the candidate was blocked or empty
            text = response.text
        except Exception as e:
            logger.warning("gemini call failed (%s): %s: %s", self.model_name, type(e).__name__, e)
            raise UpstreamError(f"text generation failed: {type(e).__name__}") from e
        return text or ""


@lru_cache(maxsize=1)
def get_text_generator() -> TextGenerator:
    """FastAPI dependency for problem and feedback generation."""
    return GeminiTextGenerator(GEMINI_MODEL)


@lru_cache(maxsize=1)
def get_hint_text_generator() -> TextGenerator:
    """FastAPI dependency for hint generation."""
    return GeminiTextGenerator(GEMINI_HINT_MODEL)
