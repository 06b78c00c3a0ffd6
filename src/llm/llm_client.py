"""LLM client for making API calls to Google Gemini."""

import time
from typing import Optional

from google import genai
from google.genai import types
from loguru import logger

from src.config import config

RETRYABLE_MARKERS = ['503', '429', 'UNAVAILABLE', 'overloaded', 'quota', 'RESOURCE_EXHAUSTED']


def is_retryable_error(error: Exception) -> bool:
    """Transient Gemini errors (overload, rate limit, quota) are worth retrying."""
    error_str = str(error)
    return any(code in error_str for code in RETRYABLE_MARKERS)


class LLMClient:
    """Client for interacting with Google Gemini API."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """Initialize the Gemini client."""
        self.client = genai.Client(api_key=api_key or config.gemini.api_key)
        self.model = model or config.gemini.model
        self.temperature = config.gemini.temperature
        self.last_error: Optional[str] = None

    def generate_text(
        self,
        prompt: str,
        max_retries: int = 3,
        backoff_seconds: float = 2.0,
    ) -> Optional[str]:
        """Send a prompt to the LLM and return its text.

        Args:
            prompt: Complete user prompt
            max_retries: Maximum number of attempts for transient errors
            backoff_seconds: Base delay for exponential backoff between attempts

        Returns:
            Response text, or None if the call failed or produced no text
        """
        last_error = None
        for attempt in range(max_retries):
            try:
                self.last_error = None
                if attempt > 0:
                    wait_time = backoff_seconds * (2 ** attempt)
                    logger.info(f"Retry attempt {attempt + 1}/{max_retries} after {wait_time}s delay...")
                    time.sleep(wait_time)

                logger.info(f"Sending request to Gemini ({self.model})...")

                response = self.client.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(temperature=self.temperature)
                )

                content = (response.text or '').strip()
                logger.debug(f"Raw LLM response: {content[:500]}")
                return content or None

            except Exception as e:
                last_error = e
                self.last_error = str(e)

                if is_retryable_error(e) and attempt < max_retries - 1:
                    logger.warning(f"Retryable error on attempt {attempt + 1}: {e}")
                    continue

                logger.error(f"Error calling LLM API (attempt {attempt + 1}): {e}")
                return None

        logger.error(f"All {max_retries} retry attempts failed. Last error: {last_error}")
        self.last_error = str(last_error) if last_error else "Unknown LLM error"
        return None

