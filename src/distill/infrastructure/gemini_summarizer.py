"""Gemini implementation of the SummarizationService interface."""

import logging

from google import genai

from distill.exceptions import SummarizationError
from distill.infrastructure.interfaces import SummarizationService

logger = logging.getLogger(__name__)


class GeminiSummarizer(SummarizationService):
    """Summarization service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str, system_prompt: str):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt

    def summarize(self, transcript: str) -> str:
        """
        Summarizes a transcript using Gemini.

        Args:
            transcript: The transcript text to summarize.

        Returns:
            The summary as plain text.

        Raises:
            SummarizationError: If the Gemini API call fails or returns nothing.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=transcript,
                config={"system_instruction": self._system_prompt},
            )
            if not response.text:
                raise SummarizationError("Gemini returned empty response")
            logger.info(
                "Summary generated",
                extra={"model": self._model_name, "length": len(response.text)},
            )
            return response.text.strip()
        except SummarizationError:
            raise
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise SummarizationError(f"Gemini summarization failed: {e}", cause=e) from e
