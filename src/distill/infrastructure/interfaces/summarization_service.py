"""Abstract interface for summarization service operations."""

from abc import ABC, abstractmethod


class SummarizationService(ABC):
    """Abstract base class for text summarization backends."""

    @abstractmethod
    def summarize(self, transcript: str) -> str:
        """
        Summarizes a transcript.

        Args:
            transcript: The transcript text to summarize.

        Returns:
            Free-form summary text.

        Raises:
            SummarizationError: If the summarization call fails.
        """
        pass
