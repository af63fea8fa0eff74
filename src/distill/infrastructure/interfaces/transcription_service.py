"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, audio_path: Path, audio_uri: str, language_code: str) -> str:
        """
        Transcribes a staged audio file and returns speaker-labeled text.

        Args:
            audio_path: Local path of the original file, used for naming and logs.
            audio_uri: Location the backend reads the staged audio from.
            language_code: BCP-47 language tag of the recording, e.g. ``en-US``.

        Returns:
            The transcript, one ``Speaker X: text`` line per utterance.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
