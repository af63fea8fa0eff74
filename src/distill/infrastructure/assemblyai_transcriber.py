"""AssemblyAI implementation of the TranscriptionService interface."""

import logging
from pathlib import Path

import assemblyai as aai

from distill.exceptions import TranscriptionError
from distill.infrastructure.interfaces import TranscriptionService

logger = logging.getLogger(__name__)

# AssemblyAI only distinguishes regional variants for English.
ENGLISH_VARIANTS = {"en_us": "en_us", "en_gb": "en_uk", "en_uk": "en_uk", "en_au": "en_au"}


def to_assemblyai_language(language_code: str) -> str:
    """Maps a BCP-47 tag such as ``en-US`` or ``de-DE`` to an AssemblyAI code."""
    code = language_code.strip().lower().replace("-", "_")
    if code in ENGLISH_VARIANTS:
        return ENGLISH_VARIANTS[code]
    return code.split("_")[0]


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber, speaker_labels: bool = True):
        self._transcriber = transcriber
        self._speaker_labels = speaker_labels

    def transcribe(self, audio_path: Path, audio_uri: str, language_code: str) -> str:
        """
        Transcribes staged audio using AssemblyAI.

        The SDK submits the job and polls until it completes. Utterances are
        rendered one per line with their speaker label.
        """
        config = aai.TranscriptionConfig(
            speaker_labels=self._speaker_labels,
            language_code=to_assemblyai_language(language_code),
        )
        try:
            transcription = self._transcriber.transcribe(audio_uri, config=config)

            if transcription.status == aai.TranscriptStatus.error:
                raise TranscriptionError(
                    audio_path.name,
                    Exception(transcription.error),
                )

            if transcription.text is None:
                raise TranscriptionError(
                    audio_path.name,
                    Exception("Transcription returned no text"),
                )

            utterances = transcription.utterances or []
            lines = [f"Speaker {u.speaker}: {u.text}" for u in utterances]

            logger.info(
                "Audio transcription successful",
                extra={"file_name": audio_path.name, "utterance_count": len(lines)},
            )
            return "\n".join(lines) if lines else transcription.text

        except TranscriptionError:
            raise
        except Exception as e:
            logger.exception(
                "AssemblyAI transcription failed", extra={"file_name": audio_path.name}
            )
            raise TranscriptionError(audio_path.name, e) from e
