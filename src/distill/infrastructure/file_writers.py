"""Writers for the local file output types."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from docx import Document

from distill.domain.models import JobArtifacts
from distill.exceptions import RenderError

logger = logging.getLogger(__name__)


class FileWriter(ABC):
    """Abstract base class for local file writers."""

    def write(self, path: str, artifacts: JobArtifacts) -> None:
        """
        Writes the summary and transcript to ``path``.

        Raises:
            RenderError: If the file cannot be written.
        """
        try:
            self._write(Path(path), artifacts)
        except (OSError, ValueError) as e:
            logger.exception("Output file write failed", extra={"path": path})
            raise RenderError(path, cause=e) from e
        logger.info("Output file written", extra={"path": path})

    @abstractmethod
    def _write(self, path: Path, artifacts: JobArtifacts) -> None:
        pass


class TextFileWriter(FileWriter):
    """Plain text: summary, then the transcript under a heading."""

    def _write(self, path: Path, artifacts: JobArtifacts) -> None:
        content = f"{artifacts.summary}\n\nTranscription:\n{artifacts.transcript}"
        path.write_text(content, encoding="utf-8")


class MarkdownFileWriter(FileWriter):
    """Markdown with one paragraph per transcript line."""

    def _write(self, path: Path, artifacts: JobArtifacts) -> None:
        transcript = "\n\n".join(
            line for line in artifacts.transcript.splitlines() if line.strip()
        )
        content = (
            f"# Summary\n\n{artifacts.summary}\n\n"
            f"# Transcription\n\n{transcript}\n"
        )
        path.write_text(content, encoding="utf-8")


class WordFileWriter(FileWriter):
    """Word document built with python-docx."""

    def _write(self, path: Path, artifacts: JobArtifacts) -> None:
        document = Document()
        document.add_paragraph(artifacts.summary)
        document.add_paragraph("")
        document.add_paragraph("Transcription:")
        document.add_paragraph(artifacts.transcript)
        document.save(str(path))
