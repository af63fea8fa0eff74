"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .file_writers import (
    FileWriter,
    MarkdownFileWriter,
    TextFileWriter,
    WordFileWriter,
)
from .gemini_summarizer import GeminiSummarizer
from .minio_storage import MinioStorageClient, get_minio_client
from .terminal import ConsoleProgress, TerminalPrompter
from .webhook_notifier import WebhookNotificationClient

__all__ = [
    "AssemblyAITranscriber",
    "ConsoleProgress",
    "FileWriter",
    "GeminiSummarizer",
    "MarkdownFileWriter",
    "MinioStorageClient",
    "TerminalPrompter",
    "TextFileWriter",
    "WebhookNotificationClient",
    "WordFileWriter",
    "get_minio_client",
]
