"""Infrastructure interface exports."""

from distill.infrastructure.interfaces.notification_client import NotificationClient
from distill.infrastructure.interfaces.progress_reporter import ProgressReporter
from distill.infrastructure.interfaces.prompter import BucketPrompter
from distill.infrastructure.interfaces.storage_client import StorageClient
from distill.infrastructure.interfaces.summarization_service import (
    SummarizationService,
)
from distill.infrastructure.interfaces.transcription_service import (
    TranscriptionService,
)

__all__ = [
    "BucketPrompter",
    "NotificationClient",
    "ProgressReporter",
    "StorageClient",
    "SummarizationService",
    "TranscriptionService",
]
