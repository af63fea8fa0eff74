"""Custom exceptions for the distill CLI."""


class DistillError(Exception):
    """Base class for errors that end a summarization job."""

    def __init__(self, message: str, stage: str | None = None):
        self.stage = stage
        super().__init__(message)


class PreconditionError(DistillError):
    """Raised when a job cannot start because its inputs are invalid."""


class RemoteCallError(DistillError):
    """Raised when a storage, transcription or summarization call fails."""

    def __init__(self, stage: str, cause: Exception | None = None):
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Stage '{stage}' failed{detail}", stage=stage)


class RenderError(DistillError):
    """Raised when writing the summary to a local file fails."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write output file '{path}': {cause}")


class NotificationDeliveryError(DistillError):
    """Raised when the notification webhook rejects or fails to receive a payload."""

    def __init__(self, endpoint: str, reason: str, cause: Exception | None = None):
        self.endpoint = endpoint
        self.reason = reason
        self.cause = cause
        super().__init__(f"Error sending summary notification: {reason}")


class StorageError(Exception):
    """Raised when an object storage operation fails."""

    def __init__(
        self,
        operation: str,
        bucket_name: str | None = None,
        object_name: str | None = None,
        cause: Exception | None = None,
    ):
        self.operation = operation
        self.bucket_name = bucket_name
        self.object_name = object_name
        self.cause = cause
        target = "/".join(p for p in (bucket_name, object_name) if p)
        location = f" for '{target}'" if target else ""
        super().__init__(f"Storage {operation} failed{location}: {cause}")


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}': {cause}")


class SummarizationError(Exception):
    """Raised when the summarization service call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
