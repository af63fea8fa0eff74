"""Domain models for summarization jobs."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class OutputType(str, Enum):
    """Output types selectable on the command line."""

    TERMINAL = "terminal"
    TEXT = "text"
    WORD = "word"
    MARKDOWN = "markdown"
    SLACK = "slack"

    @property
    def requires_path(self) -> bool:
        return self in FILE_OUTPUT_TYPES


FILE_OUTPUT_TYPES = frozenset({OutputType.TEXT, OutputType.WORD, OutputType.MARKDOWN})


class JobRequest(BaseModel, frozen=True):
    """A single summarization job as requested by the user."""

    audio_path: str
    output_type: OutputType | None = None
    output_filename: str | None = None
    language_code: str = "en-US"
    delete_after: bool = False


class ResolvedDestination(BaseModel, frozen=True):
    """Bucket chosen for staging the audio file, with its actual region."""

    bucket_name: str
    region: str


class StagedObject(BaseModel, frozen=True):
    """The uploaded copy of the audio file in object storage."""

    bucket_name: str
    object_name: str
    uri: str

    @property
    def display_uri(self) -> str:
        return f"s3://{self.bucket_name}/{self.object_name}"


class ClassifiedSections(BaseModel, frozen=True):
    """Summary text partitioned into summary, action items and everything else."""

    summary: str = ""
    action_items: str = ""
    other: str = ""


class TerminalTarget(BaseModel, frozen=True):
    """Print the summary and transcript to the console."""

    kind: Literal["terminal"] = "terminal"


class FileTarget(BaseModel, frozen=True):
    """Write the summary and transcript to a local file."""

    kind: Literal[OutputType.TEXT, OutputType.WORD, OutputType.MARKDOWN]
    path: str


class NotificationTarget(BaseModel, frozen=True):
    """Post the classified summary to a webhook."""

    kind: Literal["notification"] = "notification"
    endpoint: str | None = None


OutputTarget = TerminalTarget | FileTarget | NotificationTarget


class OutputResolution(BaseModel, frozen=True):
    """Resolved output target plus any non-fatal warnings raised while resolving it."""

    target: OutputTarget
    warnings: tuple[str, ...] = ()


class JobArtifacts(BaseModel, frozen=True):
    """Everything a sink needs to render the result of a job."""

    source_path: str
    transcript: str
    summary: str


class RenderReport(BaseModel, frozen=True):
    """Outcome of rendering a job to its sink."""

    message: str
    path: str | None = None
    warnings: tuple[str, ...] = ()
    delivery_error: str | None = None
