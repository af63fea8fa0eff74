"""Coordinates a summarization job from local file to rendered output."""

import logging
import mimetypes
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from distill.config import AppConfig
from distill.domain.destination_resolver import DestinationResolver
from distill.domain.models import (
    JobArtifacts,
    JobRequest,
    OutputTarget,
    RenderReport,
    ResolvedDestination,
    StagedObject,
)
from distill.domain.request_validation import validate_request
from distill.domain.storage_factory import RegionalStorageFactory
from distill.exceptions import (
    DistillError,
    PreconditionError,
    RemoteCallError,
    StorageError,
    SummarizationError,
    TranscriptionError,
)
from distill.infrastructure.interfaces import (
    ProgressReporter,
    StorageClient,
    SummarizationService,
    TranscriptionService,
)

from .output_renderer import OutputRenderer

logger = logging.getLogger(__name__)

REMOTE_ERRORS = (StorageError, TranscriptionError, SummarizationError)


class PipelineStage(str, Enum):
    """States of a job, in the order they are reached."""

    IDLE = "idle"
    BUCKET_RESOLVED = "bucket_resolved"
    CLIENT_RECONFIGURED = "client_reconfigured"
    UPLOADED = "uploaded"
    TRANSCRIBED = "transcribed"
    SUMMARIZED = "summarized"
    RENDERED = "rendered"
    CLEANED_UP = "cleaned_up"
    DONE = "done"


# Name of the work performed to reach each stage, used in error messages.
STAGE_ACTIONS = {
    PipelineStage.BUCKET_RESOLVED: "resolve bucket",
    PipelineStage.CLIENT_RECONFIGURED: "locate bucket region",
    PipelineStage.UPLOADED: "upload",
    PipelineStage.TRANSCRIBED: "transcribe",
    PipelineStage.SUMMARIZED: "summarize",
    PipelineStage.RENDERED: "render",
    PipelineStage.CLEANED_UP: "delete staged object",
    PipelineStage.DONE: "finish",
}

STAGE_LABELS = {
    PipelineStage.BUCKET_RESOLVED: "Resolving destination bucket...",
    PipelineStage.CLIENT_RECONFIGURED: "Locating bucket region...",
    PipelineStage.UPLOADED: "Uploading file to storage...",
    PipelineStage.TRANSCRIBED: "Transcribing audio...",
    PipelineStage.SUMMARIZED: "Summarizing text...",
    PipelineStage.RENDERED: "Rendering output...",
    PipelineStage.CLEANED_UP: "Deleting staged audio file...",
}


def next_stage(stage: PipelineStage, request: JobRequest) -> PipelineStage:
    """Returns the stage that follows ``stage`` for the given request."""
    if stage is PipelineStage.RENDERED:
        return PipelineStage.CLEANED_UP if request.delete_after else PipelineStage.DONE
    if stage is PipelineStage.CLEANED_UP:
        return PipelineStage.DONE
    if stage is PipelineStage.DONE:
        raise ValueError("A finished job has no next stage")
    stages = list(PipelineStage)
    return stages[stages.index(stage) + 1]


@dataclass
class JobContext:
    """Intermediate results of a single job, owned by the pipeline while it runs."""

    request: JobRequest
    audio_path: Path
    target: OutputTarget
    bucket_name: str | None = None
    destination: ResolvedDestination | None = None
    storage: StorageClient | None = None
    staged: StagedObject | None = None
    transcript: str | None = None
    summary: str | None = None
    report: RenderReport | None = None
    stages: list[PipelineStage] = field(default_factory=list)


@dataclass(frozen=True)
class StageSuccess:
    stage: PipelineStage


@dataclass(frozen=True)
class StageFailure:
    stage: PipelineStage
    error: DistillError


StageResult = StageSuccess | StageFailure


@dataclass(frozen=True)
class JobOutcome:
    """Summary of a completed job."""

    destination: ResolvedDestination
    staged: StagedObject
    report: RenderReport
    deleted: bool
    stages: tuple[PipelineStage, ...]


class JobPipeline:
    """Runs the upload, transcribe, summarize and render stages for one request."""

    def __init__(
        self,
        config: AppConfig,
        destination_resolver: DestinationResolver,
        storage_factory: RegionalStorageFactory,
        transcriber: TranscriptionService,
        summarizer: SummarizationService,
        renderer: OutputRenderer,
        progress: ProgressReporter,
    ):
        self._config = config
        self._destination_resolver = destination_resolver
        self._storage_factory = storage_factory
        self._transcriber = transcriber
        self._summarizer = summarizer
        self._renderer = renderer
        self._progress = progress
        self._handlers: dict[PipelineStage, Callable[[JobContext], None]] = {
            PipelineStage.BUCKET_RESOLVED: self._resolve_bucket,
            PipelineStage.CLIENT_RECONFIGURED: self._reconfigure_client,
            PipelineStage.UPLOADED: self._upload,
            PipelineStage.TRANSCRIBED: self._transcribe,
            PipelineStage.SUMMARIZED: self._summarize,
            PipelineStage.RENDERED: self._render,
            PipelineStage.CLEANED_UP: self._clean_up,
            PipelineStage.DONE: self._finish,
        }

    def run(self, request: JobRequest) -> JobOutcome:
        """
        Runs a job to completion.

        Output flags and the input path are validated before any remote call.
        Stages run strictly in order and none is retried.

        Args:
            request: The job to run.

        Returns:
            JobOutcome describing where the audio was staged and what was rendered.

        Raises:
            PreconditionError: If the request is invalid or no bucket can be used.
            RemoteCallError: If a storage, transcription or summarization call fails.
            RenderError: If the output file cannot be written.
        """
        validated = validate_request(
            request, self._config.notification.webhook_endpoint
        )
        resolution = validated.resolution
        audio_path = validated.audio_path

        for warning in resolution.warnings:
            self._notify(self._progress.warn, warning)

        context = JobContext(
            request=request, audio_path=audio_path, target=resolution.target
        )
        logger.info(
            "Job started",
            extra={"audio_path": str(audio_path), "target": resolution.target.kind},
        )

        stage = PipelineStage.IDLE
        while stage is not PipelineStage.DONE:
            result = self.step(stage, context)
            if isinstance(result, StageFailure):
                logger.error(
                    "Job failed",
                    extra={"stage": result.stage.value, "error": str(result.error)},
                )
                raise result.error from result.error.__cause__
            stage = result.stage
            context.stages.append(stage)

        return JobOutcome(
            destination=context.destination,
            staged=context.staged,
            report=context.report,
            deleted=PipelineStage.CLEANED_UP in context.stages,
            stages=tuple(context.stages),
        )

    def step(self, stage: PipelineStage, context: JobContext) -> StageResult:
        """Performs the work needed to move from ``stage`` to the next stage."""
        target = next_stage(stage, context.request)
        label = STAGE_LABELS.get(target)
        if label:
            self._notify(self._progress.update, label)

        try:
            self._handlers[target](context)
        except DistillError as e:
            if e.stage is None:
                e.stage = STAGE_ACTIONS[target]
            return StageFailure(target, e)
        except REMOTE_ERRORS as e:
            error = RemoteCallError(STAGE_ACTIONS[target], cause=e)
            error.__cause__ = e
            return StageFailure(target, error)

        logger.info("Stage complete", extra={"stage": target.value})
        return StageSuccess(target)

    def _resolve_bucket(self, context: JobContext) -> None:
        bucket_name = self._destination_resolver.resolve()
        if not bucket_name:
            raise PreconditionError(
                "No valid bucket found. Please check your storage configuration."
            )
        context.bucket_name = bucket_name
        self._notify(self._progress.update, f"Bucket name: {bucket_name}")

    def _reconfigure_client(self, context: JobContext) -> None:
        destination, storage = self._storage_factory.for_bucket(context.bucket_name)
        context.destination = destination
        context.storage = storage
        self._notify(self._progress.update, f"Using bucket region {destination.region}")

    def _upload(self, context: JobContext) -> None:
        object_name = context.audio_path.name
        content_type = (
            mimetypes.guess_type(context.audio_path.name)[0]
            or "application/octet-stream"
        )
        try:
            size = context.audio_path.stat().st_size
            with context.audio_path.open("rb") as data:
                context.storage.upload(
                    context.bucket_name, object_name, data, size, content_type
                )
        except OSError as e:
            raise PreconditionError(
                f"Error loading file: {context.audio_path}"
            ) from e

        context.staged = StagedObject(
            bucket_name=context.bucket_name,
            object_name=object_name,
            uri=context.storage.staged_uri(context.bucket_name, object_name),
        )

    def _transcribe(self, context: JobContext) -> None:
        context.transcript = self._transcriber.transcribe(
            context.audio_path,
            context.staged.uri,
            context.request.language_code,
        )

    def _summarize(self, context: JobContext) -> None:
        context.summary = self._summarizer.summarize(context.transcript)

    def _render(self, context: JobContext) -> None:
        artifacts = JobArtifacts(
            source_path=context.request.audio_path,
            transcript=context.transcript,
            summary=context.summary,
        )
        report = self._renderer.render(context.target, artifacts)
        for warning in report.warnings:
            self._notify(self._progress.warn, warning)
        context.report = report

    def _clean_up(self, context: JobContext) -> None:
        context.storage.delete(context.staged.bucket_name, context.staged.object_name)

    def _finish(self, context: JobContext) -> None:
        if context.report.delivery_error:
            self._notify(self._progress.fail, context.report.message)
        else:
            self._notify(self._progress.success, context.report.message)

    def _notify(self, report: Callable[[str], None], message: str) -> None:
        try:
            report(message)
        except Exception:
            logger.warning("Progress reporting failed", exc_info=True)
