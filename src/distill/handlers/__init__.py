"""Handler layer exports."""

from .job_pipeline import (
    JobContext,
    JobOutcome,
    JobPipeline,
    PipelineStage,
    StageFailure,
    StageResult,
    StageSuccess,
    next_stage,
)
from .output_renderer import OutputRenderer

__all__ = [
    "JobContext",
    "JobOutcome",
    "JobPipeline",
    "OutputRenderer",
    "PipelineStage",
    "StageFailure",
    "StageResult",
    "StageSuccess",
    "next_stage",
]
