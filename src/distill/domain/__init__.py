"""Domain layer exports."""

from .destination_resolver import DestinationResolver
from .models import (
    ClassifiedSections,
    FileTarget,
    JobArtifacts,
    JobRequest,
    NotificationTarget,
    OutputResolution,
    OutputTarget,
    OutputType,
    RenderReport,
    ResolvedDestination,
    StagedObject,
    TerminalTarget,
)
from .output_resolver import infer_output_type, resolve_output_target
from .request_validation import (
    ValidatedRequest,
    canonical_audio_path,
    validate_request,
)
from .payloads import (
    PAYLOAD_BUILDERS,
    PayloadBuilder,
    PlainTextPayloadBuilder,
    SectionedPayloadBuilder,
)
from .storage_factory import RegionalStorageFactory, region_from_constraint
from .summary_sections import classify_summary

__all__ = [
    "ClassifiedSections",
    "DestinationResolver",
    "FileTarget",
    "JobArtifacts",
    "JobRequest",
    "NotificationTarget",
    "OutputResolution",
    "OutputTarget",
    "OutputType",
    "PAYLOAD_BUILDERS",
    "PayloadBuilder",
    "PlainTextPayloadBuilder",
    "RegionalStorageFactory",
    "RenderReport",
    "ResolvedDestination",
    "SectionedPayloadBuilder",
    "StagedObject",
    "TerminalTarget",
    "ValidatedRequest",
    "canonical_audio_path",
    "classify_summary",
    "infer_output_type",
    "region_from_constraint",
    "resolve_output_target",
    "validate_request",
]
