"""Checks a job request before any collaborator is built or called."""

import os
from pathlib import Path

from pydantic import BaseModel

from distill.exceptions import PreconditionError

from .models import JobRequest, OutputResolution
from .output_resolver import resolve_output_target


class ValidatedRequest(BaseModel, frozen=True):
    """A request whose input file exists and whose output flags agree."""

    audio_path: Path
    resolution: OutputResolution


def canonical_audio_path(raw_path: str) -> Path:
    """Expands ``~`` and resolves the input path, which must be an existing file."""
    path = Path(os.path.expanduser(raw_path)).resolve()
    if not path.exists():
        raise PreconditionError(f"The path {path} does not exist.")
    if not path.is_file():
        raise PreconditionError(f"The path {path} is not a file.")
    return path


def validate_request(
    request: JobRequest, notification_endpoint: str | None = None
) -> ValidatedRequest:
    """
    Validates the output flags, then the input path.

    Args:
        request: The job as requested on the command line.
        notification_endpoint: Configured webhook, carried by notification targets.

    Returns:
        ValidatedRequest with the canonical input path and the output target.

    Raises:
        PreconditionError: If the output flags conflict or the input is not a file.
    """
    resolution = resolve_output_target(
        request.output_type, request.output_filename, notification_endpoint
    )
    return ValidatedRequest(
        audio_path=canonical_audio_path(request.audio_path),
        resolution=resolution,
    )
