"""Decides which sink a job renders to from the output type and filename flags."""

from pathlib import Path

from distill.exceptions import PreconditionError

from .models import (
    FileTarget,
    NotificationTarget,
    OutputResolution,
    OutputTarget,
    OutputType,
    TerminalTarget,
)

EXTENSION_TYPES = {
    ".md": OutputType.MARKDOWN,
    ".txt": OutputType.TEXT,
    ".doc": OutputType.WORD,
    ".docx": OutputType.WORD,
}

DEFAULT_FILENAMES = {
    OutputType.TEXT: "summary.txt",
    OutputType.WORD: "summary.docx",
    OutputType.MARKDOWN: "summary.md",
}


def infer_output_type(filename: str) -> OutputType | None:
    """Returns the output type implied by a filename's extension, if any."""
    return EXTENSION_TYPES.get(Path(filename).suffix.lower())


def resolve_output_target(
    output_type: OutputType | None,
    output_filename: str | None,
    notification_endpoint: str | None = None,
) -> OutputResolution:
    """
    Resolves the explicit output flags into a single output target.

    Args:
        output_type: Output type given on the command line, if any.
        output_filename: Output filename given on the command line, if any.
        notification_endpoint: Configured webhook, carried by notification targets.

    Returns:
        OutputResolution with the target and any warnings to show the user.

    Raises:
        PreconditionError: If a filename is combined with the terminal or
            notification output type.
    """
    warnings: list[str] = []

    if output_filename is not None and output_type is None:
        inferred = infer_output_type(output_filename)
        if inferred is None:
            warnings.append(
                f"Could not infer output type from filename '{output_filename}', "
                "defaulting to text"
            )
            inferred = OutputType.TEXT
        return OutputResolution(
            target=FileTarget(kind=inferred, path=output_filename),
            warnings=tuple(warnings),
        )

    if output_filename is not None:
        if not output_type.requires_path:
            raise PreconditionError(
                f"Output filename cannot be used with {output_type.value} output type"
            )
        inferred = infer_output_type(output_filename)
        if inferred is not None and inferred != output_type:
            warnings.append(
                f"Output filename extension suggests {inferred.value} output type, "
                f"but {output_type.value} was explicitly specified"
            )
        return OutputResolution(
            target=FileTarget(kind=output_type, path=output_filename),
            warnings=tuple(warnings),
        )

    return OutputResolution(
        target=_target_for_type(output_type or OutputType.TERMINAL, notification_endpoint)
    )


def _target_for_type(
    output_type: OutputType, notification_endpoint: str | None
) -> OutputTarget:
    if output_type is OutputType.TERMINAL:
        return TerminalTarget()
    if output_type is OutputType.SLACK:
        return NotificationTarget(endpoint=notification_endpoint or None)
    return FileTarget(kind=output_type, path=DEFAULT_FILENAMES[output_type])
