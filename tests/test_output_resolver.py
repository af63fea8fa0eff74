import pytest

from distill.domain import (
    FileTarget,
    NotificationTarget,
    OutputType,
    TerminalTarget,
    infer_output_type,
    resolve_output_target,
)
from distill.exceptions import PreconditionError


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("notes.md", OutputType.MARKDOWN),
        ("notes.TXT", OutputType.TEXT),
        ("minutes.doc", OutputType.WORD),
        ("minutes.DocX", OutputType.WORD),
        ("archive/notes.md", OutputType.MARKDOWN),
    ],
)
def test_filename_alone_infers_type_from_extension(filename, expected):
    resolution = resolve_output_target(None, filename)

    assert resolution.target == FileTarget(kind=expected, path=filename)
    assert resolution.warnings == ()


@pytest.mark.parametrize("filename", ["notes.pdf", "notes"])
def test_unknown_extension_defaults_to_text_with_warning(filename):
    resolution = resolve_output_target(None, filename)

    assert resolution.target == FileTarget(kind=OutputType.TEXT, path=filename)
    assert resolution.warnings == (
        f"Could not infer output type from filename '{filename}', defaulting to text",
    )


@pytest.mark.parametrize("output_type", [OutputType.TERMINAL, OutputType.SLACK])
@pytest.mark.parametrize("filename", ["out.txt", "out.md"])
def test_filename_rejected_for_types_without_a_path(output_type, filename):
    with pytest.raises(PreconditionError) as exc_info:
        resolve_output_target(output_type, filename)

    assert str(exc_info.value) == (
        f"Output filename cannot be used with {output_type.value} output type"
    )


def test_explicit_type_wins_over_extension_with_warning():
    resolution = resolve_output_target(OutputType.WORD, "notes.md")

    assert resolution.target == FileTarget(kind=OutputType.WORD, path="notes.md")
    assert resolution.warnings == (
        "Output filename extension suggests markdown output type, "
        "but word was explicitly specified",
    )


def test_matching_type_and_extension_has_no_warning():
    resolution = resolve_output_target(OutputType.MARKDOWN, "notes.md")

    assert resolution.target == FileTarget(kind=OutputType.MARKDOWN, path="notes.md")
    assert resolution.warnings == ()


def test_explicit_type_with_unrecognised_extension_has_no_warning():
    resolution = resolve_output_target(OutputType.TEXT, "notes.log")

    assert resolution.target == FileTarget(kind=OutputType.TEXT, path="notes.log")
    assert resolution.warnings == ()


@pytest.mark.parametrize(
    "output_type, filename",
    [
        (OutputType.TEXT, "summary.txt"),
        (OutputType.WORD, "summary.docx"),
        (OutputType.MARKDOWN, "summary.md"),
    ],
)
def test_file_type_without_filename_uses_default_name(output_type, filename):
    resolution = resolve_output_target(output_type, None)

    assert resolution.target == FileTarget(kind=output_type, path=filename)


def test_terminal_is_the_default():
    assert resolve_output_target(None, None).target == TerminalTarget()
    assert resolve_output_target(OutputType.TERMINAL, None).target == TerminalTarget()


def test_slack_carries_configured_endpoint():
    resolution = resolve_output_target(OutputType.SLACK, None, "https://hooks.example/x")

    assert resolution.target == NotificationTarget(endpoint="https://hooks.example/x")


@pytest.mark.parametrize("endpoint", [None, ""])
def test_slack_without_endpoint_still_resolves(endpoint):
    resolution = resolve_output_target(OutputType.SLACK, None, endpoint)

    assert resolution.target == NotificationTarget(endpoint=None)


def test_infer_output_type_returns_none_for_unknown_extension():
    assert infer_output_type("recording.wav") is None
