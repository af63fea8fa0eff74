"""
Distill CLI.

Entry point that summarizes an audio file (e.g., a meeting) by staging it in
object storage, transcribing it and summarizing the transcript.
"""

import argparse
import logging
import sys
from pathlib import Path

from distill.config import DEFAULT_CONFIG_PATH, load_config
from distill.dependencies import get_pipeline
from distill.domain import JobRequest, OutputType, validate_request
from distill.exceptions import DistillError
from distill.logging import setup_logging

logger = logging.getLogger(__name__)

YES_VALUES = {"y", "yes"}
NO_VALUES = {"n", "no"}


def _yes_no(value: str) -> bool:
    answer = value.strip().lower()
    if answer in YES_VALUES:
        return True
    if answer in NO_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"expected 'y' or 'n', got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="distill",
        description=(
            "Distill CLI can summarize an audio file (e.g., a meeting) using "
            "remote transcription and summarization services."
        ),
        epilog=(
            "Language codes are BCP-47 tags such as en-US or de-DE; "
            "the transcription service decides which are supported."
        ),
    )
    parser.add_argument("-i", "--input-audio-file", required=True)
    parser.add_argument(
        "-o",
        "--output-type",
        type=str.lower,
        choices=[t.value for t in OutputType],
    )
    parser.add_argument(
        "--output-filename",
        help="Specify the output filename (only valid with text, word, or markdown output types)",
    )
    parser.add_argument("-l", "--language-code", default="en-US")
    parser.add_argument(
        "-d",
        "--delete-s3-object",
        type=_yes_no,
        default=False,
        help="Delete the staged audio file after processing (y/n, default n)",
    )
    parser.add_argument("-c", "--config", type=Path, default=DEFAULT_CONFIG_PATH)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parses arguments, runs one job and returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging()

    request = JobRequest(
        audio_path=args.input_audio_file,
        output_type=OutputType(args.output_type) if args.output_type else None,
        output_filename=args.output_filename,
        language_code=args.language_code,
        delete_after=args.delete_s3_object,
    )

    print("🧙 Welcome to Distill CLI")
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.exception("Configuration failed")
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    # Input and output flags are checked before any service client is built.
    try:
        validate_request(request, config.notification.webhook_endpoint)
    except DistillError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        pipeline = get_pipeline(config)
    except (OSError, ValueError) as e:
        logger.exception("Configuration failed")
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        outcome = pipeline.run(request)
    except DistillError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if outcome.report.delivery_error:
        print(f"Error: {outcome.report.delivery_error}", file=sys.stderr)
    if outcome.report.path:
        print(f"💾 Summary and transcription written to {outcome.report.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
