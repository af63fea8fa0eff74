"""Console implementations of the prompting and progress interfaces."""

import sys
from collections.abc import Callable
from typing import TextIO

from distill.exceptions import PreconditionError
from distill.infrastructure.interfaces import BucketPrompter, ProgressReporter


class TerminalPrompter(BucketPrompter):
    """Numbered menu read from standard input."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
        max_attempts: int = 3,
    ):
        self._input = input_fn
        self._output = output
        self._max_attempts = max_attempts

    def choose(self, prompt: str, items: list[str]) -> int:
        out = self._output or sys.stdout
        print(prompt, file=out)
        for number, item in enumerate(items, start=1):
            print(f"  {number}) {item}", file=out)

        for _ in range(self._max_attempts):
            try:
                answer = self._input("Selection [1]: ").strip()
            except EOFError as e:
                raise PreconditionError("No bucket selected") from e
            if not answer:
                return 0
            if answer.isdigit() and 1 <= int(answer) <= len(items):
                return int(answer) - 1
            print(f"Please enter a number between 1 and {len(items)}.", file=out)

        raise PreconditionError("No bucket selected")


class ConsoleProgress(ProgressReporter):
    """Prints one line per progress event."""

    def __init__(self, output: TextIO | None = None, errors: TextIO | None = None):
        self._output = output
        self._errors = errors

    def update(self, label: str) -> None:
        print(label, file=self._output or sys.stdout)

    def success(self, message: str) -> None:
        print(f"✅ {message}", file=self._output or sys.stdout)

    def warn(self, message: str) -> None:
        print(f"⚠️  Warning: {message}", file=self._output or sys.stdout)

    def fail(self, message: str) -> None:
        print(f"❌ {message}", file=self._errors or sys.stderr)
