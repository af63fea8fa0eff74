"""Abstract interface for user-visible job progress."""

from abc import ABC, abstractmethod


class ProgressReporter(ABC):
    """Receives human-readable progress updates while a job runs."""

    @abstractmethod
    def update(self, label: str) -> None:
        """Reports the stage the job is entering."""
        pass

    @abstractmethod
    def success(self, message: str) -> None:
        """Reports that the job finished."""
        pass

    @abstractmethod
    def warn(self, message: str) -> None:
        """Reports a non-fatal problem."""
        pass

    @abstractmethod
    def fail(self, message: str) -> None:
        """Reports that the job, or part of its output, failed."""
        pass
