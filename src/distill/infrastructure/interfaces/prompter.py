"""Abstract interface for interactive choices."""

from abc import ABC, abstractmethod


class BucketPrompter(ABC):
    """Asks the user to pick one item from a list."""

    @abstractmethod
    def choose(self, prompt: str, items: list[str]) -> int:
        """
        Presents items and returns the index of the one selected.

        Raises:
            PreconditionError: If the user makes no valid selection.
        """
        pass
