"""Builders for the JSON body posted to the notification webhook."""

from abc import ABC, abstractmethod
from typing import Any

from .models import JobArtifacts
from .summary_sections import classify_summary


class PayloadBuilder(ABC):
    """Abstract base class for notification payload shapes."""

    @abstractmethod
    def build(self, artifacts: JobArtifacts) -> dict[str, Any]:
        """Builds the webhook body for a finished job."""
        pass


class SectionedPayloadBuilder(PayloadBuilder):
    """Splits the summary into sections for workflow-style webhooks."""

    def build(self, artifacts: JobArtifacts) -> dict[str, Any]:
        sections = classify_summary(artifacts.summary)
        return {
            "Content": artifacts.source_path,
            "SummaryText": sections.summary,
            "KeyActions": sections.action_items,
            "Others": sections.other,
        }


class PlainTextPayloadBuilder(PayloadBuilder):
    """Sends the whole summary as a single message for plain incoming webhooks."""

    def build(self, artifacts: JobArtifacts) -> dict[str, Any]:
        return {
            "text": (
                "A summarization job just completed:\n\n"
                f"{artifacts.source_path}\n{artifacts.summary}"
            )
        }


PAYLOAD_BUILDERS: dict[str, type[PayloadBuilder]] = {
    "sections": SectionedPayloadBuilder,
    "text": PlainTextPayloadBuilder,
}
