"""Renders a finished job to the sink chosen by the output resolver."""

import logging

from distill.domain.models import (
    FileTarget,
    JobArtifacts,
    NotificationTarget,
    OutputTarget,
    OutputType,
    RenderReport,
    TerminalTarget,
)
from distill.domain.payloads import PayloadBuilder
from distill.exceptions import NotificationDeliveryError
from distill.infrastructure.file_writers import FileWriter
from distill.infrastructure.interfaces import NotificationClient

logger = logging.getLogger(__name__)

MISSING_ENDPOINT_WARNING = (
    "Notification webhook endpoint is not configured. Skipping notification."
)


class OutputRenderer:
    """Dispatches job artifacts to the terminal, a file writer or a webhook."""

    def __init__(
        self,
        writers: dict[OutputType, FileWriter],
        notifier: NotificationClient,
        payload_builder: PayloadBuilder,
    ):
        self._writers = writers
        self._notifier = notifier
        self._payload_builder = payload_builder

    def render(self, target: OutputTarget, artifacts: JobArtifacts) -> RenderReport:
        """
        Renders artifacts to the given target.

        Returns:
            RenderReport describing what was produced. Notification delivery
            failures are reported in ``delivery_error`` rather than raised.

        Raises:
            RenderError: If a file sink cannot be written.
        """
        if isinstance(target, TerminalTarget):
            return self._render_terminal(artifacts)
        if isinstance(target, FileTarget):
            return self._render_file(target, artifacts)
        if isinstance(target, NotificationTarget):
            return self._render_notification(target, artifacts)
        raise TypeError(f"Unsupported output target: {target!r}")

    def _render_terminal(self, artifacts: JobArtifacts) -> RenderReport:
        print()
        print(f"Summary:\n{artifacts.summary}\n")
        print(f"Transcription:\n{artifacts.transcript}\n")
        return RenderReport(message="Done!")

    def _render_file(self, target: FileTarget, artifacts: JobArtifacts) -> RenderReport:
        self._writers[target.kind].write(target.path, artifacts)
        return RenderReport(message="Done!", path=target.path)

    def _render_notification(
        self, target: NotificationTarget, artifacts: JobArtifacts
    ) -> RenderReport:
        if not target.endpoint:
            logger.warning("Notification endpoint missing, printing summary instead")
            print(f"Summary:\n{artifacts.summary}\n")
            return RenderReport(message="Done!", warnings=(MISSING_ENDPOINT_WARNING,))

        payload = self._payload_builder.build(artifacts)
        try:
            status = self._notifier.post(target.endpoint, payload)
        except NotificationDeliveryError as e:
            return RenderReport(
                message="Failed to send summary notification!",
                delivery_error=str(e),
            )

        if not 200 <= status < 300:
            logger.error("Webhook rejected notification", extra={"status": status})
            return RenderReport(
                message="Failed to send summary notification!",
                delivery_error=f"Error sending summary notification: HTTP {status}",
            )

        return RenderReport(message="Summary notification sent!")
