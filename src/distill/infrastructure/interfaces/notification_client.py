"""Abstract interface for outbound notification delivery."""

from abc import ABC, abstractmethod
from typing import Any


class NotificationClient(ABC):
    """Abstract base class for notification transports."""

    @abstractmethod
    def post(self, endpoint: str, payload: dict[str, Any]) -> int:
        """
        Posts a JSON payload to an endpoint.

        Args:
            endpoint: Webhook URL.
            payload: JSON-serializable body.

        Returns:
            The HTTP status code of the response.

        Raises:
            NotificationDeliveryError: If the request could not be sent.
        """
        pass
