"""httpx implementation of the NotificationClient interface."""

import logging
from typing import Any

import httpx

from distill.exceptions import NotificationDeliveryError
from distill.infrastructure.interfaces import NotificationClient

logger = logging.getLogger(__name__)


class WebhookNotificationClient(NotificationClient):
    """Posts JSON payloads to incoming webhooks."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def post(self, endpoint: str, payload: dict[str, Any]) -> int:
        try:
            response = self._client.post(
                endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.exception("Webhook request failed")
            raise NotificationDeliveryError(endpoint, str(e), cause=e) from e

        logger.info("Webhook responded", extra={"status": response.status_code})
        return response.status_code
