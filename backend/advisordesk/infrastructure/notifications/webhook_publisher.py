"""Notification publisher that POSTs events to a webhook URL."""

import logging

import httpx

from advisordesk.application.interfaces import NotificationPublisher
from advisordesk.domain.entities import Notification

logger = logging.getLogger(__name__)


class WebhookNotificationPublisher(NotificationPublisher):
    """Delivers each notification as one JSON POST.

    Non-2xx responses raise ``httpx.HTTPStatusError``; NotificationService
    logs and drops the failure.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def publish(self, notification: Notification) -> None:
        body = {
            "event": notification.event,
            "payload": notification.payload,
            "recipient_ids": notification.recipient_ids,
            "created_at": notification.created_at.isoformat(),
        }
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(self._url, json=body)
            response.raise_for_status()
        logger.debug("Webhook accepted %s (%d)", notification.event, response.status_code)
