"""Fire-and-forget notification broadcasting."""

import logging
from typing import Any

from advisordesk.application.interfaces import NotificationPublisher
from advisordesk.domain.entities import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Broadcasts domain events; delivery failures never reach the caller."""

    def __init__(self, publisher: NotificationPublisher):
        self._publisher = publisher

    async def publish(
        self,
        event: str,
        payload: dict[str, Any] | None = None,
        recipient_ids: list[str] | None = None,
    ) -> Notification:
        notification = Notification(
            event=event,
            payload=payload or {},
            recipient_ids=recipient_ids or [],
        )
        try:
            await self._publisher.publish(notification)
        except Exception:
            logger.exception("Notification '%s' could not be delivered", event)
        return notification
