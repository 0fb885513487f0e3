"""Notification publisher that only writes to the log."""

import logging

from advisordesk.application.interfaces import NotificationPublisher
from advisordesk.domain.entities import Notification

logger = logging.getLogger(__name__)


class LoggingNotificationPublisher(NotificationPublisher):
    async def publish(self, notification: Notification) -> None:
        logger.info(
            "Notification %s → %s: %s",
            notification.event,
            ", ".join(notification.recipient_ids) or "all",
            notification.payload,
        )
