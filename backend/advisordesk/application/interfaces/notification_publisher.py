"""Abstract port for notification delivery."""

from abc import ABC, abstractmethod

from advisordesk.domain.entities import Notification


class NotificationPublisher(ABC):
    """Delivers notifications somewhere outside the process."""

    @abstractmethod
    async def publish(self, notification: Notification) -> None:
        ...
