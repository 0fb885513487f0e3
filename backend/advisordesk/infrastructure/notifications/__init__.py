from .logging_publisher import LoggingNotificationPublisher
from .webhook_publisher import WebhookNotificationPublisher

__all__ = ["LoggingNotificationPublisher", "WebhookNotificationPublisher"]
