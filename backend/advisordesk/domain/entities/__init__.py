from .user import User, UserRole
from .subscription import DEFAULT_SUBSCRIPTION_ID, Subscription, default_subscription
from .client import Client, ClientStats, ClientStatus
from .access_request import AccessRequest, AccessRequestStatus
from .recommendation import (
    FALLBACK_SEGMENT,
    MARKET_SEGMENTS,
    OPTIONS_SEGMENT,
    TARGET_TIMEFRAMES,
    Recommendation,
    RecommendationStatus,
    Target,
)
from .session import AuthSession, SessionState
from .notification import Notification

__all__ = [
    "User",
    "UserRole",
    "DEFAULT_SUBSCRIPTION_ID",
    "Subscription",
    "default_subscription",
    "Client",
    "ClientStats",
    "ClientStatus",
    "AccessRequest",
    "AccessRequestStatus",
    "FALLBACK_SEGMENT",
    "MARKET_SEGMENTS",
    "OPTIONS_SEGMENT",
    "TARGET_TIMEFRAMES",
    "Recommendation",
    "RecommendationStatus",
    "Target",
    "AuthSession",
    "SessionState",
    "Notification",
]
