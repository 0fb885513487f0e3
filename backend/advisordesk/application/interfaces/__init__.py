from .user_repository import UserRepository
from .client_repository import ClientRepository
from .recommendation_repository import RecommendationRepository
from .subscription_repository import SubscriptionRepository
from .access_request_repository import AccessRequestRepository
from .repositories import Repositories
from .session_store import SessionStore
from .password_hasher import PasswordHasher
from .token_issuer import TokenIssuer
from .notification_publisher import NotificationPublisher

__all__ = [
    "UserRepository",
    "ClientRepository",
    "RecommendationRepository",
    "SubscriptionRepository",
    "AccessRequestRepository",
    "Repositories",
    "SessionStore",
    "PasswordHasher",
    "TokenIssuer",
    "NotificationPublisher",
]
