from .notification_service import NotificationService
from .authorization_service import AuthorizationService
from .recommendation_service import RecommendationService
from .client_service import ClientService, ClientView
from .subscription_service import SubscriptionService
from .identity_service import IdentityService, LoginResult
from .seed_service import seed_defaults

__all__ = [
    "NotificationService",
    "AuthorizationService",
    "RecommendationService",
    "ClientService",
    "ClientView",
    "SubscriptionService",
    "IdentityService",
    "LoginResult",
    "seed_defaults",
]
