from .user_repository import SQLAlchemyUserRepository
from .client_repository import SQLAlchemyClientRepository
from .subscription_repository import SQLAlchemySubscriptionRepository
from .recommendation_repository import SQLAlchemyRecommendationRepository
from .access_request_repository import SQLAlchemyAccessRequestRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyClientRepository",
    "SQLAlchemySubscriptionRepository",
    "SQLAlchemyRecommendationRepository",
    "SQLAlchemyAccessRequestRepository",
]
