"""Bundle of repository ports handed to services for one unit of work."""

from dataclasses import dataclass

from .access_request_repository import AccessRequestRepository
from .client_repository import ClientRepository
from .recommendation_repository import RecommendationRepository
from .subscription_repository import SubscriptionRepository
from .user_repository import UserRepository


@dataclass
class Repositories:
    """The five record collections, all backed by the same store."""

    users: UserRepository
    clients: ClientRepository
    recommendations: RecommendationRepository
    subscriptions: SubscriptionRepository
    access_requests: AccessRequestRepository
