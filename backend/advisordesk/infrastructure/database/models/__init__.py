from .user import UserModel
from .client import ClientModel
from .subscription import SubscriptionModel
from .recommendation import RecommendationModel
from .access_request import AccessRequestModel

__all__ = [
    "UserModel",
    "ClientModel",
    "SubscriptionModel",
    "RecommendationModel",
    "AccessRequestModel",
]
