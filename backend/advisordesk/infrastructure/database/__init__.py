from .base import Base
from .session import engine, async_session_factory
from .models import (
    AccessRequestModel,
    ClientModel,
    RecommendationModel,
    SubscriptionModel,
    UserModel,
)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "AccessRequestModel",
    "ClientModel",
    "RecommendationModel",
    "SubscriptionModel",
    "UserModel",
]
