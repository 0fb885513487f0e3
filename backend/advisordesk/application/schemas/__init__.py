from .user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    SubAdminCreate,
    UserResponse,
    UserUpdate,
)
from .client import ClientCreate, ClientResponse, ClientUpdate
from .recommendation import (
    RecommendationCreate,
    RecommendationResponse,
    RecommendationUpdate,
    TargetInput,
    TargetSchema,
)
from .subscription import SubscriptionCreate, SubscriptionResponse, SubscriptionUpdate
from .access_request import AccessRequestCreate, AccessRequestResolve, AccessRequestResponse
from .notification import NotificationAck, NotificationCreate

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "SubAdminCreate",
    "UserResponse",
    "UserUpdate",
    "ClientCreate",
    "ClientResponse",
    "ClientUpdate",
    "RecommendationCreate",
    "RecommendationResponse",
    "RecommendationUpdate",
    "TargetInput",
    "TargetSchema",
    "SubscriptionCreate",
    "SubscriptionResponse",
    "SubscriptionUpdate",
    "AccessRequestCreate",
    "AccessRequestResolve",
    "AccessRequestResponse",
    "NotificationAck",
    "NotificationCreate",
]
