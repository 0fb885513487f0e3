from .store import JsonCollection, JsonCollectionStore
from .repositories import (
    build_json_repositories,
    JsonAccessRequestRepository,
    JsonClientRepository,
    JsonRecommendationRepository,
    JsonSubscriptionRepository,
    JsonUserRepository,
)

__all__ = [
    "JsonCollection",
    "JsonCollectionStore",
    "JsonAccessRequestRepository",
    "JsonClientRepository",
    "JsonRecommendationRepository",
    "JsonSubscriptionRepository",
    "JsonUserRepository",
    "build_json_repositories",
]
