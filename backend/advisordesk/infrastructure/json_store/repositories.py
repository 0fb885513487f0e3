"""Repository ports implemented on top of the JSON collection store."""

from advisordesk.application.interfaces import (
    AccessRequestRepository,
    ClientRepository,
    RecommendationRepository,
    Repositories,
    SubscriptionRepository,
    UserRepository,
)
from advisordesk.domain.entities import (
    AccessRequest,
    AccessRequestStatus,
    Client,
    Recommendation,
    Subscription,
    User,
)
from advisordesk.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from advisordesk.infrastructure.json_store.store import JsonCollection, JsonCollectionStore


def _index_of(records: list, entity_id: str) -> int | None:
    for index, record in enumerate(records):
        if record.id == entity_id:
            return index
    return None


def _insert(records: list, entity, entity_type: str) -> None:
    if _index_of(records, entity.id) is not None:
        raise DuplicateEntityError(entity_type, "id", entity.id)
    records.append(entity)


def _replace(records: list, entity, entity_type: str) -> None:
    index = _index_of(records, entity.id)
    if index is None:
        raise EntityNotFoundError(entity_type, entity.id)
    records[index] = entity


class JsonUserRepository(UserRepository):
    def __init__(self, store: JsonCollectionStore):
        self._users = JsonCollection(store, "users", User)

    async def get_by_id(self, user_id: str) -> User | None:
        return next((u for u in await self._users.load() if u.id == user_id), None)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in await self._users.load() if u.email == email), None)

    async def get_all(self) -> list[User]:
        return await self._users.load()

    async def get_main_admin(self) -> User | None:
        return next((u for u in await self._users.load() if u.is_main_admin), None)

    async def create(self, user: User) -> User:
        async with self._users.mutate() as users:
            _insert(users, user, "User")
        return user

    async def update(self, user: User) -> User:
        async with self._users.mutate() as users:
            _replace(users, user, "User")
        return user


class JsonClientRepository(ClientRepository):
    def __init__(self, store: JsonCollectionStore):
        self._clients = JsonCollection(store, "clients", Client)

    async def get_by_id(self, client_id: str) -> Client | None:
        return next((c for c in await self._clients.load() if c.id == client_id), None)

    async def get_all(
        self,
        *,
        owner_id: str | None = None,
        subscription_id: str | None = None,
    ) -> list[Client]:
        clients = await self._clients.load()
        if owner_id is not None:
            clients = [c for c in clients if c.owner_id == owner_id]
        if subscription_id is not None:
            clients = [c for c in clients if c.subscription_id == subscription_id]
        return clients

    async def create(self, client: Client) -> Client:
        async with self._clients.mutate() as clients:
            _insert(clients, client, "Client")
        return client

    async def update(self, client: Client) -> Client:
        async with self._clients.mutate() as clients:
            _replace(clients, client, "Client")
        return client

    async def delete(self, client_id: str) -> bool:
        async with self._clients.mutate() as clients:
            index = _index_of(clients, client_id)
            if index is None:
                return False
            del clients[index]
        return True

    async def reassign_subscription(self, from_id: str, to_id: str) -> int:
        moved = 0
        async with self._clients.mutate() as clients:
            for client in clients:
                if client.subscription_id == from_id:
                    client.update(subscription_id=to_id)
                    moved += 1
        return moved


class JsonRecommendationRepository(RecommendationRepository):
    def __init__(self, store: JsonCollectionStore):
        self._recommendations = JsonCollection(store, "recommendations", Recommendation)

    async def get_by_id(self, recommendation_id: str) -> Recommendation | None:
        return next(
            (r for r in await self._recommendations.load() if r.id == recommendation_id), None
        )

    async def get_all(self) -> list[Recommendation]:
        recommendations = await self._recommendations.load()
        return sorted(recommendations, key=lambda r: r.created_at, reverse=True)

    async def create(self, recommendation: Recommendation) -> Recommendation:
        async with self._recommendations.mutate() as recommendations:
            _insert(recommendations, recommendation, "Recommendation")
        return recommendation

    async def update(self, recommendation: Recommendation) -> Recommendation:
        async with self._recommendations.mutate() as recommendations:
            index = _index_of(recommendations, recommendation.id)
            if index is None:
                raise EntityNotFoundError("Recommendation", recommendation.id)
            recommendation.merge_acknowledgments(recommendations[index].clients_acknowledged)
            recommendations[index] = recommendation
        return recommendation

    async def delete(self, recommendation_id: str) -> bool:
        async with self._recommendations.mutate() as recommendations:
            index = _index_of(recommendations, recommendation_id)
            if index is None:
                return False
            del recommendations[index]
        return True

    async def acknowledge(self, recommendation_id: str, client_id: str) -> Recommendation | None:
        async with self._recommendations.mutate() as recommendations:
            index = _index_of(recommendations, recommendation_id)
            if index is None:
                return None
            recommendation = recommendations[index]
            if recommendation.acknowledge(client_id):
                recommendation.touch()
        return recommendation


class JsonSubscriptionRepository(SubscriptionRepository):
    def __init__(self, store: JsonCollectionStore):
        self._subscriptions = JsonCollection(store, "subscriptions", Subscription)

    async def get_by_id(self, subscription_id: str) -> Subscription | None:
        return next(
            (s for s in await self._subscriptions.load() if s.id == subscription_id), None
        )

    async def get_all(self) -> list[Subscription]:
        return await self._subscriptions.load()

    async def create(self, subscription: Subscription) -> Subscription:
        async with self._subscriptions.mutate() as subscriptions:
            _insert(subscriptions, subscription, "Subscription")
        return subscription

    async def update(self, subscription: Subscription) -> Subscription:
        async with self._subscriptions.mutate() as subscriptions:
            _replace(subscriptions, subscription, "Subscription")
        return subscription

    async def delete(self, subscription_id: str) -> bool:
        async with self._subscriptions.mutate() as subscriptions:
            index = _index_of(subscriptions, subscription_id)
            if index is None:
                return False
            del subscriptions[index]
        return True


class JsonAccessRequestRepository(AccessRequestRepository):
    def __init__(self, store: JsonCollectionStore):
        self._requests = JsonCollection(store, "access_requests", AccessRequest)

    async def get_by_id(self, request_id: str) -> AccessRequest | None:
        return next((r for r in await self._requests.load() if r.id == request_id), None)

    async def get_all(
        self,
        *,
        requester_id: str | None = None,
        client_id: str | None = None,
        status: AccessRequestStatus | None = None,
    ) -> list[AccessRequest]:
        return [
            r
            for r in await self._requests.load()
            if (requester_id is None or r.requester_id == requester_id)
            and (client_id is None or r.client_id == client_id)
            and (status is None or r.status == status)
        ]

    async def add_pending(self, request: AccessRequest) -> AccessRequest | None:
        async with self._requests.mutate() as requests:
            for existing in requests:
                if (
                    existing.is_pending
                    and existing.requester_id == request.requester_id
                    and existing.client_id == request.client_id
                ):
                    return None
            requests.append(request)
        return request

    async def resolve(
        self, request_id: str, status: AccessRequestStatus, resolved_by: str
    ) -> AccessRequest | None:
        async with self._requests.mutate() as requests:
            index = _index_of(requests, request_id)
            if index is None:
                return None
            request = requests[index]
            request.resolve(status, resolved_by)
        return request


def build_json_repositories(store: JsonCollectionStore) -> Repositories:
    return Repositories(
        users=JsonUserRepository(store),
        clients=JsonClientRepository(store),
        recommendations=JsonRecommendationRepository(store),
        subscriptions=JsonSubscriptionRepository(store),
        access_requests=JsonAccessRequestRepository(store),
    )
