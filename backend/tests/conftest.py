"""Shared fakes and fixtures for the test suite."""

from datetime import timedelta

import pytest

from advisordesk.application.interfaces import (
    AccessRequestRepository,
    ClientRepository,
    NotificationPublisher,
    RecommendationRepository,
    Repositories,
    SubscriptionRepository,
    UserRepository,
)
from advisordesk.application.services import (
    AuthorizationService,
    ClientService,
    IdentityService,
    NotificationService,
    RecommendationService,
    SubscriptionService,
)
from advisordesk.domain.entities import (
    AccessRequest,
    AccessRequestStatus,
    Client,
    Notification,
    Recommendation,
    Subscription,
    User,
    UserRole,
    default_subscription,
)
from advisordesk.infrastructure.security import JoseTokenIssuer, WerkzeugPasswordHasher
from advisordesk.infrastructure.sessions import InMemorySessionStore

# Cheap hashing keeps the suite fast; production uses werkzeug's default.
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


class FakeUserRepository(UserRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._users: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    async def get_all(self) -> list[User]:
        return list(self._users.values())

    async def get_main_admin(self) -> User | None:
        return next((u for u in self._users.values() if u.is_main_admin), None)

    async def create(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        if user.id not in self._users:
            raise ValueError(f"User {user.id} not found")
        self._users[user.id] = user
        return user


class FakeClientRepository(ClientRepository):
    def __init__(self):
        self._clients: dict[str, Client] = {}

    async def get_by_id(self, client_id: str) -> Client | None:
        return self._clients.get(client_id)

    async def get_all(
        self,
        *,
        owner_id: str | None = None,
        subscription_id: str | None = None,
    ) -> list[Client]:
        return [
            c
            for c in self._clients.values()
            if (owner_id is None or c.owner_id == owner_id)
            and (subscription_id is None or c.subscription_id == subscription_id)
        ]

    async def create(self, client: Client) -> Client:
        self._clients[client.id] = client
        return client

    async def update(self, client: Client) -> Client:
        self._clients[client.id] = client
        return client

    async def delete(self, client_id: str) -> bool:
        return self._clients.pop(client_id, None) is not None

    async def reassign_subscription(self, from_id: str, to_id: str) -> int:
        moved = 0
        for client in self._clients.values():
            if client.subscription_id == from_id:
                client.subscription_id = to_id
                moved += 1
        return moved


class FakeRecommendationRepository(RecommendationRepository):
    def __init__(self):
        self._recommendations: dict[str, Recommendation] = {}

    async def get_by_id(self, recommendation_id: str) -> Recommendation | None:
        return self._recommendations.get(recommendation_id)

    async def get_all(self) -> list[Recommendation]:
        return sorted(self._recommendations.values(), key=lambda r: r.created_at, reverse=True)

    async def create(self, recommendation: Recommendation) -> Recommendation:
        self._recommendations[recommendation.id] = recommendation
        return recommendation

    async def update(self, recommendation: Recommendation) -> Recommendation:
        self._recommendations[recommendation.id] = recommendation
        return recommendation

    async def delete(self, recommendation_id: str) -> bool:
        return self._recommendations.pop(recommendation_id, None) is not None

    async def acknowledge(self, recommendation_id: str, client_id: str) -> Recommendation | None:
        recommendation = self._recommendations.get(recommendation_id)
        if recommendation is not None:
            recommendation.acknowledge(client_id)
        return recommendation


class FakeSubscriptionRepository(SubscriptionRepository):
    def __init__(self):
        self._subscriptions: dict[str, Subscription] = {}

    async def get_by_id(self, subscription_id: str) -> Subscription | None:
        return self._subscriptions.get(subscription_id)

    async def get_all(self) -> list[Subscription]:
        return list(self._subscriptions.values())

    async def create(self, subscription: Subscription) -> Subscription:
        self._subscriptions[subscription.id] = subscription
        return subscription

    async def update(self, subscription: Subscription) -> Subscription:
        self._subscriptions[subscription.id] = subscription
        return subscription

    async def delete(self, subscription_id: str) -> bool:
        return self._subscriptions.pop(subscription_id, None) is not None


class FakeAccessRequestRepository(AccessRequestRepository):
    def __init__(self):
        self._requests: list[AccessRequest] = []

    async def get_by_id(self, request_id: str) -> AccessRequest | None:
        return next((r for r in self._requests if r.id == request_id), None)

    async def get_all(
        self,
        *,
        requester_id: str | None = None,
        client_id: str | None = None,
        status: AccessRequestStatus | None = None,
    ) -> list[AccessRequest]:
        return [
            r
            for r in self._requests
            if (requester_id is None or r.requester_id == requester_id)
            and (client_id is None or r.client_id == client_id)
            and (status is None or r.status == status)
        ]

    async def add_pending(self, request: AccessRequest) -> AccessRequest | None:
        for existing in self._requests:
            if (
                existing.is_pending
                and existing.requester_id == request.requester_id
                and existing.client_id == request.client_id
            ):
                return None
        self._requests.append(request)
        return request

    async def resolve(
        self, request_id: str, status: AccessRequestStatus, resolved_by: str
    ) -> AccessRequest | None:
        request = await self.get_by_id(request_id)
        if request is not None:
            request.resolve(status, resolved_by)
        return request


class RecordingPublisher(NotificationPublisher):
    """Collects published notifications instead of delivering them."""

    def __init__(self):
        self.sent: list[Notification] = []

    async def publish(self, notification: Notification) -> None:
        self.sent.append(notification)


def make_user(
    name: str,
    role: UserRole = UserRole.ADMIN,
    is_main_admin: bool = False,
    password: str = "secret123",
) -> User:
    hasher = WerkzeugPasswordHasher(method=FAST_HASH_METHOD)
    return User(
        name=name,
        email=f"{name.lower()}@example.com",
        password_hash=hasher.hash(password),
        role=role,
        is_main_admin=is_main_admin,
    )


@pytest.fixture
def repos() -> Repositories:
    subscriptions = FakeSubscriptionRepository()
    subscriptions._subscriptions["default"] = default_subscription()
    return Repositories(
        users=FakeUserRepository(),
        clients=FakeClientRepository(),
        recommendations=FakeRecommendationRepository(),
        subscriptions=subscriptions,
        access_requests=FakeAccessRequestRepository(),
    )


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def notifications(publisher: RecordingPublisher) -> NotificationService:
    return NotificationService(publisher)


@pytest.fixture
def authorization(repos: Repositories, notifications: NotificationService) -> AuthorizationService:
    return AuthorizationService(repos.clients, repos.access_requests, notifications)


@pytest.fixture
def recommendation_service(
    repos: Repositories, notifications: NotificationService
) -> RecommendationService:
    return RecommendationService(
        repos.recommendations, repos.clients, repos.subscriptions, notifications
    )


@pytest.fixture
def client_service(repos: Repositories, authorization: AuthorizationService) -> ClientService:
    return ClientService(
        repos.clients, repos.subscriptions, repos.users, repos.recommendations, authorization
    )


@pytest.fixture
def subscription_service(repos: Repositories) -> SubscriptionService:
    return SubscriptionService(repos.subscriptions, repos.clients)


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def token_issuer() -> JoseTokenIssuer:
    return JoseTokenIssuer(secret="test-secret", issuer="advisordesk-test")


@pytest.fixture
def identity(
    repos: Repositories, session_store: InMemorySessionStore, token_issuer: JoseTokenIssuer
) -> IdentityService:
    return IdentityService(
        repos.users,
        session_store,
        WerkzeugPasswordHasher(method=FAST_HASH_METHOD),
        token_issuer,
        session_ttl=timedelta(minutes=30),
    )
