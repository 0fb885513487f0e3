"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from advisordesk.config import get_settings
from advisordesk.application.interfaces import (
    NotificationPublisher,
    PasswordHasher,
    Repositories,
    SessionStore,
    TokenIssuer,
)
from advisordesk.application.services import (
    AuthorizationService,
    ClientService,
    IdentityService,
    NotificationService,
    RecommendationService,
    SubscriptionService,
)
from advisordesk.domain.entities import AuthSession, User
from advisordesk.infrastructure.database.session import async_session_factory
from advisordesk.infrastructure.database.repositories import (
    SQLAlchemyAccessRequestRepository,
    SQLAlchemyClientRepository,
    SQLAlchemyRecommendationRepository,
    SQLAlchemySubscriptionRepository,
    SQLAlchemyUserRepository,
)
from advisordesk.infrastructure.json_store import JsonCollectionStore, build_json_repositories
from advisordesk.infrastructure.notifications import (
    LoggingNotificationPublisher,
    WebhookNotificationPublisher,
)
from advisordesk.infrastructure.security import JoseTokenIssuer, WerkzeugPasswordHasher
from advisordesk.infrastructure.sessions import InMemorySessionStore

bearer = HTTPBearer(auto_error=False)


# ── Process-wide singletons ──────────────────────────────────────────


@lru_cache
def get_session_store() -> SessionStore:
    """Sessions live for the lifetime of the process."""
    return InMemorySessionStore()


@lru_cache
def get_json_store() -> JsonCollectionStore:
    return JsonCollectionStore(get_settings().data_dir)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return WerkzeugPasswordHasher()


@lru_cache
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return JoseTokenIssuer(
        secret=settings.jwt_secret,
        issuer=settings.jwt_issuer,
        algorithm=settings.jwt_algorithm,
    )


@lru_cache
def get_notification_publisher() -> NotificationPublisher:
    settings = get_settings()
    if settings.notification_webhook_url.strip():
        return WebhookNotificationPublisher(
            url=settings.notification_webhook_url,
            timeout=settings.notification_timeout,
        )
    return LoggingNotificationPublisher()


# ── Repositories (one unit of work per request) ─────────────────────


def build_sqlalchemy_repositories(session: AsyncSession) -> Repositories:
    return Repositories(
        users=SQLAlchemyUserRepository(session),
        clients=SQLAlchemyClientRepository(session),
        recommendations=SQLAlchemyRecommendationRepository(session),
        subscriptions=SQLAlchemySubscriptionRepository(session),
        access_requests=SQLAlchemyAccessRequestRepository(session),
    )


async def get_repositories() -> AsyncGenerator[Repositories, None]:
    """Repositories of the configured backend.

    The database backend commits at the end of the request and rolls back
    on error; the JSON backend persists on every mutation.
    """
    if get_settings().storage_backend == "json":
        yield build_json_repositories(get_json_store())
        return

    async with async_session_factory() as session:
        try:
            yield build_sqlalchemy_repositories(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# ── Services ─────────────────────────────────────────────────────────


def get_notification_service(
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> NotificationService:
    return NotificationService(publisher)


def get_authorization_service(
    repos: Repositories = Depends(get_repositories),
    notifications: NotificationService = Depends(get_notification_service),
) -> AuthorizationService:
    return AuthorizationService(repos.clients, repos.access_requests, notifications)


def get_recommendation_service(
    repos: Repositories = Depends(get_repositories),
    notifications: NotificationService = Depends(get_notification_service),
) -> RecommendationService:
    return RecommendationService(
        repos.recommendations, repos.clients, repos.subscriptions, notifications
    )


def get_client_service(
    repos: Repositories = Depends(get_repositories),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> ClientService:
    return ClientService(
        repos.clients, repos.subscriptions, repos.users, repos.recommendations, authorization
    )


def get_subscription_service(
    repos: Repositories = Depends(get_repositories),
) -> SubscriptionService:
    return SubscriptionService(repos.subscriptions, repos.clients)


def get_identity_service(
    repos: Repositories = Depends(get_repositories),
    sessions: SessionStore = Depends(get_session_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> IdentityService:
    return IdentityService(
        repos.users,
        sessions,
        hasher,
        tokens,
        session_ttl=timedelta(minutes=get_settings().session_ttl_minutes),
    )


# ── Authentication ───────────────────────────────────────────────────


async def get_current_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    identity: IdentityService = Depends(get_identity_service),
) -> AuthSession:
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )
    session = await identity.resolve_session(credentials.credentials)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


async def get_current_user(
    session: AuthSession = Depends(get_current_session),
    identity: IdentityService = Depends(get_identity_service),
) -> User:
    """The signed-in actor, read fresh so role changes apply immediately."""
    user = await identity.user_for_session(session)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account not found")
    return user


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    identity: IdentityService = Depends(get_identity_service),
) -> User | None:
    if not credentials:
        return None
    return await identity.current_user(credentials.credentials)
