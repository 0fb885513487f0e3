"""Application service (use case) for Client operations."""

from dataclasses import dataclass

from advisordesk.application.interfaces import (
    ClientRepository,
    RecommendationRepository,
    SubscriptionRepository,
    UserRepository,
)
from advisordesk.application.schemas.client import ClientCreate, ClientUpdate
from advisordesk.application.services.authorization_service import AuthorizationService
from advisordesk.application.services.recommendation_service import client_stats
from advisordesk.domain.entities import Client, ClientStats, User, UserRole
from advisordesk.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
)
from advisordesk.infrastructure.logging.audit_logger import AuditCategory, AuditLogger

audit = AuditLogger("ClientService")


@dataclass
class ClientView:
    """A client as seen by one admin: derived counts and whether they may act on it."""

    client: Client
    stats: ClientStats
    has_access: bool


class ClientService:
    """Orchestrates client CRUD under the ownership rules of AuthorizationService."""

    def __init__(
        self,
        clients: ClientRepository,
        subscriptions: SubscriptionRepository,
        users: UserRepository,
        recommendations: RecommendationRepository,
        authorization: AuthorizationService,
    ):
        self._clients = clients
        self._subscriptions = subscriptions
        self._users = users
        self._recommendations = recommendations
        self._authorization = authorization

    async def list_for(self, actor: User) -> list[ClientView]:
        """Every client, flagged with the actor's access so sub-admins know what to request."""
        _require_admin(actor)
        clients = await self._clients.get_all()
        accessible = await self._authorization.accessible_client_ids(actor, [c.id for c in clients])
        recommendations = await self._recommendations.get_all()
        return [
            ClientView(
                client=c,
                stats=client_stats(c.id, recommendations),
                has_access=c.id in accessible,
            )
            for c in clients
        ]

    async def get_for(self, actor: User, client_id: str) -> ClientView:
        _require_admin(actor)
        client = await self._get(client_id)
        await self._authorization.ensure_access(actor, client_id)
        recommendations = await self._recommendations.get_all()
        return ClientView(client=client, stats=client_stats(client_id, recommendations), has_access=True)

    async def create(self, actor: User, data: ClientCreate) -> ClientView:
        """Create a client owned by ``actor``."""
        _require_admin(actor)
        await self._ensure_subscription(data.subscription_id)

        client = Client(
            name=data.name,
            email=data.email,
            phone=data.phone,
            status=data.status,
            subscription_id=data.subscription_id,
            owner_id=actor.id,
        )
        if data.user_id is not None:
            linked = await self._users.get_by_id(data.user_id)
            if linked is None:
                raise EntityNotFoundError("User", data.user_id)
            if linked.role != UserRole.CLIENT:
                raise ForbiddenError("Only client accounts can be linked to a client record")
            if await self._clients.get_by_id(data.user_id) is not None:
                raise DuplicateEntityError("Client", "id", data.user_id)
            client.id = linked.id

        created = await self._clients.create(client)
        audit.event(AuditCategory.CLIENT, "Client created", client_id=created.id, owner_id=actor.id)
        return ClientView(client=created, stats=ClientStats(), has_access=True)

    async def update(self, actor: User, client_id: str, data: ClientUpdate) -> ClientView:
        _require_admin(actor)
        client = await self._get(client_id)
        await self._authorization.ensure_access(actor, client_id)
        if data.subscription_id is not None:
            await self._ensure_subscription(data.subscription_id)

        client.update(
            name=data.name,
            email=data.email,
            phone=data.phone,
            status=data.status,
            subscription_id=data.subscription_id,
        )
        updated = await self._clients.update(client)
        recommendations = await self._recommendations.get_all()
        return ClientView(client=updated, stats=client_stats(client_id, recommendations), has_access=True)

    async def delete(self, actor: User, client_id: str) -> None:
        """Only the owner or the main admin may delete; approved requesters may not."""
        _require_admin(actor)
        client = await self._get(client_id)
        if client.owner_id != actor.id and not actor.is_main_admin:
            audit.denied(AuditCategory.CLIENT, "Client deletion refused", actor_id=actor.id, client_id=client_id)
            raise ForbiddenError("Only the client's owner or the main admin can delete it")

        await self._clients.delete(client_id)
        audit.event(AuditCategory.CLIENT, "Client deleted", client_id=client_id, deleted_by=actor.id)

    async def _get(self, client_id: str) -> Client:
        client = await self._clients.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def _ensure_subscription(self, subscription_id: str) -> None:
        if await self._subscriptions.get_by_id(subscription_id) is None:
            raise EntityNotFoundError("Subscription", subscription_id)


def _require_admin(actor: User) -> None:
    if not actor.is_admin:
        raise ForbiddenError("Only admins can manage clients")
