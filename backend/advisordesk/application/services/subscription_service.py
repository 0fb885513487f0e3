"""Application service (use case) for Subscription operations."""

from advisordesk.application.interfaces import ClientRepository, SubscriptionRepository
from advisordesk.application.schemas.subscription import SubscriptionCreate, SubscriptionUpdate
from advisordesk.domain.entities import (
    DEFAULT_SUBSCRIPTION_ID,
    Subscription,
    User,
    default_subscription,
)
from advisordesk.domain.exceptions import (
    EntityNotFoundError,
    ForbiddenError,
    ProtectedEntityError,
)
from advisordesk.infrastructure.logging.audit_logger import AuditCategory, AuditLogger

audit = AuditLogger("SubscriptionService")


class SubscriptionService:
    """Manages subscriptions; the "default" one is permanent."""

    def __init__(self, subscriptions: SubscriptionRepository, clients: ClientRepository):
        self._subscriptions = subscriptions
        self._clients = clients

    async def list_subscriptions(self) -> list[Subscription]:
        return await self._subscriptions.get_all()

    async def get_subscription(self, subscription_id: str) -> Subscription:
        subscription = await self._subscriptions.get_by_id(subscription_id)
        if subscription is None:
            raise EntityNotFoundError("Subscription", subscription_id)
        return subscription

    async def create(self, actor: User, data: SubscriptionCreate) -> Subscription:
        _require_admin(actor)
        subscription = Subscription(name=data.name, description=data.description)
        created = await self._subscriptions.create(subscription)
        audit.event(AuditCategory.SUBSCRIPTION, "Subscription created", subscription_id=created.id)
        return created

    async def update(
        self, actor: User, subscription_id: str, data: SubscriptionUpdate
    ) -> Subscription:
        _require_admin(actor)
        if subscription_id == DEFAULT_SUBSCRIPTION_ID:
            raise ProtectedEntityError("Subscription", subscription_id)

        subscription = await self.get_subscription(subscription_id)
        if data.name is not None:
            subscription.name = data.name
        if data.description is not None:
            subscription.description = data.description
        return await self._subscriptions.update(subscription)

    async def delete(self, actor: User, subscription_id: str) -> int:
        """Delete a subscription and move its clients to "default".

        Existing recommendations keep their audience. Returns the number of
        clients moved.
        """
        _require_admin(actor)
        if subscription_id == DEFAULT_SUBSCRIPTION_ID:
            raise ProtectedEntityError("Subscription", subscription_id)

        await self.get_subscription(subscription_id)
        moved = await self._clients.reassign_subscription(subscription_id, DEFAULT_SUBSCRIPTION_ID)
        await self._subscriptions.delete(subscription_id)
        audit.event(
            AuditCategory.SUBSCRIPTION,
            "Subscription deleted",
            subscription_id=subscription_id,
            clients_moved=moved,
        )
        return moved

    async def ensure_default(self) -> Subscription:
        """Create the default subscription when missing."""
        existing = await self._subscriptions.get_by_id(DEFAULT_SUBSCRIPTION_ID)
        if existing is not None:
            return existing
        return await self._subscriptions.create(default_subscription())


def _require_admin(actor: User) -> None:
    if not actor.is_admin:
        raise ForbiddenError("Only admins can manage subscriptions")
