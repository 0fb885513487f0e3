"""Recommendation assignment engine and recommendation use cases."""

from collections.abc import Iterable

from advisordesk.application.interfaces import (
    ClientRepository,
    RecommendationRepository,
    SubscriptionRepository,
)
from advisordesk.application.schemas.recommendation import (
    RecommendationCreate,
    RecommendationUpdate,
    TargetInput,
)
from advisordesk.application.services.notification_service import NotificationService
from advisordesk.domain.entities import (
    DEFAULT_SUBSCRIPTION_ID,
    FALLBACK_SEGMENT,
    OPTIONS_SEGMENT,
    TARGET_TIMEFRAMES,
    Client,
    ClientStats,
    Recommendation,
    Target,
    User,
)
from advisordesk.domain.exceptions import EntityNotFoundError, ForbiddenError
from advisordesk.infrastructure.logging.audit_logger import AuditCategory, AuditLogger

audit = AuditLogger("RecommendationService")


# ── Assignment rules ─────────────────────────────────────────────────


def compute_assigned_clients(
    subscription_id: str | None,
    explicit_client_ids: Iterable[str],
    all_clients: Iterable[Client],
) -> list[str]:
    """Union of the explicit ids and every member of ``subscription_id``.

    Order is preserved (explicit ids first) and duplicates are dropped, so
    feeding the result back in returns it unchanged.
    """
    assigned: list[str] = []
    seen: set[str] = set()

    def _add(client_id: str) -> None:
        if client_id not in seen:
            seen.add(client_id)
            assigned.append(client_id)

    for client_id in explicit_client_ids:
        _add(client_id)
    if subscription_id is not None:
        for client in all_clients:
            if client.subscription_id == subscription_id:
                _add(client.id)
    return assigned


def visible_to(recommendation: Recommendation, actor: User) -> bool:
    """Admins see every recommendation; a client sees those assigned to it."""
    if actor.is_admin:
        return True
    return recommendation.is_assigned_to(actor.id)


def acknowledge(recommendation: Recommendation, actor_id: str) -> bool:
    """Add ``actor_id`` to the acknowledgments if assigned; no-op otherwise."""
    return recommendation.acknowledge(actor_id)


def build_targets(targets: Iterable[TargetInput]) -> list[Target]:
    """Parse target prices, dropping blanks and non-numbers.

    Timeframes default by position: short, medium, then long term.
    """
    built: list[Target] = []
    for index, raw in enumerate(targets):
        try:
            price = float(raw.price) if raw.price not in (None, "") else None
        except (TypeError, ValueError):
            price = None
        if price is None or price != price:  # NaN
            continue
        timeframe = raw.timeframe or TARGET_TIMEFRAMES[min(index, len(TARGET_TIMEFRAMES) - 1)]
        target = Target(price=price, timeframe=timeframe)
        if raw.id:
            target.id = raw.id
        built.append(target)
    return built


def client_stats(client_id: str, recommendations: Iterable[Recommendation]) -> ClientStats:
    """Assigned / acknowledged counts for one client, computed from the recommendations."""
    stats = ClientStats()
    for recommendation in recommendations:
        if recommendation.is_assigned_to(client_id):
            stats.recommendations_assigned += 1
            if recommendation.has_acknowledged(client_id):
                stats.recommendations_acknowledged += 1
    return stats


# ── Use cases ────────────────────────────────────────────────────────


class RecommendationService:
    """Orchestrates recommendation CRUD, audience assignment and acknowledgment."""

    def __init__(
        self,
        recommendations: RecommendationRepository,
        clients: ClientRepository,
        subscriptions: SubscriptionRepository,
        notifications: NotificationService | None = None,
    ):
        self._recommendations = recommendations
        self._clients = clients
        self._subscriptions = subscriptions
        self._notifications = notifications

    async def list_for(self, actor: User) -> list[Recommendation]:
        """Recommendations visible to ``actor``, newest first."""
        return [r for r in await self._recommendations.get_all() if visible_to(r, actor)]

    async def get_for(self, actor: User, recommendation_id: str) -> Recommendation:
        recommendation = await self._recommendations.get_by_id(recommendation_id)
        # Invisible recommendations are reported as missing, not forbidden.
        if recommendation is None or not visible_to(recommendation, actor):
            raise EntityNotFoundError("Recommendation", recommendation_id)
        return recommendation

    async def create(self, actor: User, data: RecommendationCreate) -> Recommendation:
        _require_admin(actor, "create recommendations")

        subscription_id = await self._checked_subscription(
            data.subscription_id or DEFAULT_SUBSCRIPTION_ID
        )
        all_clients = await self._clients.get_all()
        explicit = _checked_clients(data.clients_assigned, all_clients)
        assigned = compute_assigned_clients(subscription_id, explicit, all_clients)

        segment = data.type or FALLBACK_SEGMENT
        recommendation = Recommendation(
            title=data.title,
            type=segment,
            description=data.description,
            entry_price=data.entry_price,
            stop_loss=data.stop_loss,
            targets=build_targets(data.targets),
            status=data.status,
            subscription_ids=[subscription_id],
            clients_assigned=assigned,
            created_by=actor.id,
        )
        _apply_option_fields(recommendation, data.instrument, data.strike_price, data.option_type)

        stored = await self._recommendations.create(recommendation)
        audit.event(
            AuditCategory.RECOMMENDATION,
            "Recommendation created",
            recommendation_id=stored.id,
            created_by=actor.id,
            clients=len(stored.clients_assigned),
        )
        if self._notifications is not None:
            await self._notifications.publish(
                "recommendation.created",
                {"recommendation_id": stored.id, "title": stored.title},
                recipient_ids=list(stored.clients_assigned),
            )
        return stored

    async def update(
        self, actor: User, recommendation_id: str, data: RecommendationUpdate
    ) -> Recommendation:
        _require_admin(actor, "edit recommendations")

        recommendation = await self._recommendations.get_by_id(recommendation_id)
        if recommendation is None:
            raise EntityNotFoundError("Recommendation", recommendation_id)

        if data.title is not None:
            recommendation.title = data.title
        if data.type is not None:
            recommendation.type = data.type
        if data.description is not None:
            recommendation.description = data.description
        if data.entry_price is not None:
            recommendation.entry_price = data.entry_price
        if data.stop_loss is not None:
            recommendation.stop_loss = data.stop_loss
        if data.targets is not None:
            recommendation.targets = build_targets(data.targets)
        if data.status is not None:
            recommendation.status = data.status

        if data.subscription_id is not None or data.clients_assigned is not None:
            if data.subscription_id is not None:
                subscription_id = await self._checked_subscription(data.subscription_id)
            else:
                subscription_id = await self._stored_subscription(recommendation)

            all_clients = await self._clients.get_all()
            if data.clients_assigned is not None:
                explicit = _checked_clients(data.clients_assigned, all_clients)
            else:
                # Clients deleted since assignment drop out silently.
                known = {c.id for c in all_clients}
                explicit = [cid for cid in recommendation.clients_assigned if cid in known]

            assigned = compute_assigned_clients(subscription_id, explicit, all_clients)
            recommendation.reassign([subscription_id], assigned)

        _apply_option_fields(
            recommendation,
            data.instrument if data.instrument is not None else recommendation.instrument,
            data.strike_price if data.strike_price is not None else recommendation.strike_price,
            data.option_type if data.option_type is not None else recommendation.option_type,
        )
        recommendation.touch()
        return await self._recommendations.update(recommendation)

    async def delete(self, actor: User, recommendation_id: str) -> None:
        """Remove by id; clients and subscriptions are untouched."""
        _require_admin(actor, "delete recommendations")
        if not await self._recommendations.delete(recommendation_id):
            raise EntityNotFoundError("Recommendation", recommendation_id)
        audit.event(
            AuditCategory.RECOMMENDATION,
            "Recommendation deleted",
            recommendation_id=recommendation_id,
            deleted_by=actor.id,
        )

    async def acknowledge(self, actor: User, recommendation_id: str) -> Recommendation:
        """Record the client actor's acknowledgment. Repeating it changes nothing."""
        if actor.is_admin:
            raise ForbiddenError("Only clients acknowledge recommendations")

        current = await self.get_for(actor, recommendation_id)
        if current.has_acknowledged(actor.id):
            return current

        stored = await self._recommendations.acknowledge(recommendation_id, actor.id)
        if stored is None:
            raise EntityNotFoundError("Recommendation", recommendation_id)
        audit.event(
            AuditCategory.RECOMMENDATION,
            "Recommendation acknowledged",
            recommendation_id=recommendation_id,
            client_id=actor.id,
        )
        return stored

    async def stats_for_clients(self, client_ids: Iterable[str]) -> dict[str, ClientStats]:
        recommendations = await self._recommendations.get_all()
        return {cid: client_stats(cid, recommendations) for cid in client_ids}

    async def _checked_subscription(self, subscription_id: str) -> str:
        if await self._subscriptions.get_by_id(subscription_id) is None:
            raise EntityNotFoundError("Subscription", subscription_id)
        return subscription_id

    async def _stored_subscription(self, recommendation: Recommendation) -> str:
        """The recommendation's own subscription, or the default one once it is gone."""
        if recommendation.subscription_ids:
            subscription_id = recommendation.subscription_ids[0]
            if await self._subscriptions.get_by_id(subscription_id) is not None:
                return subscription_id
        return DEFAULT_SUBSCRIPTION_ID


def _checked_clients(client_ids: Iterable[str], all_clients: list[Client]) -> list[str]:
    known = {c.id for c in all_clients}
    checked = list(client_ids)
    for client_id in checked:
        if client_id not in known:
            raise EntityNotFoundError("Client", client_id)
    return checked


def _require_admin(actor: User, action: str) -> None:
    if not actor.is_admin:
        raise ForbiddenError(f"Only admins can {action}")


def _apply_option_fields(
    recommendation: Recommendation,
    instrument: str | None,
    strike_price: str | None,
    option_type: str | None,
) -> None:
    """Strike price and option type only exist for the Options segment."""
    recommendation.instrument = instrument
    if recommendation.type == OPTIONS_SEGMENT:
        recommendation.strike_price = strike_price
        recommendation.option_type = option_type
    else:
        recommendation.strike_price = None
        recommendation.option_type = None
