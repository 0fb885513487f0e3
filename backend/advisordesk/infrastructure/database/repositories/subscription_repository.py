"""Concrete repository implementation for Subscription backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from advisordesk.application.interfaces import SubscriptionRepository
from advisordesk.domain.entities import Subscription
from advisordesk.domain.exceptions import EntityNotFoundError
from advisordesk.infrastructure.database.models import SubscriptionModel


class SQLAlchemySubscriptionRepository(SubscriptionRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SubscriptionModel) -> Subscription:
        return Subscription(id=model.id, name=model.name, description=model.description)

    async def get_by_id(self, subscription_id: str) -> Subscription | None:
        result = await self._session.get(SubscriptionModel, subscription_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Subscription]:
        result = await self._session.execute(select(SubscriptionModel).order_by(SubscriptionModel.name))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, subscription: Subscription) -> Subscription:
        model = SubscriptionModel(
            id=subscription.id,
            name=subscription.name,
            description=subscription.description,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, subscription: Subscription) -> Subscription:
        model = await self._session.get(SubscriptionModel, subscription.id)
        if model is None:
            raise EntityNotFoundError("Subscription", subscription.id)
        model.name = subscription.name
        model.description = subscription.description
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, subscription_id: str) -> bool:
        model = await self._session.get(SubscriptionModel, subscription_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
