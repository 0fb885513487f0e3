"""Concrete repository implementation for Recommendation backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from advisordesk.application.interfaces import RecommendationRepository
from advisordesk.domain.entities import Recommendation, RecommendationStatus, Target
from advisordesk.domain.exceptions import EntityNotFoundError
from advisordesk.infrastructure.database.models import RecommendationModel
from advisordesk.infrastructure.database.repositories._timestamps import as_utc


class SQLAlchemyRecommendationRepository(RecommendationRepository):
    """Implements the RecommendationRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RecommendationModel) -> Recommendation:
        """Map ORM model → domain entity."""
        return Recommendation(
            id=model.id,
            title=model.title,
            type=model.type,
            description=model.description,
            entry_price=model.entry_price,
            stop_loss=model.stop_loss,
            targets=[
                Target(id=t["id"], price=t["price"], timeframe=t["timeframe"])
                for t in model.targets or []
            ],
            status=RecommendationStatus(model.status),
            subscription_ids=list(model.subscription_ids or []),
            clients_assigned=list(model.clients_assigned or []),
            clients_acknowledged=list(model.clients_acknowledged or []),
            created_by=model.created_by,
            instrument=model.instrument,
            strike_price=model.strike_price,
            option_type=model.option_type,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _apply(self, model: RecommendationModel, entity: Recommendation) -> None:
        """Copy mutable fields onto the model. Lists are replaced, never mutated in place."""
        model.title = entity.title
        model.type = entity.type
        model.description = entity.description
        model.entry_price = entity.entry_price
        model.stop_loss = entity.stop_loss
        model.targets = [
            {"id": t.id, "price": t.price, "timeframe": t.timeframe} for t in entity.targets
        ]
        model.status = entity.status.value
        model.subscription_ids = list(entity.subscription_ids)
        model.clients_assigned = list(entity.clients_assigned)
        model.clients_acknowledged = list(entity.clients_acknowledged)
        model.instrument = entity.instrument
        model.strike_price = entity.strike_price
        model.option_type = entity.option_type
        model.updated_at = entity.updated_at

    async def get_by_id(self, recommendation_id: str) -> Recommendation | None:
        result = await self._session.get(RecommendationModel, recommendation_id)
        return self._to_entity(result) if result else None

    async def _locked(self, recommendation_id: str) -> RecommendationModel | None:
        """Row lock plus a fresh read, so edits start from committed state."""
        stmt = (
            select(RecommendationModel)
            .where(RecommendationModel.id == recommendation_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self) -> list[Recommendation]:
        stmt = select(RecommendationModel).order_by(RecommendationModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, recommendation: Recommendation) -> Recommendation:
        model = RecommendationModel(
            id=recommendation.id,
            created_by=recommendation.created_by,
            created_at=recommendation.created_at,
        )
        self._apply(model, recommendation)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, recommendation: Recommendation) -> Recommendation:
        model = await self._locked(recommendation.id)
        if model is None:
            raise EntityNotFoundError("Recommendation", recommendation.id)
        recommendation.merge_acknowledgments(list(model.clients_acknowledged or []))
        self._apply(model, recommendation)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, recommendation_id: str) -> bool:
        model = await self._session.get(RecommendationModel, recommendation_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def acknowledge(self, recommendation_id: str, client_id: str) -> Recommendation | None:
        model = await self._locked(recommendation_id)
        if model is None:
            return None

        recommendation = self._to_entity(model)
        if recommendation.acknowledge(client_id):
            recommendation.touch()
            self._apply(model, recommendation)
            await self._session.flush()
        return recommendation
