"""Concrete repository implementation for AccessRequest backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from advisordesk.application.interfaces import AccessRequestRepository
from advisordesk.domain.entities import AccessRequest, AccessRequestStatus
from advisordesk.domain.exceptions import AccessRequestResolvedError
from advisordesk.infrastructure.database.models import AccessRequestModel
from advisordesk.infrastructure.database.repositories._timestamps import as_utc


class SQLAlchemyAccessRequestRepository(AccessRequestRepository):
    """Implements the AccessRequestRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AccessRequestModel) -> AccessRequest:
        """Map ORM model → domain entity."""
        return AccessRequest(
            id=model.id,
            requester_id=model.requester_id,
            requester_name=model.requester_name,
            client_id=model.client_id,
            client_name=model.client_name,
            status=AccessRequestStatus(model.status),
            request_date=as_utc(model.request_date),
            resolved_at=as_utc(model.resolved_at),
            resolved_by=model.resolved_by,
        )

    def _to_model(self, entity: AccessRequest) -> AccessRequestModel:
        """Map domain entity → ORM model (for creation)."""
        return AccessRequestModel(
            id=entity.id,
            requester_id=entity.requester_id,
            requester_name=entity.requester_name,
            client_id=entity.client_id,
            client_name=entity.client_name,
            status=entity.status.value,
            request_date=entity.request_date,
            resolved_at=entity.resolved_at,
            resolved_by=entity.resolved_by,
        )

    async def get_by_id(self, request_id: str) -> AccessRequest | None:
        result = await self._session.get(AccessRequestModel, request_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        requester_id: str | None = None,
        client_id: str | None = None,
        status: AccessRequestStatus | None = None,
    ) -> list[AccessRequest]:
        stmt = select(AccessRequestModel)

        if requester_id is not None:
            stmt = stmt.where(AccessRequestModel.requester_id == requester_id)
        if client_id is not None:
            stmt = stmt.where(AccessRequestModel.client_id == client_id)
        if status is not None:
            stmt = stmt.where(AccessRequestModel.status == status.value)

        stmt = stmt.order_by(AccessRequestModel.request_date)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def add_pending(self, request: AccessRequest) -> AccessRequest | None:
        stmt = (
            select(AccessRequestModel.id)
            .where(
                AccessRequestModel.requester_id == request.requester_id,
                AccessRequestModel.client_id == request.client_id,
                AccessRequestModel.status == AccessRequestStatus.PENDING.value,
            )
            .with_for_update()
        )
        result = await self._session.execute(stmt)
        if result.first() is not None:
            return None

        model = self._to_model(request)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def resolve(
        self, request_id: str, status: AccessRequestStatus, resolved_by: str
    ) -> AccessRequest | None:
        # Conditional UPDATE: only one resolution can match the pending row.
        stmt = (
            update(AccessRequestModel)
            .where(
                AccessRequestModel.id == request_id,
                AccessRequestModel.status == AccessRequestStatus.PENDING.value,
            )
            .values(
                status=status.value,
                resolved_at=datetime.now(timezone.utc),
                resolved_by=resolved_by,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        reload = (
            select(AccessRequestModel)
            .where(AccessRequestModel.id == request_id)
            .execution_options(populate_existing=True)
        )
        model = (await self._session.execute(reload)).scalar_one_or_none()
        if model is None:
            return None
        if result.rowcount == 0:
            raise AccessRequestResolvedError(model.id, model.status)
        return self._to_entity(model)
