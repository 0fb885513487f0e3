"""Concrete repository implementation for Client backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from advisordesk.application.interfaces import ClientRepository
from advisordesk.domain.entities import Client, ClientStatus
from advisordesk.domain.exceptions import EntityNotFoundError
from advisordesk.infrastructure.database.models import ClientModel
from advisordesk.infrastructure.database.repositories._timestamps import as_utc


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel) -> Client:
        """Map ORM model → domain entity."""
        return Client(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            status=ClientStatus(model.status),
            subscription_id=model.subscription_id,
            owner_id=model.owner_id,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            status=entity.status.value,
            subscription_id=entity.subscription_id,
            owner_id=entity.owner_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, client_id: str) -> Client | None:
        result = await self._session.get(ClientModel, client_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        owner_id: str | None = None,
        subscription_id: str | None = None,
    ) -> list[Client]:
        stmt = select(ClientModel)

        if owner_id is not None:
            stmt = stmt.where(ClientModel.owner_id == owner_id)
        if subscription_id is not None:
            stmt = stmt.where(ClientModel.subscription_id == subscription_id)

        stmt = stmt.order_by(ClientModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, client: Client) -> Client:
        model = self._to_model(client)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, client: Client) -> Client:
        model = await self._session.get(ClientModel, client.id)
        if model is None:
            raise EntityNotFoundError("Client", client.id)
        model.name = client.name
        model.email = client.email
        model.phone = client.phone
        model.status = client.status.value
        model.subscription_id = client.subscription_id
        model.updated_at = client.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, client_id: str) -> bool:
        model = await self._session.get(ClientModel, client_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def reassign_subscription(self, from_id: str, to_id: str) -> int:
        stmt = (
            update(ClientModel)
            .where(ClientModel.subscription_id == from_id)
            .values(subscription_id=to_id, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0
