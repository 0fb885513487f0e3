"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from advisordesk.application.interfaces import UserRepository
from advisordesk.domain.entities import User, UserRole
from advisordesk.domain.exceptions import EntityNotFoundError
from advisordesk.infrastructure.database.models import UserModel
from advisordesk.infrastructure.database.repositories._timestamps import as_utc


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            role=UserRole(model.role),
            is_main_admin=model.is_main_admin,
            created_at=as_utc(model.created_at),
            last_login_at=as_utc(model.last_login_at),
        )

    def _to_model(self, entity: User) -> UserModel:
        """Map domain entity → ORM model (for creation)."""
        return UserModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            password_hash=entity.password_hash,
            role=entity.role.value,
            is_main_admin=entity.is_main_admin,
            created_at=entity.created_at,
            last_login_at=entity.last_login_at,
        )

    async def get_by_id(self, user_id: str) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_main_admin(self) -> User | None:
        stmt = select(UserModel).where(UserModel.is_main_admin.is_(True)).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = self._to_model(user)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise EntityNotFoundError("User", user.id)
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.last_login_at = user.last_login_at
        await self._session.flush()
        return self._to_entity(model)
