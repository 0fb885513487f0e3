"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from advisordesk.domain.entities import User


class UserRepository(ABC):
    """Port for actor persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Exact (case-sensitive) email lookup."""
        ...

    @abstractmethod
    async def get_all(self) -> list[User]:
        ...

    @abstractmethod
    async def get_main_admin(self) -> User | None:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        ...
