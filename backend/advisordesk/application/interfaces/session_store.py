"""Abstract port for the server-side session store."""

from abc import ABC, abstractmethod

from advisordesk.domain.entities import AuthSession


class SessionStore(ABC):
    """Holds sign-in sessions between requests."""

    @abstractmethod
    async def get(self, session_id: str) -> AuthSession | None:
        ...

    @abstractmethod
    async def save(self, session: AuthSession) -> None:
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        ...

    @abstractmethod
    async def get_for_user(self, user_id: str) -> list[AuthSession]:
        ...

    @abstractmethod
    async def try_begin_login(self, email: str) -> bool:
        """Mark a login for ``email`` as in flight.

        Returns False if one is already authenticating.
        """
        ...

    @abstractmethod
    async def end_login(self, email: str) -> None:
        ...
