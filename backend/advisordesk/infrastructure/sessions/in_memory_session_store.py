"""Process-local session store.

Sessions do not survive a restart; every actor signs in again.
"""

import asyncio

from advisordesk.application.interfaces import SessionStore
from advisordesk.domain.entities import AuthSession


class InMemorySessionStore(SessionStore):
    """Dict-backed sessions plus the set of emails currently authenticating."""

    def __init__(self) -> None:
        self._sessions: dict[str, AuthSession] = {}
        self._authenticating: set[str] = set()
        self._lock = asyncio.Lock()

    async def get(self, session_id: str) -> AuthSession | None:
        return self._sessions.get(session_id)

    async def save(self, session: AuthSession) -> None:
        async with self._lock:
            self._sessions[session.id] = session

    async def delete(self, session_id: str) -> bool:
        async with self._lock:
            return self._sessions.pop(session_id, None) is not None

    async def get_for_user(self, user_id: str) -> list[AuthSession]:
        return [s for s in self._sessions.values() if s.user_id == user_id]

    async def try_begin_login(self, email: str) -> bool:
        async with self._lock:
            if email in self._authenticating:
                return False
            self._authenticating.add(email)
            return True

    async def end_login(self, email: str) -> None:
        async with self._lock:
            self._authenticating.discard(email)

    def clear(self) -> None:
        self._sessions.clear()
        self._authenticating.clear()
