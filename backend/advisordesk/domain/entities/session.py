"""Domain entity for server-side sign-in sessions."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from enum import Enum
from uuid import uuid4

from advisordesk.domain.entities.user import User


class SessionState(str, Enum):
    """Sign-in lifecycle: logged_out → authenticating → logged_in → logged_out."""

    LOGGED_OUT = "logged_out"
    AUTHENTICATING = "authenticating"
    LOGGED_IN = "logged_in"


@dataclass
class AuthSession:
    """One sign-in of one actor; a token carries its id in the ``sid`` claim.

    ``user`` is a snapshot of the actor taken at login and refreshed when the
    actor's profile changes.
    """

    ttl: timedelta
    state: SessionState = SessionState.LOGGED_OUT
    id: str = field(default_factory=lambda: str(uuid4()))
    user: User | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    expires_at: datetime | None = None

    @property
    def user_id(self) -> str | None:
        return self.user.id if self.user else None

    @property
    def is_active(self) -> bool:
        if self.state != SessionState.LOGGED_IN or self.expires_at is None:
            return False
        return datetime.now(timezone.utc) < self.expires_at

    def begin_authentication(self) -> None:
        self.state = SessionState.AUTHENTICATING

    def complete(self, user: User) -> None:
        """Authentication succeeded — the session becomes usable."""
        self.state = SessionState.LOGGED_IN
        self.user = _snapshot(user)
        self.expires_at = datetime.now(timezone.utc) + self.ttl

    def end(self) -> None:
        """Logout or failed authentication."""
        self.state = SessionState.LOGGED_OUT
        self.user = None
        self.expires_at = None

    def refresh_snapshot(self, user: User) -> None:
        if self.user is not None and self.user.id == user.id:
            self.user = _snapshot(user)


def _snapshot(user: User) -> User:
    """Copy of the actor without password material."""
    return replace(user, password_hash="")
