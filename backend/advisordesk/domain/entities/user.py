"""Domain entity for actors — admins and clients who sign in."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class UserRole(str, Enum):
    """Roles an actor can hold."""

    ADMIN = "admin"
    CLIENT = "client"


@dataclass
class User:
    """An authenticated actor.

    Exactly one user carries ``is_main_admin`` and it is only ever set by
    seeding; every other admin is a sub-admin created by the main admin.
    """

    name: str
    email: str
    password_hash: str
    role: UserRole = UserRole.CLIENT
    is_main_admin: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_login_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def update(
        self,
        name: str | None = None,
        email: str | None = None,
        password_hash: str | None = None,
    ) -> None:
        """Merge the given profile fields; ``None`` leaves a field untouched."""
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email
        if password_hash is not None:
            self.password_hash = password_hash

    def mark_logged_in(self) -> None:
        self.last_login_at = datetime.now(timezone.utc)
