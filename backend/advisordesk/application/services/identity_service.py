"""Session / identity store — sign-in, registration and profile use cases.

Each login creates its own server-side session; the bearer token handed to
the caller only references it. A session moves through
logged_out → authenticating → logged_in and back to logged_out on logout or
a failed attempt. Logging out ends that one session only; profile updates
refresh the snapshot held by every live session of the same user.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from advisordesk.application.interfaces import (
    PasswordHasher,
    SessionStore,
    TokenIssuer,
    UserRepository,
)
from advisordesk.application.schemas.user import UserUpdate
from advisordesk.domain.entities import AuthSession, User, UserRole
from advisordesk.domain.exceptions import (
    AuthenticationInProgressError,
    DuplicateEmailError,
    EntityNotFoundError,
    ForbiddenError,
    InvalidCredentialsError,
)
from advisordesk.infrastructure.logging.audit_logger import AuditCategory, AuditLogger

logger = logging.getLogger(__name__)
audit = AuditLogger("IdentityService")


@dataclass
class LoginResult:
    """Outcome of a successful login."""

    user: User
    session: AuthSession
    access_token: str


class IdentityService:
    """Tracks who is signed in and manages actor accounts."""

    def __init__(
        self,
        users: UserRepository,
        sessions: SessionStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        session_ttl: timedelta,
    ):
        self._users = users
        self._sessions = sessions
        self._hasher = hasher
        self._tokens = tokens
        self._session_ttl = session_ttl

    # ── Sign-in lifecycle ────────────────────────────────────────────

    async def login(self, email: str, password: str) -> LoginResult:
        if not await self._sessions.try_begin_login(email):
            raise AuthenticationInProgressError(email)

        session = AuthSession(ttl=self._session_ttl)
        session.begin_authentication()
        try:
            user = await self._users.get_by_email(email)
            if user is None or not self._hasher.verify(user.password_hash, password):
                session.end()
                audit.denied(AuditCategory.AUTH, "Login failed", email=email)
                raise InvalidCredentialsError()

            user.mark_logged_in()
            user = await self._users.update(user)
            session.complete(user)
            await self._sessions.save(session)
        finally:
            await self._sessions.end_login(email)

        token = self._tokens.issue(
            subject=user.id,
            session_id=session.id,
            expires_at=session.expires_at,
            role=user.role.value,
        )
        audit.event(AuditCategory.AUTH, "Login succeeded", user_id=user.id, session_id=session.id)
        return LoginResult(user=user, session=session, access_token=token)

    async def resolve_session(self, token: str) -> AuthSession | None:
        """Map a bearer token to its live session, or None."""
        claims = self._tokens.decode(token)
        if not claims or "sid" not in claims:
            return None
        session = await self._sessions.get(claims["sid"])
        if session is None:
            return None
        if not session.is_active or session.user_id != claims.get("sub"):
            if not session.is_active:
                await self._sessions.delete(session.id)
            return None
        return session

    async def current_user(self, token: str) -> User | None:
        """The actor behind a bearer token, read fresh from the repository."""
        session = await self.resolve_session(token)
        if session is None:
            return None
        return await self.user_for_session(session)

    async def user_for_session(self, session: AuthSession) -> User | None:
        if session.user_id is None:
            return None
        return await self._users.get_by_id(session.user_id)

    async def logout(self, session_id: str) -> None:
        """End the session unconditionally."""
        session = await self._sessions.get(session_id)
        if session is not None:
            session.end()
        await self._sessions.delete(session_id)
        audit.event(AuditCategory.AUTH, "Logged out", session_id=session_id)

    # ── Accounts ─────────────────────────────────────────────────────

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.CLIENT,
    ) -> User:
        """Create an actor. Email uniqueness is case-sensitive; never a main admin."""
        if await self._users.get_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = User(
            name=name,
            email=email,
            password_hash=self._hasher.hash(password),
            role=role,
            is_main_admin=False,
        )
        created = await self._users.create(user)
        logger.info("Registered %s user %s", created.role.value, created.id)
        return created

    async def create_sub_admin(self, caller: User, name: str, email: str, password: str) -> User:
        if not caller.is_main_admin:
            audit.denied(AuditCategory.AUTH, "Sub-admin creation refused", caller_id=caller.id)
            raise ForbiddenError("Only the main admin can create sub-admins")

        user = await self.register(name, email, password, role=UserRole.ADMIN)
        audit.event(AuditCategory.AUTH, "Sub-admin created", user_id=user.id, created_by=caller.id)
        return user

    async def list_users(self, caller: User) -> list[User]:
        if not caller.is_admin:
            raise ForbiddenError("Only admins can list users")
        return await self._users.get_all()

    async def update_user_profile(self, caller: User, user_id: str, data: UserUpdate) -> User:
        """Merge the given fields into the user's profile.

        Callers may edit themselves; the main admin may edit anyone.
        """
        if caller.id != user_id and not caller.is_main_admin:
            raise ForbiddenError("You can only update your own profile")

        user = await self._users.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)

        if data.email is not None and data.email != user.email:
            existing = await self._users.get_by_email(data.email)
            if existing is not None and existing.id != user_id:
                raise DuplicateEmailError(data.email)

        password_hash = None
        if data.password:
            if caller.id == user_id and not (
                data.current_password
                and self._hasher.verify(user.password_hash, data.current_password)
            ):
                raise InvalidCredentialsError()
            password_hash = self._hasher.hash(data.password)

        user.update(name=data.name, email=data.email, password_hash=password_hash)
        updated = await self._users.update(user)

        for session in await self._sessions.get_for_user(user_id):
            session.refresh_snapshot(updated)
            await self._sessions.save(session)
        return updated

    async def ensure_main_admin(self, name: str, email: str, password: str) -> User:
        """Provision the single main admin if none exists yet."""
        existing = await self._users.get_main_admin()
        if existing is not None:
            return existing

        admin = User(
            name=name,
            email=email,
            password_hash=self._hasher.hash(password),
            role=UserRole.ADMIN,
            is_main_admin=True,
        )
        created = await self._users.create(admin)
        logger.info("Seeded main admin '%s' (%s)", created.name, created.email)
        return created
