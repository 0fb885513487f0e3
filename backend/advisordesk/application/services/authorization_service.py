"""Authorization resolver — who may view or manage which client.

Access to a client is granted by exactly one of three facts, evaluated
against current repository state on every call:

1. the actor is the main admin,
2. the actor owns the client (``Client.owner_id``),
3. an approved AccessRequest exists for (actor, client).

Sub-admins gain (3) by filing an access request that the client's owner or
the main admin approves.
"""

from advisordesk.application.interfaces import AccessRequestRepository, ClientRepository
from advisordesk.application.services.notification_service import NotificationService
from advisordesk.domain.entities import AccessRequest, AccessRequestStatus, User
from advisordesk.domain.exceptions import (
    DuplicateRequestError,
    EntityNotFoundError,
    ForbiddenError,
)
from advisordesk.infrastructure.logging.audit_logger import AuditCategory, AuditLogger

audit = AuditLogger("AuthorizationService")


class AuthorizationService:
    """Evaluates client-access rules and manages access requests."""

    def __init__(
        self,
        clients: ClientRepository,
        access_requests: AccessRequestRepository,
        notifications: NotificationService | None = None,
    ):
        self._clients = clients
        self._access_requests = access_requests
        self._notifications = notifications

    # ── Predicates ───────────────────────────────────────────────────

    @staticmethod
    def is_main_admin(actor: User | None) -> bool:
        return bool(actor and actor.is_main_admin)

    async def owner_of(self, client_id: str) -> str | None:
        """Return the owning admin's id, or None for an unknown client."""
        client = await self._clients.get_by_id(client_id)
        return client.owner_id if client else None

    async def has_access_to_client(self, actor: User | None, client_id: str) -> bool:
        if actor is None:
            return False
        if self.is_main_admin(actor):
            return True
        if await self.owner_of(client_id) == actor.id:
            return True
        approved = await self._access_requests.get_all(
            requester_id=actor.id,
            client_id=client_id,
            status=AccessRequestStatus.APPROVED,
        )
        return bool(approved)

    async def accessible_client_ids(self, actor: User, client_ids: list[str]) -> set[str]:
        """Subset of ``client_ids`` the actor may act on, in one pass."""
        if self.is_main_admin(actor):
            return set(client_ids)
        approved = await self._access_requests.get_all(
            requester_id=actor.id,
            status=AccessRequestStatus.APPROVED,
        )
        granted = {r.client_id for r in approved}
        owned = {c.id for c in await self._clients.get_all(owner_id=actor.id)}
        return {cid for cid in client_ids if cid in granted or cid in owned}

    async def ensure_access(self, actor: User, client_id: str) -> None:
        """Raise ForbiddenError unless the actor may act on the client."""
        if not await self.has_access_to_client(actor, client_id):
            audit.denied(
                AuditCategory.ACCESS_DECISION,
                "Client access refused",
                actor_id=actor.id,
                client_id=client_id,
            )
            raise ForbiddenError("You do not have access to this client")

    async def can_resolve(self, actor: User, request: AccessRequest) -> bool:
        """Only the client's owner or the main admin may approve or reject."""
        if self.is_main_admin(actor):
            return True
        return actor.is_admin and await self.owner_of(request.client_id) == actor.id

    # ── Access requests ──────────────────────────────────────────────

    async def request_client_access(
        self, actor: User, client_id: str, client_name: str | None = None
    ) -> AccessRequest:
        """File a pending request for ``client_id`` on behalf of ``actor``.

        No access check is made first: an admin without access is exactly who
        needs to ask for it.
        """
        if not actor.is_admin:
            raise ForbiddenError("Only admins can request client access")

        client = await self._clients.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)

        request = AccessRequest(
            requester_id=actor.id,
            requester_name=actor.name,
            client_id=client_id,
            client_name=client_name or client.name,
        )
        stored = await self._access_requests.add_pending(request)
        if stored is None:
            audit.detail("Access request already pending", requester_id=actor.id, client_id=client_id)
            raise DuplicateRequestError(actor.id, client_id)

        audit.event(
            AuditCategory.ACCESS_REQUEST,
            "Access requested",
            request_id=stored.id,
            requester_id=actor.id,
            client_id=client_id,
        )
        await self._notify(
            "access_request.created",
            stored,
            recipients=[client.owner_id],
        )
        return stored

    async def approve_access_request(self, actor: User, request_id: str) -> AccessRequest:
        return await self._resolve(actor, request_id, AccessRequestStatus.APPROVED)

    async def reject_access_request(self, actor: User, request_id: str) -> AccessRequest:
        return await self._resolve(actor, request_id, AccessRequestStatus.REJECTED)

    async def get_pending_requests(self, actor: User | None) -> list[AccessRequest]:
        """Pending requests the actor is entitled to decide on, in insertion order."""
        if actor is None or not actor.is_admin:
            return []

        pending = await self._access_requests.get_all(status=AccessRequestStatus.PENDING)
        if self.is_main_admin(actor):
            return pending

        owned = {c.id for c in await self._clients.get_all(owner_id=actor.id)}
        return [r for r in pending if r.client_id in owned]

    async def list_requests_for(self, actor: User) -> list[AccessRequest]:
        """Every request the actor filed or may decide on (all of them for the main admin)."""
        if self.is_main_admin(actor):
            return await self._access_requests.get_all()
        if not actor.is_admin:
            return []

        owned = {c.id for c in await self._clients.get_all(owner_id=actor.id)}
        return [
            r
            for r in await self._access_requests.get_all()
            if r.requester_id == actor.id or r.client_id in owned
        ]

    # ── Internals ────────────────────────────────────────────────────

    async def _resolve(
        self, actor: User, request_id: str, status: AccessRequestStatus
    ) -> AccessRequest:
        request = await self._access_requests.get_by_id(request_id)
        if request is None:
            raise EntityNotFoundError("AccessRequest", request_id)

        if not await self.can_resolve(actor, request):
            audit.denied(
                AuditCategory.ACCESS_DECISION,
                f"Refused to mark request {status.value}",
                actor_id=actor.id,
                request_id=request_id,
            )
            raise ForbiddenError("Only the client's owner or the main admin can decide this request")

        stored = await self._access_requests.resolve(request_id, status, resolved_by=actor.id)
        if stored is None:
            raise EntityNotFoundError("AccessRequest", request_id)

        audit.event(
            AuditCategory.ACCESS_DECISION,
            f"Access request {status.value}",
            request_id=request_id,
            requester_id=stored.requester_id,
            client_id=stored.client_id,
            resolved_by=actor.id,
        )
        await self._notify(
            f"access_request.{status.value}",
            stored,
            recipients=[stored.requester_id],
        )
        return stored

    async def _notify(self, event: str, request: AccessRequest, recipients: list[str]) -> None:
        if self._notifications is None:
            return
        await self._notifications.publish(
            event,
            {
                "request_id": request.id,
                "requester_id": request.requester_id,
                "client_id": request.client_id,
                "client_name": request.client_name,
                "status": request.status.value,
            },
            recipient_ids=recipients,
        )
