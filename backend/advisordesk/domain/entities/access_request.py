"""Domain entity for cross-ownership access requests between admins."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from advisordesk.domain.exceptions import AccessRequestResolvedError


class AccessRequestStatus(str, Enum):
    """Lifecycle states of an access request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class AccessRequest:
    """A sub-admin's request to act on a client owned by someone else.

    Requests start pending and are resolved exactly once; they are never
    deleted, so the collection doubles as the grant history.
    """

    requester_id: str
    requester_name: str
    client_id: str
    client_name: str
    status: AccessRequestStatus = AccessRequestStatus.PENDING
    id: str = field(default_factory=lambda: str(uuid4()))
    request_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resolved_at: datetime | None = None
    resolved_by: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == AccessRequestStatus.PENDING

    def resolve(self, status: AccessRequestStatus, resolved_by: str) -> None:
        """Transition pending → approved or rejected."""
        if not self.is_pending:
            raise AccessRequestResolvedError(self.id, self.status.value)
        self.status = status
        self.resolved_by = resolved_by
        self.resolved_at = datetime.now(timezone.utc)
