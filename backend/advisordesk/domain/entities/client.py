"""Domain entity for advisory clients and their ownership."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from advisordesk.domain.entities.subscription import DEFAULT_SUBSCRIPTION_ID


class ClientStatus(str, Enum):
    """Whether the advisory relationship is currently running."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class Client:
    """A client record owned exclusively by the admin referenced by ``owner_id``.

    When a client actor signs in, its ``User.id`` equals the id of the linked
    client record, which is how recommendations find their audience.
    """

    name: str
    email: str
    owner_id: str
    phone: str = ""
    status: ClientStatus = ClientStatus.ACTIVE
    subscription_id: str = DEFAULT_SUBSCRIPTION_ID
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        status: ClientStatus | None = None,
        subscription_id: str | None = None,
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email
        if phone is not None:
            self.phone = phone
        if status is not None:
            self.status = status
        if subscription_id is not None:
            self.subscription_id = subscription_id
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class ClientStats:
    """Recommendation counts for one client, derived at query time."""

    recommendations_assigned: int = 0
    recommendations_acknowledged: int = 0
