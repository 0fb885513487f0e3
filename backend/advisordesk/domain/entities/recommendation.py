"""Domain entity for investment recommendations and their price targets."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

MARKET_SEGMENTS = ("Equity", "Futures", "Options", "Commodity", "Currency")
FALLBACK_SEGMENT = "Stock"
OPTIONS_SEGMENT = "Options"

# Timeframe labels assigned to targets by position; the last one repeats.
TARGET_TIMEFRAMES = ("Short-term", "Medium-term", "Long-term")


class RecommendationStatus(str, Enum):
    """Whether a recommendation is still actionable."""

    ACTIVE = "Active"
    CLOSED = "Closed"


@dataclass
class Target:
    """A single price target of a recommendation."""

    price: float
    timeframe: str
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class Recommendation:
    """An admin-issued trade idea and its audience.

    ``clients_assigned`` is frozen at assignment time; clients joining a
    subscription later are not added. ``clients_acknowledged`` only ever
    grows and stays a subset of ``clients_assigned``.
    """

    title: str
    type: str = FALLBACK_SEGMENT
    description: str = ""
    entry_price: float | None = None
    stop_loss: float | None = None
    targets: list[Target] = field(default_factory=list)
    status: RecommendationStatus = RecommendationStatus.ACTIVE
    subscription_ids: list[str] = field(default_factory=list)
    clients_assigned: list[str] = field(default_factory=list)
    clients_acknowledged: list[str] = field(default_factory=list)
    created_by: str | None = None
    instrument: str | None = None
    strike_price: str | None = None
    option_type: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_assigned_to(self, client_id: str) -> bool:
        return client_id in self.clients_assigned

    def has_acknowledged(self, client_id: str) -> bool:
        return client_id in self.clients_acknowledged

    def acknowledge(self, client_id: str) -> bool:
        """Record an acknowledgment. Returns True only when state changed."""
        if not self.is_assigned_to(client_id) or self.has_acknowledged(client_id):
            return False
        self.clients_acknowledged.append(client_id)
        return True

    def reassign(self, subscription_ids: list[str], client_ids: list[str]) -> None:
        """Replace the audience, dropping acknowledgments of removed clients."""
        self.subscription_ids = list(subscription_ids)
        self.clients_assigned = list(client_ids)
        self.clients_acknowledged = [
            cid for cid in self.clients_acknowledged if cid in self.clients_assigned
        ]

    def merge_acknowledgments(self, stored: list[str]) -> None:
        """Fold in acknowledgments saved since this copy was read.

        Acknowledgments never roll back, but those of clients no longer
        assigned are dropped.
        """
        merged = [cid for cid in stored if self.is_assigned_to(cid)]
        merged += [cid for cid in self.clients_acknowledged if cid not in merged]
        self.clients_acknowledged = merged

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
