"""Domain entity for broadcast notifications."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class Notification:
    """A fire-and-forget event broadcast to interested parties."""

    event: str
    payload: dict[str, Any] = field(default_factory=dict)
    recipient_ids: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
