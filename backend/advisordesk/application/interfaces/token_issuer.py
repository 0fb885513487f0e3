"""Abstract port for signed access tokens."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any


class TokenIssuer(ABC):
    """Encodes session references into bearer tokens and back."""

    @abstractmethod
    def issue(self, subject: str, session_id: str, expires_at: datetime, **claims: Any) -> str:
        ...

    @abstractmethod
    def decode(self, token: str) -> dict[str, Any] | None:
        """Return the verified claims, or None for an invalid/expired token."""
        ...
