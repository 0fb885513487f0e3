"""Abstract repository interface (port) for AccessRequest persistence."""

from abc import ABC, abstractmethod

from advisordesk.domain.entities import AccessRequest, AccessRequestStatus


class AccessRequestRepository(ABC):
    """Port for access request persistence — implemented in the infrastructure layer.

    There is no delete: resolved requests are the record of granted access.
    """

    @abstractmethod
    async def get_by_id(self, request_id: str) -> AccessRequest | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        requester_id: str | None = None,
        client_id: str | None = None,
        status: AccessRequestStatus | None = None,
    ) -> list[AccessRequest]:
        """Requests in insertion order, optionally filtered."""
        ...

    @abstractmethod
    async def add_pending(self, request: AccessRequest) -> AccessRequest | None:
        """Store a new pending request unless one already exists for the same
        (requester_id, client_id) pair.

        Returns the stored request, or None when a pending one was found.
        """
        ...

    @abstractmethod
    async def resolve(
        self, request_id: str, status: AccessRequestStatus, resolved_by: str
    ) -> AccessRequest | None:
        """Atomically move a pending request to ``status``.

        Returns the resolved request, or None when the id is unknown. Raises
        AccessRequestResolvedError when the request is no longer pending.
        """
        ...
