"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod

from advisordesk.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Client | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        owner_id: str | None = None,
        subscription_id: str | None = None,
    ) -> list[Client]:
        """Clients in insertion order, optionally filtered."""
        ...

    @abstractmethod
    async def create(self, client: Client) -> Client:
        ...

    @abstractmethod
    async def update(self, client: Client) -> Client:
        ...

    @abstractmethod
    async def delete(self, client_id: str) -> bool:
        """Delete a client. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def reassign_subscription(self, from_id: str, to_id: str) -> int:
        """Move every member of one subscription to another in a single step.

        Returns the number of clients moved.
        """
        ...
