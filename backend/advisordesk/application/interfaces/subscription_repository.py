"""Abstract repository interface (port) for Subscription persistence."""

from abc import ABC, abstractmethod

from advisordesk.domain.entities import Subscription


class SubscriptionRepository(ABC):
    """Port for subscription persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, subscription_id: str) -> Subscription | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Subscription]:
        ...

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        ...

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription:
        ...

    @abstractmethod
    async def delete(self, subscription_id: str) -> bool:
        ...
