"""Abstract repository interface (port) for Recommendation persistence."""

from abc import ABC, abstractmethod

from advisordesk.domain.entities import Recommendation


class RecommendationRepository(ABC):
    """Port for recommendation persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, recommendation_id: str) -> Recommendation | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Recommendation]:
        """All recommendations, newest first."""
        ...

    @abstractmethod
    async def create(self, recommendation: Recommendation) -> Recommendation:
        ...

    @abstractmethod
    async def update(self, recommendation: Recommendation) -> Recommendation:
        """Save an edited recommendation.

        Acknowledgments stored since ``recommendation`` was read are kept.
        """
        ...

    @abstractmethod
    async def delete(self, recommendation_id: str) -> bool:
        ...

    @abstractmethod
    async def acknowledge(self, recommendation_id: str, client_id: str) -> Recommendation | None:
        """Atomically record an acknowledgment.

        Returns the stored recommendation (changed or not), or None when the
        id is unknown.
        """
        ...
