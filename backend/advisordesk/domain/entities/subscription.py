"""Domain entity for subscriptions — grouping tags for clients."""

from dataclasses import dataclass, field
from uuid import uuid4

DEFAULT_SUBSCRIPTION_ID = "default"


@dataclass
class Subscription:
    """A named group of clients that recommendations can target at once."""

    name: str
    description: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def is_default(self) -> bool:
        return self.id == DEFAULT_SUBSCRIPTION_ID


def default_subscription() -> Subscription:
    return Subscription(
        id=DEFAULT_SUBSCRIPTION_ID,
        name="Default",
        description="Default subscription",
    )
