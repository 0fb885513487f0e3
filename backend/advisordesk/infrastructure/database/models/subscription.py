"""SQLAlchemy ORM model for the Subscription entity."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from advisordesk.infrastructure.database.base import Base


class SubscriptionModel(Base):
    """ORM model — maps to the 'subscriptions' table."""

    __tablename__ = "subscriptions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<SubscriptionModel(id={self.id}, name='{self.name}')>"
