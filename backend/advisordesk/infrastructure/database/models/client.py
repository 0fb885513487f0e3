"""SQLAlchemy ORM model for the Client entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from advisordesk.infrastructure.database.base import Base


class ClientModel(Base):
    """ORM model — maps to the 'clients' table."""

    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Active")
    subscription_id: Mapped[str] = mapped_column(String(36), nullable=False, default="default")
    owner_id: Mapped[str] = mapped_column(String(36), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_clients_owner", "owner_id"),
        Index("ix_clients_subscription", "subscription_id"),
    )

    def __repr__(self) -> str:
        return f"<ClientModel(id={self.id}, name='{self.name}', owner={self.owner_id})>"
