"""SQLAlchemy ORM model for the Recommendation entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from advisordesk.infrastructure.database.base import Base


class RecommendationModel(Base):
    """ORM model — maps to the 'recommendations' table.

    Targets and the audience lists are stored as JSON arrays.
    """

    __tablename__ = "recommendations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    entry_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    stop_loss: Mapped[float | None] = mapped_column(Float, nullable=True)
    targets: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Active")
    subscription_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    clients_assigned: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    clients_acknowledged: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    instrument: Mapped[str | None] = mapped_column(String(255), nullable=True)
    strike_price: Mapped[str | None] = mapped_column(String(50), nullable=True)
    option_type: Mapped[str | None] = mapped_column(String(10), nullable=True)
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

    def __repr__(self) -> str:
        return f"<RecommendationModel(id={self.id}, title='{self.title[:50]}')>"
