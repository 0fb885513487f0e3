"""SQLAlchemy ORM model for the AccessRequest entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from advisordesk.infrastructure.database.base import Base


class AccessRequestModel(Base):
    """ORM model — maps to the 'access_requests' table."""

    __tablename__ = "access_requests"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    requester_id: Mapped[str] = mapped_column(String(36), nullable=False)
    requester_name: Mapped[str] = mapped_column(String(255), nullable=False)
    client_id: Mapped[str] = mapped_column(String(36), nullable=False)
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    request_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    resolved_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    __table_args__ = (
        Index("ix_access_requests_pair", "requester_id", "client_id", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<AccessRequestModel(id={self.id}, requester={self.requester_id}, "
            f"client={self.client_id}, status='{self.status}')>"
        )
