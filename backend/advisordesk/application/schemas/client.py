"""Pydantic DTOs for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from advisordesk.domain.entities import DEFAULT_SUBSCRIPTION_ID, ClientStatus


class ClientCreate(BaseModel):
    """Schema for creating a client owned by the calling admin.

    ``user_id`` links the record to an already registered client actor; the
    record then shares that actor's id.
    """

    name: str = Field(..., min_length=1, max_length=255, examples=["Bob Investor"])
    email: str = Field(..., min_length=3, max_length=255, examples=["bob@example.com"])
    phone: str = Field("", max_length=50, examples=["555-123-4567"])
    status: ClientStatus = ClientStatus.ACTIVE
    subscription_id: str = Field(DEFAULT_SUBSCRIPTION_ID, max_length=64)
    user_id: str | None = Field(None, max_length=64)


class ClientUpdate(BaseModel):
    """Schema for updating an existing client — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=3, max_length=255)
    phone: str | None = Field(None, max_length=50)
    status: ClientStatus | None = None
    subscription_id: str | None = Field(None, max_length=64)


class ClientResponse(BaseModel):
    """Client with its derived recommendation counts."""

    id: str
    name: str
    email: str
    phone: str
    status: ClientStatus
    subscription_id: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    recommendations_assigned: int = 0
    recommendations_acknowledged: int = 0
    has_access: bool = True
