"""Pydantic DTOs for client access requests."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from advisordesk.domain.entities import AccessRequestStatus


class AccessRequestCreate(BaseModel):
    """A sub-admin asking to act on a client they do not own."""

    client_id: str = Field(..., min_length=1, max_length=64)
    client_name: str | None = Field(None, max_length=255)


class AccessRequestResolve(BaseModel):
    """Body of PUT /access-requests/{id}."""

    status: Literal["approved", "rejected"]


class AccessRequestResponse(BaseModel):
    id: str
    requester_id: str
    requester_name: str
    client_id: str
    client_name: str
    status: AccessRequestStatus
    request_date: datetime
    resolved_at: datetime | None = None
    resolved_by: str | None = None

    model_config = {"from_attributes": True}
