"""Pydantic DTOs for the notification broadcast endpoint."""

from typing import Any

from pydantic import BaseModel, Field


class NotificationCreate(BaseModel):
    event: str = Field(..., min_length=1, max_length=100, examples=["recommendation.updated"])
    payload: dict[str, Any] = Field(default_factory=dict)
    recipient_ids: list[str] = Field(default_factory=list)


class NotificationAck(BaseModel):
    success: bool = True
