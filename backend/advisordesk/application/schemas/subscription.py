"""Pydantic DTOs for the Subscription feature."""

from pydantic import BaseModel, Field


class SubscriptionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Premium"])
    description: str = Field("", max_length=1000)


class SubscriptionUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=1000)


class SubscriptionResponse(BaseModel):
    id: str
    name: str
    description: str
    is_default: bool

    model_config = {"from_attributes": True}
