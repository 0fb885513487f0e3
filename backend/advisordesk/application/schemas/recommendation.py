"""Pydantic DTOs for the Recommendation feature."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from advisordesk.domain.entities import (
    DEFAULT_SUBSCRIPTION_ID,
    FALLBACK_SEGMENT,
    MARKET_SEGMENTS,
    RecommendationStatus,
)


def _known_segment(value: str) -> str:
    if value not in MARKET_SEGMENTS and value != FALLBACK_SEGMENT:
        raise ValueError(f"type must be one of: {', '.join(MARKET_SEGMENTS)}")
    return value


Segment = Annotated[str, AfterValidator(_known_segment)]


class TargetInput(BaseModel):
    """A submitted price target; unparseable prices are dropped later."""

    id: str | None = None
    price: float | str | None = None
    timeframe: str | None = None


class TargetSchema(BaseModel):
    id: str
    price: float
    timeframe: str

    model_config = {"from_attributes": True}


class RecommendationCreate(BaseModel):
    """Schema for issuing a recommendation.

    The audience is ``clients_assigned`` plus every current member of
    ``subscription_id``.
    """

    title: str = Field(..., min_length=1, max_length=255, examples=["Buy INFY on dips"])
    type: Segment | None = Field(None, examples=["Equity"])
    description: str = ""
    entry_price: float | None = Field(None, examples=[1520.5])
    stop_loss: float | None = Field(None, examples=[1480.0])
    targets: list[TargetInput] = Field(default_factory=list)
    status: RecommendationStatus = RecommendationStatus.ACTIVE
    subscription_id: str = Field(DEFAULT_SUBSCRIPTION_ID, max_length=64)
    clients_assigned: list[str] = Field(default_factory=list)
    instrument: str | None = Field(None, max_length=255)
    strike_price: str | None = Field(None, max_length=50)
    option_type: str | None = Field(None, max_length=10, examples=["CE", "PE"])


class RecommendationUpdate(BaseModel):
    """Schema for editing a recommendation — all fields optional.

    Supplying ``subscription_id`` or ``clients_assigned`` recomputes the audience.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    type: Segment | None = None
    description: str | None = None
    entry_price: float | None = None
    stop_loss: float | None = None
    targets: list[TargetInput] | None = None
    status: RecommendationStatus | None = None
    subscription_id: str | None = Field(None, max_length=64)
    clients_assigned: list[str] | None = None
    instrument: str | None = Field(None, max_length=255)
    strike_price: str | None = Field(None, max_length=50)
    option_type: str | None = Field(None, max_length=10)


class RecommendationResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    type: str
    description: str
    entry_price: float | None
    stop_loss: float | None
    targets: list[TargetSchema]
    status: RecommendationStatus
    subscription_ids: list[str]
    clients_assigned: list[str]
    clients_acknowledged: list[str]
    created_by: str | None
    instrument: str | None = None
    strike_price: str | None = None
    option_type: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
