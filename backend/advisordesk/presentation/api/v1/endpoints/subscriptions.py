"""Subscription endpoints."""

from fastapi import APIRouter, Depends, status

from advisordesk.application.schemas.subscription import (
    SubscriptionCreate,
    SubscriptionResponse,
    SubscriptionUpdate,
)
from advisordesk.application.services import SubscriptionService
from advisordesk.domain.entities import User
from advisordesk.domain.exceptions import DomainError
from advisordesk.infrastructure.dependencies import get_current_user, get_subscription_service
from advisordesk.presentation.api.errors import http_error

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])


@router.get("", response_model=list[SubscriptionResponse])
async def list_subscriptions(
    _: User = Depends(get_current_user),
    service: SubscriptionService = Depends(get_subscription_service),
) -> list[SubscriptionResponse]:
    subscriptions = await service.list_subscriptions()
    return [SubscriptionResponse.model_validate(s) for s in subscriptions]


@router.post("", response_model=SubscriptionResponse, status_code=status.HTTP_201_CREATED)
async def create_subscription(
    data: SubscriptionCreate,
    actor: User = Depends(get_current_user),
    service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionResponse:
    try:
        subscription = await service.create(actor, data)
    except DomainError as e:
        raise http_error(e)
    return SubscriptionResponse.model_validate(subscription)


@router.put("/{subscription_id}", response_model=SubscriptionResponse)
async def update_subscription(
    subscription_id: str,
    data: SubscriptionUpdate,
    actor: User = Depends(get_current_user),
    service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionResponse:
    try:
        subscription = await service.update(actor, subscription_id, data)
    except DomainError as e:
        raise http_error(e)
    return SubscriptionResponse.model_validate(subscription)


@router.delete("/{subscription_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subscription(
    subscription_id: str,
    actor: User = Depends(get_current_user),
    service: SubscriptionService = Depends(get_subscription_service),
) -> None:
    """Delete a subscription; its clients move to the default one."""
    try:
        await service.delete(actor, subscription_id)
    except DomainError as e:
        raise http_error(e)
