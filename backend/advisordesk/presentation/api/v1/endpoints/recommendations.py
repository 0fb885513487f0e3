"""Recommendation CRUD and acknowledgment endpoints."""

from fastapi import APIRouter, Depends, status

from advisordesk.application.schemas.recommendation import (
    RecommendationCreate,
    RecommendationResponse,
    RecommendationUpdate,
)
from advisordesk.application.services import RecommendationService
from advisordesk.domain.entities import User
from advisordesk.domain.exceptions import DomainError
from advisordesk.infrastructure.dependencies import get_current_user, get_recommendation_service
from advisordesk.presentation.api.errors import http_error

router = APIRouter(prefix="/recommendations", tags=["Recommendations"])


@router.get("", response_model=list[RecommendationResponse])
async def list_recommendations(
    actor: User = Depends(get_current_user),
    service: RecommendationService = Depends(get_recommendation_service),
) -> list[RecommendationResponse]:
    """Recommendations visible to the caller, newest first."""
    recommendations = await service.list_for(actor)
    return [RecommendationResponse.model_validate(r) for r in recommendations]


@router.get("/{recommendation_id}", response_model=RecommendationResponse)
async def get_recommendation(
    recommendation_id: str,
    actor: User = Depends(get_current_user),
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    try:
        recommendation = await service.get_for(actor, recommendation_id)
    except DomainError as e:
        raise http_error(e)
    return RecommendationResponse.model_validate(recommendation)


@router.post("", response_model=RecommendationResponse, status_code=status.HTTP_201_CREATED)
async def create_recommendation(
    data: RecommendationCreate,
    actor: User = Depends(get_current_user),
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    """Issue a recommendation to a subscription plus any explicit clients."""
    try:
        recommendation = await service.create(actor, data)
    except DomainError as e:
        raise http_error(e)
    return RecommendationResponse.model_validate(recommendation)


@router.put("/{recommendation_id}", response_model=RecommendationResponse)
async def update_recommendation(
    recommendation_id: str,
    data: RecommendationUpdate,
    actor: User = Depends(get_current_user),
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    try:
        recommendation = await service.update(actor, recommendation_id, data)
    except DomainError as e:
        raise http_error(e)
    return RecommendationResponse.model_validate(recommendation)


@router.delete("/{recommendation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recommendation(
    recommendation_id: str,
    actor: User = Depends(get_current_user),
    service: RecommendationService = Depends(get_recommendation_service),
) -> None:
    try:
        await service.delete(actor, recommendation_id)
    except DomainError as e:
        raise http_error(e)


@router.post("/{recommendation_id}/acknowledge", response_model=RecommendationResponse)
async def acknowledge_recommendation(
    recommendation_id: str,
    actor: User = Depends(get_current_user),
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    """Record that the calling client has seen the recommendation."""
    try:
        recommendation = await service.acknowledge(actor, recommendation_id)
    except DomainError as e:
        raise http_error(e)
    return RecommendationResponse.model_validate(recommendation)
