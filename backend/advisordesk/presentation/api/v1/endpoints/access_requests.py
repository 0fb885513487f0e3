"""Client access request endpoints."""

from fastapi import APIRouter, Depends, status

from advisordesk.application.schemas.access_request import (
    AccessRequestCreate,
    AccessRequestResolve,
    AccessRequestResponse,
)
from advisordesk.application.services import AuthorizationService
from advisordesk.domain.entities import User
from advisordesk.domain.exceptions import DomainError
from advisordesk.infrastructure.dependencies import (
    get_authorization_service,
    get_current_user,
    get_optional_user,
)
from advisordesk.presentation.api.errors import http_error

router = APIRouter(prefix="/access-requests", tags=["Access Requests"])


@router.get("", response_model=list[AccessRequestResponse])
async def list_access_requests(
    actor: User = Depends(get_current_user),
    service: AuthorizationService = Depends(get_authorization_service),
) -> list[AccessRequestResponse]:
    """Requests the caller filed or may decide on."""
    requests = await service.list_requests_for(actor)
    return [AccessRequestResponse.model_validate(r) for r in requests]


@router.get("/pending", response_model=list[AccessRequestResponse])
async def list_pending_requests(
    actor: User | None = Depends(get_optional_user),
    service: AuthorizationService = Depends(get_authorization_service),
) -> list[AccessRequestResponse]:
    """Pending requests awaiting the caller's decision; empty when signed out."""
    requests = await service.get_pending_requests(actor)
    return [AccessRequestResponse.model_validate(r) for r in requests]


@router.post("", response_model=AccessRequestResponse, status_code=status.HTTP_201_CREATED)
async def request_access(
    data: AccessRequestCreate,
    actor: User = Depends(get_current_user),
    service: AuthorizationService = Depends(get_authorization_service),
) -> AccessRequestResponse:
    try:
        request = await service.request_client_access(actor, data.client_id, data.client_name)
    except DomainError as e:
        raise http_error(e)
    return AccessRequestResponse.model_validate(request)


@router.post("/{request_id}/approve", response_model=AccessRequestResponse)
async def approve_request(
    request_id: str,
    actor: User = Depends(get_current_user),
    service: AuthorizationService = Depends(get_authorization_service),
) -> AccessRequestResponse:
    try:
        request = await service.approve_access_request(actor, request_id)
    except DomainError as e:
        raise http_error(e)
    return AccessRequestResponse.model_validate(request)


@router.post("/{request_id}/reject", response_model=AccessRequestResponse)
async def reject_request(
    request_id: str,
    actor: User = Depends(get_current_user),
    service: AuthorizationService = Depends(get_authorization_service),
) -> AccessRequestResponse:
    try:
        request = await service.reject_access_request(actor, request_id)
    except DomainError as e:
        raise http_error(e)
    return AccessRequestResponse.model_validate(request)


@router.put("/{request_id}", response_model=AccessRequestResponse)
async def resolve_request(
    request_id: str,
    data: AccessRequestResolve,
    actor: User = Depends(get_current_user),
    service: AuthorizationService = Depends(get_authorization_service),
) -> AccessRequestResponse:
    """Approve or reject via ``{"status": "approved" | "rejected"}``."""
    try:
        if data.status == "approved":
            request = await service.approve_access_request(actor, request_id)
        else:
            request = await service.reject_access_request(actor, request_id)
    except DomainError as e:
        raise http_error(e)
    return AccessRequestResponse.model_validate(request)
