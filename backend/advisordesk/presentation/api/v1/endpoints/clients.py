"""Client CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from advisordesk.application.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from advisordesk.application.services import ClientService, ClientView
from advisordesk.domain.entities import User
from advisordesk.domain.exceptions import DomainError
from advisordesk.infrastructure.dependencies import get_client_service, get_current_user
from advisordesk.presentation.api.errors import http_error

router = APIRouter(prefix="/clients", tags=["Clients"])


def _to_response(view: ClientView) -> ClientResponse:
    client = view.client
    return ClientResponse(
        id=client.id,
        name=client.name,
        email=client.email,
        phone=client.phone,
        status=client.status,
        subscription_id=client.subscription_id,
        owner_id=client.owner_id,
        created_at=client.created_at,
        updated_at=client.updated_at,
        recommendations_assigned=view.stats.recommendations_assigned,
        recommendations_acknowledged=view.stats.recommendations_acknowledged,
        has_access=view.has_access,
    )


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    actor: User = Depends(get_current_user),
    service: ClientService = Depends(get_client_service),
) -> list[ClientResponse]:
    """Every client, flagged with whether the caller may act on it."""
    try:
        views = await service.list_for(actor)
    except DomainError as e:
        raise http_error(e)
    return [_to_response(v) for v in views]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    actor: User = Depends(get_current_user),
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    try:
        view = await service.get_for(actor, client_id)
    except DomainError as e:
        raise http_error(e)
    return _to_response(view)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    actor: User = Depends(get_current_user),
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Create a client owned by the caller."""
    try:
        view = await service.create(actor, data)
    except DomainError as e:
        raise http_error(e)
    return _to_response(view)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    actor: User = Depends(get_current_user),
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    try:
        view = await service.update(actor, client_id, data)
    except DomainError as e:
        raise http_error(e)
    return _to_response(view)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: str,
    actor: User = Depends(get_current_user),
    service: ClientService = Depends(get_client_service),
) -> None:
    try:
        await service.delete(actor, client_id)
    except DomainError as e:
        raise http_error(e)
