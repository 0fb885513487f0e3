"""Actor registration and profile endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from advisordesk.application.schemas.user import (
    RegisterRequest,
    SubAdminCreate,
    UserResponse,
    UserUpdate,
)
from advisordesk.application.services import IdentityService
from advisordesk.domain.entities import User, UserRole
from advisordesk.domain.exceptions import DomainError
from advisordesk.infrastructure.dependencies import (
    get_current_user,
    get_identity_service,
    get_optional_user,
)
from advisordesk.presentation.api.errors import http_error

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    caller: User = Depends(get_current_user),
    service: IdentityService = Depends(get_identity_service),
) -> list[UserResponse]:
    try:
        users = await service.list_users(caller)
    except DomainError as e:
        raise http_error(e)
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: RegisterRequest,
    caller: User | None = Depends(get_optional_user),
    service: IdentityService = Depends(get_identity_service),
) -> UserResponse:
    """Register a client actor. Admin accounts can only be created by the main admin."""
    try:
        if data.role == UserRole.ADMIN:
            if caller is None:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Only the main admin can create sub-admins",
                )
            user = await service.create_sub_admin(caller, data.name, data.email, data.password)
        else:
            user = await service.register(data.name, data.email, data.password)
    except DomainError as e:
        raise http_error(e)
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/sub-admins", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_sub_admin(
    data: SubAdminCreate,
    caller: User = Depends(get_current_user),
    service: IdentityService = Depends(get_identity_service),
) -> UserResponse:
    try:
        user = await service.create_sub_admin(caller, data.name, data.email, data.password)
    except DomainError as e:
        raise http_error(e)
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    caller: User = Depends(get_current_user),
    service: IdentityService = Depends(get_identity_service),
) -> UserResponse:
    """Update profile fields; live sessions of that actor see the change."""
    try:
        user = await service.update_user_profile(caller, user_id, data)
    except DomainError as e:
        raise http_error(e)
    return UserResponse.model_validate(user, from_attributes=True)
