"""Sign-in endpoints: login, logout and the current actor."""

from fastapi import APIRouter, Depends, status

from advisordesk.application.schemas.user import LoginRequest, LoginResponse, UserResponse
from advisordesk.application.services import IdentityService
from advisordesk.domain.entities import AuthSession, User
from advisordesk.domain.exceptions import DomainError
from advisordesk.infrastructure.dependencies import (
    get_current_session,
    get_current_user,
    get_identity_service,
)
from advisordesk.presentation.api.errors import http_error

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    service: IdentityService = Depends(get_identity_service),
) -> LoginResponse:
    """Authenticate and open a new session."""
    try:
        result = await service.login(data.email, data.password)
    except DomainError as e:
        raise http_error(e)
    return LoginResponse(
        access_token=result.access_token,
        expires_at=result.session.expires_at,
        user=UserResponse.model_validate(result.user, from_attributes=True),
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    session: AuthSession = Depends(get_current_session),
    service: IdentityService = Depends(get_identity_service),
) -> None:
    """End the caller's session; other sessions of the same actor stay open."""
    await service.logout(session.id)


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)
