"""Translation of domain exceptions into HTTP errors."""

from fastapi import HTTPException, status

from advisordesk.domain.exceptions import (
    AccessRequestResolvedError,
    AuthenticationInProgressError,
    DomainError,
    DuplicateEntityError,
    DuplicateRequestError,
    EntityNotFoundError,
    ForbiddenError,
    InvalidCredentialsError,
    PersistenceError,
    ProtectedEntityError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateEntityError, status.HTTP_409_CONFLICT),
    (DuplicateRequestError, status.HTTP_409_CONFLICT),
    (AccessRequestResolvedError, status.HTTP_409_CONFLICT),
    (ProtectedEntityError, status.HTTP_409_CONFLICT),
    (AuthenticationInProgressError, status.HTTP_409_CONFLICT),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def http_error(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTPException a controller should raise."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
