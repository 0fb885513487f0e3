"""Domain-specific exceptions — framework-independent."""


class DomainError(Exception):
    """Base class for every recoverable, user-facing domain failure."""


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(DomainError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DuplicateEmailError(DuplicateEntityError):
    """Raised when an email address already belongs to another user."""

    def __init__(self, email: str):
        super().__init__("User", "email", email)


class InvalidCredentialsError(DomainError):
    """Raised when no stored user matches the supplied email and password."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class AuthenticationInProgressError(DomainError):
    """Raised when a second login is attempted while one is still running."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Authentication for '{email}' is already in progress")


class ForbiddenError(DomainError):
    """Raised when the acting user may not perform the requested action."""

    def __init__(self, message: str = "You are not allowed to perform this action"):
        super().__init__(message)


class DuplicateRequestError(DomainError):
    """Raised when a pending access request already exists for the pair."""

    def __init__(self, requester_id: str, client_id: str):
        self.requester_id = requester_id
        self.client_id = client_id
        super().__init__("Access request already pending")


class AccessRequestResolvedError(DomainError):
    """Raised when approving or rejecting a request that is no longer pending."""

    def __init__(self, request_id: str, status: str):
        self.request_id = request_id
        self.status = status
        super().__init__(f"Access request '{request_id}' is already {status}")


class ProtectedEntityError(DomainError):
    """Raised when modifying an entity the system must always keep intact."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} '{entity_id}' cannot be modified or deleted")


class PersistenceError(DomainError):
    """Raised when a collection could not be written to its store."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Failed to save {collection}")
