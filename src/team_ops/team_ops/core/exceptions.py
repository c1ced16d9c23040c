class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an operation addresses an id that does not exist."""

    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity} {record_id!r} not found")
        self.entity = entity
        self.record_id = record_id


class ConflictError(DomainError):
    """Raised when a deterministic id is already taken."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
