"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing or malformed input."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when a request carries no usable credential.

    The message is deliberately generic. Expired, malformed and forged
    tokens all end up here with the same text.
    """

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when an authenticated user is not entitled to an action."""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when creating a resource that already exists."""

    pass


class TransientError(DomainError):
    """Raised when a backing store did not answer in time.

    Callers may retry the whole request.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Temporarily unavailable: {operation}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
