"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when a request carries no usable identity."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidCredentialsError(DomainError):
    """Raised when login credentials don't match a user.

    The message is identical for unknown emails and wrong passwords.
    """

    def __init__(self):
        super().__init__("Invalid credentials")


class ForbiddenError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"Not authorized to modify this {resource}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a unique field is already taken."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"A user with this {field} already exists")
