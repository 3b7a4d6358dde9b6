"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised before any write is attempted.
    """

    pass


class InvalidIdentifierError(ValidationError):
    """Raised when an identifier is not a well-formed entity reference."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} format")


class MissingFieldError(ValidationError):
    """Raised when a required input is absent or blank."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


class InvalidFieldError(ValidationError):
    """Raised when an input is present but malformed."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} format")


class InvalidPaginationError(ValidationError):
    """Raised when page or limit is non-numeric, non-positive or too large."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidSortFieldError(ValidationError):
    """Raised when a listing is asked to sort by an unsupported field."""

    def __init__(self, field: str, allowed: list[str]):
        self.field = field
        self.allowed = allowed
        super().__init__(
            f"Cannot sort by '{field}'. Allowed fields: {', '.join(allowed)}"
        )


class MissingActorError(DomainError):
    """Raised when an operation needs a caller identity and none was given."""

    def __init__(self) -> None:
        super().__init__("User ID is required")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"You are not allowed to modify this {resource.lower()}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Raised when a version-checked write keeps losing to concurrent writers.

    The caller may retry the whole request.
    """

    def __init__(self, resource: str, identifier: str, attempts: int):
        self.resource = resource
        self.identifier = identifier
        self.attempts = attempts
        super().__init__(
            f"{resource} was modified concurrently, please retry the request"
        )


class StoreUnavailableError(DomainError):
    """Raised when the persistence layer fails.

    The message is deliberately generic; the underlying driver error is
    chained as ``__cause__`` for logging only.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__("Something went wrong while accessing storage")
