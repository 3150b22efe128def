"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to manipulate content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str | None):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        actor = f"User {user_id}" if user_id else "Anonymous user"
        super().__init__(
            f"{actor} is not authorized to manipulate {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateKeyError(DomainError):
    """Raised when a status already carries a tag with the given key."""

    def __init__(self, status_id: int, key: str):
        self.status_id = status_id
        self.key = key
        super().__init__(f"StatusTag with key '{key}' already exists on status {status_id}")


class UnknownVisibilityError(ValidationError):
    """Raised when a visibility name does not match any level."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Unknown visibility: {name!r}")
