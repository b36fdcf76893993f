"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they may not touch."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
