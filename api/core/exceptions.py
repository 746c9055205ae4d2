"""Domain exceptions shared by validators, repositories and services."""


class AppError(Exception):
    """Base class for errors that map onto an HTTP error envelope."""

    status_code: int = 400

    def __init__(self, detail: str, message: str | None = None):
        self.detail = detail
        self.message = message or detail
        super().__init__(detail)


class ValidationError(AppError):
    """Request body or params failed a presence/type check."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(f"ValidationError: {message}", message)


class NotFoundError(AppError):
    """Identifier does not resolve to a live record."""

    def __init__(self, entity: str, entity_id: str, action: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        if action:
            detail = f"Failed to {action} {entity.lower()}"
        else:
            detail = f"{entity} not found"
        super().__init__(detail)


class UnexpectedError(AppError):
    """A validator crashed; the original exception is chained."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail, "An unexpected error occurred")


class AuthenticationError(AppError):
    """Missing, malformed or expired bearer token."""

    status_code = 401

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(detail, "Unauthorized")
