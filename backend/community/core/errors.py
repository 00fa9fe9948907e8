"""Domain error taxonomy shared by services and the HTTP layer."""

from fastapi import status


class DomainError(Exception):
    """Base class for failures surfaced to the caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(DomainError):
    """A referenced user or message does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class Forbidden(DomainError):
    """Wrong editor/deleter, or a block relation prevents the action."""

    status_code = status.HTTP_403_FORBIDDEN


class InvalidContent(DomainError):
    """Text rejected by the content gate."""


class InvalidArgument(DomainError):
    """Request is well-formed but not allowed, e.g. blocking yourself."""
