"""Domain errors raised by services and mapped to HTTP responses by the routes."""

from fastapi import status


class ServiceError(Exception):
    """Base for expected failures; carries a client-safe message and an HTTP status."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FieldValidationError(ServiceError):
    """A submitted field breaks a business rule (length, format, range)."""


class DuplicateError(ServiceError):
    """The record would duplicate one that must be unique (email, user/store rating)."""


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class PermissionDeniedError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
