"""Base domain exceptions.

All repository errors derive from DomainException. Subclasses set the
http_status_code and error_code class attributes so a web host can map them
to responses without knowing the concrete class.

Failures raised by SQLAlchemy itself are not wrapped and reach the caller as
``sqlalchemy.exc.SQLAlchemyError``.
"""

from fastapi import status


class DomainException(Exception):
    """Base exception for all domain errors."""

    http_status_code: int = status.HTTP_400_BAD_REQUEST
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str = "A domain error occurred"):
        self.message = message
        super().__init__(self.message)


class NullArgumentError(DomainException):
    """Raised when a required argument is None."""

    error_code = "NULL_ARGUMENT"

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    http_status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: object | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        message = f"{entity_type} not found"
        if entity_id is not None:
            message = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(message)
