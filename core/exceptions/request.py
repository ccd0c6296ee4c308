from core.exceptions.base import AbstractException


class InvalidRequestException(AbstractException):
    """Malformed or missing input."""

    status_code = 400
    error_code = "VALIDATION_ERROR"
    title = "Campos requeridos"


class ConflictException(AbstractException):
    """State or uniqueness violation."""

    status_code = 409
    error_code = "CONFLICT"
    title = "Conflicto"
