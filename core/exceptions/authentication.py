from core.exceptions.base import AbstractException


class UnauthorizedException(AbstractException):
    status_code = 401
    error_code = "UNAUTHORIZED"
    title = "No autenticado"


class ForbiddenException(AbstractException):
    status_code = 403
    error_code = "FORBIDDEN"
    title = "Acceso denegado"
