from core.exceptions.base import AbstractException


class NotFoundException(AbstractException):
    status_code = 404
    error_code = "NOT_FOUND"
    title = "Recurso no encontrado"
