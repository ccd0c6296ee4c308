from core.exceptions.base import AbstractException
from core.exceptions.request import InvalidRequestException, ConflictException
from core.exceptions.database import NotFoundException
from core.exceptions.authentication import UnauthorizedException, ForbiddenException

__all__ = [
    "AbstractException",
    "InvalidRequestException",
    "ConflictException",
    "NotFoundException",
    "UnauthorizedException",
    "ForbiddenException",
]
