import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.settings import settings
from core.exceptions.base import AbstractException

logger = logging.getLogger(__name__)


async def abstract_exception_handler(request: Request, exc: AbstractException):
    logger.info(
        "%s %s rejected: %s (%s)",
        request.method,
        request.url.path,
        exc.error_code,
        exc.message,
    )
    return ORJSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    fields = sorted(
        {str(err["loc"][-1]) for err in errors if err.get("loc")}
    )
    return ORJSONResponse(
        status_code=400,
        content={
            "error": "Campos requeridos",
            "mensaje": "Datos inválidos o incompletos: " + ", ".join(fields),
            "codigo": "VALIDATION_ERROR",
            "detalles": errors,
        },
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return ORJSONResponse(
        status_code=409,
        content={
            "error": "Conflicto de integridad",
            "mensaje": "La operación viola una restricción de datos",
            "codigo": "INTEGRITY_ERROR",
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return ORJSONResponse(
            status_code=404,
            content={
                "error": "Ruta no encontrada",
                "ruta": request.url.path,
                "metodo": request.method,
            },
        )
    return ORJSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "mensaje": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return ORJSONResponse(
        status_code=500,
        content={
            "error": "Error interno del servidor",
            "mensaje": str(exc) if settings.DEBUG else "Ha ocurrido un error",
            "codigo": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AbstractException, abstract_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
