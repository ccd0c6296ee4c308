import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, Iterable, Optional

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from starlette.middleware.cors import CORSMiddleware

from apps.settings import settings
from core.db.core import engine
from core.fastapi.handlers import register_exception_handlers
from core.utils.loader import discover_modules, load_models

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [user=%(user_id)s] %(message)s"


def configure_logging(log_filters: Iterable[logging.Filter] = ()) -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format=LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)
    for handler in root.handlers:
        for log_filter in log_filters:
            if log_filter not in handler.filters:
                handler.addFilter(log_filter)


def create_app(
    apps_dir: str = "apps",
    on_startup: Optional[Callable[[], Awaitable[None]]] = None,
    log_filters: Iterable[logging.Filter] = (),
    title: str = "API Sistema de Parqueo",
) -> FastAPI:
    """
    Build the application and mount every ``<apps_dir>/api/<feature>/router.py``.

    Each router module must expose a module level ``router``; they are
    mounted under ``settings.API_PREFIX`` in alphabetical order of feature.
    """
    configure_logging(log_filters)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if on_startup is not None:
            await on_startup()
        yield
        await engine.dispose()
        logger.info("Application shut down")

    app = FastAPI(
        title=title,
        version="1.0.0",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    load_models(apps_dir)

    for module in discover_modules(apps_dir, "router"):
        router = getattr(module, "router", None)
        if router is None:
            logger.warning("%s has no router, skipping", module.__name__)
            continue
        app.include_router(router, prefix=settings.API_PREFIX)
        logger.debug("Mounted %s", module.__name__)

    return app
