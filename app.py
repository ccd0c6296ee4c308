import logging

from fastapi.responses import ORJSONResponse

from apps.context import CurrentUserLogFilter
from apps.settings import settings
from core.fastapi.app import create_app

logger = logging.getLogger(__name__)


async def on_startup():
    logger.info("Application Starting Up ...")


app = create_app(
    apps_dir="apps",
    on_startup=on_startup,
    log_filters=[CurrentUserLogFilter()],
)


@app.get("/", summary="Service banner", tags=["Health Check"])
def root():
    prefix = settings.API_PREFIX
    return ORJSONResponse(
        {
            "mensaje": "API Sistema de Parqueo",
            "version": app.version,
            "endpoints": {
                "auth": f"{prefix}/auth",
                "roles": f"{prefix}/roles",
                "usuarios": f"{prefix}/usuarios",
                "historial": f"{prefix}/historial",
                "empleados": f"{prefix}/empleados",
                "turnos": f"{prefix}/turnos",
                "clientes": f"{prefix}/clientes",
                "vehiculos": f"{prefix}/vehiculos",
                "zonas": f"{prefix}/zonas",
                "espacios": f"{prefix}/espacios",
                "tarifas": f"{prefix}/tarifas",
                "tipospago": f"{prefix}/tipospago",
                "tickets": f"{prefix}/tickets",
                "pagos": f"{prefix}/pagos",
                "multas": f"{prefix}/multas",
                "reservas": f"{prefix}/reservas",
            },
        }
    )


@app.get("/api/ping", summary="Ping the API", tags=["Health Check"])
def ping():
    return ORJSONResponse({"status": "ok"})
