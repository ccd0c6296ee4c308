# apps/api/access_history/router.py

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from apps.api.access_history.schema import (
    AccessHistoryListResponse,
    AccessRecordCreate,
    AccessRecordCreatedResponse,
    AccessRecordResponse,
    AccessStatsResponse,
)
from apps.api.access_history.service import AccessHistoryServiceDependency
from apps.api.auth.dependency import AdminUserDependency, UserDependency

router = APIRouter(
    prefix="/historial",
    tags=["Historial de Accesos"],
)


def _listing(records) -> AccessHistoryListResponse:
    return AccessHistoryListResponse(
        total=len(records),
        historial=[AccessRecordResponse.model_validate(r) for r in records],
    )


@router.get("", description="List access history (Admin only)")
async def list_history(
    admin: AdminUserDependency,
    history_service: AccessHistoryServiceDependency,
    usuario_id: Optional[int] = Query(None),
    accion: Optional[str] = Query(None),
    fecha_inicio: Optional[date] = Query(None),
    fecha_fin: Optional[date] = Query(None),
    limit: int = Query(100, ge=1, le=1000),
) -> AccessHistoryListResponse:
    records = await history_service.list_records(
        usuario_id=usuario_id,
        accion=accion,
        fecha_inicio=fecha_inicio,
        fecha_fin=fecha_fin,
        limit=limit,
    )
    return _listing(records)


@router.get("/estadisticas", description="Access counts by action (Admin only)")
async def history_stats(
    admin: AdminUserDependency,
    history_service: AccessHistoryServiceDependency,
) -> AccessStatsResponse:
    return AccessStatsResponse(**await history_service.get_stats())


@router.get("/usuario/{usuario_id}", description="Access history of one user (Admin only)")
async def history_by_user(
    usuario_id: int,
    admin: AdminUserDependency,
    history_service: AccessHistoryServiceDependency,
) -> AccessHistoryListResponse:
    records = await history_service.list_records(usuario_id=usuario_id)
    return _listing(records)


@router.get("/{record_id}", description="Get one access record (Admin only)")
async def get_record(
    record_id: int,
    admin: AdminUserDependency,
    history_service: AccessHistoryServiceDependency,
) -> AccessRecordResponse:
    return AccessRecordResponse.model_validate(await history_service.get_record(record_id))


@router.post("", status_code=201, description="Record an access event for the caller")
async def record_access(
    user: UserDependency,
    history_service: AccessHistoryServiceDependency,
    data: AccessRecordCreate,
) -> AccessRecordCreatedResponse:
    entry = await history_service.record(user.id, data.accion)
    return AccessRecordCreatedResponse(
        mensaje="Acceso registrado exitosamente",
        registro=AccessRecordResponse.model_validate(entry),
    )
