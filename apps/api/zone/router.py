# apps/api/zone/router.py

from fastapi import APIRouter

from apps.api.auth.dependency import AdminUserDependency, UserDependency
from apps.api.zone.schema import (
    ZoneCreate,
    ZoneEnvelope,
    ZoneListResponse,
    ZoneResponse,
    ZoneUpdate,
)
from apps.api.zone.service import ZoneServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/zonas",
    tags=["Zonas"],
)


@router.get("", description="List zones with space counts")
async def list_zones(
    user: UserDependency,
    zone_service: ZoneServiceDependency,
) -> ZoneListResponse:
    zones = await zone_service.list_zones()
    return ZoneListResponse(total=len(zones), zonas=zones)


@router.get("/{zone_id}", description="Get zone details")
async def get_zone(
    zone_id: int,
    user: UserDependency,
    zone_service: ZoneServiceDependency,
) -> ZoneEnvelope:
    zone = await zone_service.get_zone(zone_id)
    return ZoneEnvelope(zona=ZoneResponse.model_validate(zone))


@router.post("", status_code=201, description="Create a zone")
async def create_zone(
    user: AdminUserDependency,
    zone_service: ZoneServiceDependency,
    data: ZoneCreate,
) -> ZoneEnvelope:
    zone = await zone_service.create_zone(data)
    return ZoneEnvelope(
        mensaje="Zona creada exitosamente", zona=ZoneResponse.model_validate(zone)
    )


@router.put("/{zone_id}", description="Update a zone")
async def update_zone(
    zone_id: int,
    user: AdminUserDependency,
    zone_service: ZoneServiceDependency,
    data: ZoneUpdate,
) -> ZoneEnvelope:
    zone = await zone_service.update_zone(zone_id, data)
    return ZoneEnvelope(
        mensaje="Zona actualizada exitosamente", zona=ZoneResponse.model_validate(zone)
    )


@router.delete("/{zone_id}", description="Delete a zone")
async def delete_zone(
    zone_id: int,
    user: AdminUserDependency,
    zone_service: ZoneServiceDependency,
) -> MessageResponse:
    await zone_service.delete_zone(zone_id)
    return MessageResponse(mensaje="Zona eliminada exitosamente")
