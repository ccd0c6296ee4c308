# apps/api/space/router.py
from typing import Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import AdminUserDependency, StaffUserDependency, UserDependency
from apps.api.space.schema import (
    AvailableSpacesResponse,
    SpaceAvailabilityUpdate,
    SpaceCreate,
    SpaceEnvelope,
    SpaceListResponse,
    SpaceResponse,
    SpaceUpdate,
)
from apps.api.space.service import SpaceServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/espacios",
    tags=["Espacios"],
)


@router.get("", description="List spaces with occupancy totals")
async def list_spaces(
    user: UserDependency,
    space_service: SpaceServiceDependency,
    zona_id: Optional[int] = Query(None),
    disponible: Optional[bool] = Query(None),
) -> SpaceListResponse:
    spaces = await space_service.list_spaces(zona_id=zona_id, disponible=disponible)
    available = sum(1 for s in spaces if s.disponible)
    return SpaceListResponse(
        total=len(spaces),
        disponibles=available,
        ocupados=len(spaces) - available,
        espacios=[SpaceResponse.model_validate(s) for s in spaces],
    )


@router.get("/disponibles", description="List free spaces")
async def list_available_spaces(
    user: UserDependency,
    space_service: SpaceServiceDependency,
    zona_id: Optional[int] = Query(None),
) -> AvailableSpacesResponse:
    spaces = await space_service.list_spaces(zona_id=zona_id, disponible=True)
    return AvailableSpacesResponse(
        total=len(spaces),
        espacios=[SpaceResponse.model_validate(s) for s in spaces],
    )


@router.get("/{space_id}", description="Get space details")
async def get_space(
    space_id: int,
    user: UserDependency,
    space_service: SpaceServiceDependency,
) -> SpaceEnvelope:
    space = await space_service.get_space(space_id)
    return SpaceEnvelope(espacio=SpaceResponse.model_validate(space))


@router.post("", status_code=201, description="Create a space")
async def create_space(
    user: AdminUserDependency,
    space_service: SpaceServiceDependency,
    data: SpaceCreate,
) -> SpaceEnvelope:
    space = await space_service.create_space(data)
    return SpaceEnvelope(
        mensaje="Espacio creado exitosamente",
        espacio=SpaceResponse.model_validate(space),
    )


@router.put("/{space_id}", description="Update a space")
async def update_space(
    space_id: int,
    user: AdminUserDependency,
    space_service: SpaceServiceDependency,
    data: SpaceUpdate,
) -> SpaceEnvelope:
    space = await space_service.update_space(space_id, data)
    return SpaceEnvelope(
        mensaje="Espacio actualizado exitosamente",
        espacio=SpaceResponse.model_validate(space),
    )


@router.patch("/{space_id}/disponibilidad", description="Override space availability")
async def set_space_availability(
    space_id: int,
    user: StaffUserDependency,
    space_service: SpaceServiceDependency,
    data: SpaceAvailabilityUpdate,
) -> SpaceEnvelope:
    space = await space_service.set_availability(space_id, data.disponible)
    return SpaceEnvelope(
        mensaje="Disponibilidad actualizada exitosamente",
        espacio=SpaceResponse.model_validate(space),
    )


@router.delete("/{space_id}", description="Delete a space")
async def delete_space(
    space_id: int,
    user: AdminUserDependency,
    space_service: SpaceServiceDependency,
) -> MessageResponse:
    await space_service.delete_space(space_id)
    return MessageResponse(mensaje="Espacio eliminado exitosamente")
