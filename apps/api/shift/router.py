# apps/api/shift/router.py

from fastapi import APIRouter

from apps.api.auth.dependency import AdminUserDependency, StaffUserDependency
from apps.api.shift.schema import (
    ShiftCreate,
    ShiftDetailEnvelope,
    ShiftEnvelope,
    ShiftListResponse,
    ShiftResponse,
    ShiftUpdate,
)
from apps.api.shift.service import ShiftServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/turnos",
    tags=["Turnos"],
)


@router.get("", description="List shifts ordered by start time")
async def list_shifts(
    user: StaffUserDependency,
    shift_service: ShiftServiceDependency,
) -> ShiftListResponse:
    shifts = await shift_service.list_shifts()
    return ShiftListResponse(total=len(shifts), turnos=shifts)


@router.get("/{shift_id}", description="Get a shift and its employees")
async def get_shift(
    shift_id: int,
    user: StaffUserDependency,
    shift_service: ShiftServiceDependency,
) -> ShiftDetailEnvelope:
    return ShiftDetailEnvelope(turno=await shift_service.get_shift_detail(shift_id))


@router.post("", status_code=201, description="Create a shift (Admin only)")
async def create_shift(
    admin: AdminUserDependency,
    shift_service: ShiftServiceDependency,
    data: ShiftCreate,
) -> ShiftEnvelope:
    shift = await shift_service.create_shift(data)
    return ShiftEnvelope(
        mensaje="Turno creado exitosamente",
        turno=ShiftResponse.model_validate(shift),
    )


@router.put("/{shift_id}", description="Update a shift (Admin only)")
async def update_shift(
    shift_id: int,
    admin: AdminUserDependency,
    shift_service: ShiftServiceDependency,
    data: ShiftUpdate,
) -> ShiftEnvelope:
    shift = await shift_service.update_shift(shift_id, data)
    return ShiftEnvelope(
        mensaje="Turno actualizado exitosamente",
        turno=ShiftResponse.model_validate(shift),
    )


@router.delete("/{shift_id}", description="Delete a shift (Admin only)")
async def delete_shift(
    shift_id: int,
    admin: AdminUserDependency,
    shift_service: ShiftServiceDependency,
) -> MessageResponse:
    await shift_service.delete_shift(shift_id)
    return MessageResponse(mensaje="Turno eliminado exitosamente")
