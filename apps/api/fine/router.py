# apps/api/fine/router.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import StaffUserDependency
from apps.api.fine.models import Fine
from apps.api.fine.schema import (
    FineCreate,
    FineEnvelope,
    FineListResponse,
    FineResponse,
    FineUpdate,
)
from apps.api.fine.service import FineServiceDependency
from apps.api.ticket.billing import to_money
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/multas",
    tags=["Multas"],
)


def _fine_list(fines: List[Fine]) -> FineListResponse:
    return FineListResponse(
        total=len(fines),
        total_monto=to_money(sum((f.monto for f in fines), 0)),
        multas=[FineResponse.model_validate(f) for f in fines],
    )


@router.get("", description="List fines")
async def list_fines(
    user: StaffUserDependency,
    fine_service: FineServiceDependency,
    ticket_id: Optional[int] = Query(None),
    fecha_inicio: Optional[date] = Query(None),
    fecha_fin: Optional[date] = Query(None),
) -> FineListResponse:
    fines = await fine_service.list_fines(
        ticket_id=ticket_id, fecha_inicio=fecha_inicio, fecha_fin=fecha_fin
    )
    return _fine_list(fines)


@router.get("/ticket/{ticket_id}", description="Fines of a ticket")
async def list_fines_by_ticket(
    ticket_id: int,
    user: StaffUserDependency,
    fine_service: FineServiceDependency,
) -> FineListResponse:
    return _fine_list(await fine_service.list_fines(ticket_id=ticket_id))


@router.get("/{fine_id}", description="Get fine details")
async def get_fine(
    fine_id: int,
    user: StaffUserDependency,
    fine_service: FineServiceDependency,
) -> FineEnvelope:
    fine = await fine_service.get_fine(fine_id)
    return FineEnvelope(multa=FineResponse.model_validate(fine))


@router.post("", status_code=201, description="Issue a fine")
async def create_fine(
    user: StaffUserDependency,
    fine_service: FineServiceDependency,
    data: FineCreate,
) -> FineEnvelope:
    fine = await fine_service.create_fine(data)
    return FineEnvelope(
        mensaje="Multa registrada exitosamente", multa=FineResponse.model_validate(fine)
    )


@router.put("/{fine_id}", description="Update a fine")
async def update_fine(
    fine_id: int,
    user: StaffUserDependency,
    fine_service: FineServiceDependency,
    data: FineUpdate,
) -> FineEnvelope:
    fine = await fine_service.update_fine(fine_id, data)
    return FineEnvelope(
        mensaje="Multa actualizada exitosamente", multa=FineResponse.model_validate(fine)
    )


@router.delete("/{fine_id}", description="Delete a fine")
async def delete_fine(
    fine_id: int,
    user: StaffUserDependency,
    fine_service: FineServiceDependency,
) -> MessageResponse:
    await fine_service.delete_fine(fine_id)
    return MessageResponse(mensaje="Multa eliminada exitosamente")
