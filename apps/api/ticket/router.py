# apps/api/ticket/router.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import StaffUserDependency, UserDependency
from apps.api.ticket.models import TicketStatus
from apps.api.ticket.schema import (
    ActiveTicketListResponse,
    ActiveTicketResponse,
    ClosedTicketResponse,
    TicketDetailResponse,
    TicketEntryRequest,
    TicketEntryResponse,
    TicketEnvelope,
    TicketExitResponse,
    TicketListResponse,
    TicketResponse,
    VehicleTicketsResponse,
)
from apps.api.ticket.service import TicketService, TicketServiceDependency
from core.db.mixins import utcnow

router = APIRouter(
    prefix="/tickets",
    tags=["Tickets"],
)


@router.post("/entrada", status_code=201, description="Register a vehicle entry")
async def register_entry(
    user: StaffUserDependency,
    ticket_service: TicketServiceDependency,
    data: TicketEntryRequest,
) -> TicketEntryResponse:
    ticket = await ticket_service.register_entry(data, empleado_id=user.id)
    return TicketEntryResponse(ticket=TicketResponse.model_validate(ticket))


@router.put("/{ticket_id}/salida", description="Register a vehicle exit")
async def register_exit(
    ticket_id: int,
    user: StaffUserDependency,
    ticket_service: TicketServiceDependency,
) -> TicketExitResponse:
    ticket, charge = await ticket_service.register_exit(ticket_id)
    return TicketExitResponse(
        ticket=ClosedTicketResponse(
            **TicketResponse.model_validate(ticket).model_dump(),
            minutos_totales=charge.minutos_totales,
            horas_cobrar=charge.horas_cobrar,
            monto_total=charge.monto_total,
        )
    )


@router.get("", description="List tickets, newest first")
async def list_tickets(
    user: StaffUserDependency,
    ticket_service: TicketServiceDependency,
    estado: Optional[TicketStatus] = Query(None),
    fecha_inicio: Optional[date] = Query(None),
    fecha_fin: Optional[date] = Query(None),
) -> TicketListResponse:
    tickets = await ticket_service.list_tickets(
        estado=estado, fecha_inicio=fecha_inicio, fecha_fin=fecha_fin
    )
    return TicketListResponse(
        total=len(tickets),
        tickets=[TicketResponse.model_validate(t) for t in tickets],
    )


@router.get("/activos", description="List tickets of vehicles currently parked")
async def list_active_tickets(
    user: StaffUserDependency,
    ticket_service: TicketServiceDependency,
) -> ActiveTicketListResponse:
    tickets = await ticket_service.list_active()
    now = utcnow()
    return ActiveTicketListResponse(
        total=len(tickets),
        tickets=[
            ActiveTicketResponse(
                **TicketResponse.model_validate(t).model_dump(),
                minutos_transcurridos=TicketService.minutes_so_far(t, now),
            )
            for t in tickets
        ],
    )


@router.get("/vehiculo/{placa}", description="Ticket history of a plate")
async def list_tickets_by_plate(
    placa: str,
    user: StaffUserDependency,
    ticket_service: TicketServiceDependency,
) -> VehicleTicketsResponse:
    placa, tickets = await ticket_service.list_by_plate(placa)
    return VehicleTicketsResponse(
        total=len(tickets),
        placa=placa,
        tickets=[TicketResponse.model_validate(t) for t in tickets],
    )


@router.get("/{ticket_id}", description="Get ticket details")
async def get_ticket(
    ticket_id: int,
    user: UserDependency,
    ticket_service: TicketServiceDependency,
) -> TicketEnvelope:
    ticket = await ticket_service.get_ticket(ticket_id)
    return TicketEnvelope(
        ticket=TicketDetailResponse(
            **TicketResponse.model_validate(ticket).model_dump(),
            minutos_totales=TicketService.minutes_so_far(ticket),
        )
    )
