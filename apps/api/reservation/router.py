# apps/api/reservation/router.py

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import StaffUserDependency, UserDependency
from apps.api.reservation.models import ReservationStatus
from apps.api.reservation.schema import (
    ActiveReservationListResponse,
    ClientReservationsResponse,
    ReservationCreate,
    ReservationEnvelope,
    ReservationListResponse,
    ReservationResponse,
    ReservationUpdate,
)
from apps.api.reservation.service import ReservationServiceDependency

router = APIRouter(
    prefix="/reservas",
    tags=["Reservas"],
)


@router.get("", description="List reservations with per state counts")
async def list_reservations(
    user: UserDependency,
    reservation_service: ReservationServiceDependency,
    estado: Optional[ReservationStatus] = Query(None),
    cliente_id: Optional[int] = Query(None),
    fecha_inicio: Optional[date] = Query(None, description="Window starts on or after (YYYY-MM-DD)"),
    fecha_fin: Optional[date] = Query(None, description="Window ends on or before (YYYY-MM-DD)"),
) -> ReservationListResponse:
    reservations = await reservation_service.list_reservations(
        estado=estado,
        cliente_id=cliente_id,
        fecha_inicio=fecha_inicio,
        fecha_fin=fecha_fin,
    )
    states = [r.estado for r in reservations]
    return ReservationListResponse(
        total=len(reservations),
        activas=states.count(ReservationStatus.ACTIVE.value),
        finalizadas=states.count(ReservationStatus.FINISHED.value),
        canceladas=states.count(ReservationStatus.CANCELLED.value),
        reservas=[ReservationResponse.model_validate(r) for r in reservations],
    )


@router.get("/activas", description="Active reservations, soonest first")
async def list_active_reservations(
    user: UserDependency,
    reservation_service: ReservationServiceDependency,
) -> ActiveReservationListResponse:
    reservations = await reservation_service.list_active()
    return ActiveReservationListResponse(
        total=len(reservations),
        reservas=[ReservationResponse.model_validate(r) for r in reservations],
    )


@router.get("/cliente/{cliente_id}", description="Reservations of a client")
async def list_client_reservations(
    cliente_id: int,
    user: UserDependency,
    reservation_service: ReservationServiceDependency,
) -> ClientReservationsResponse:
    reservations = await reservation_service.list_reservations(cliente_id=cliente_id)
    return ClientReservationsResponse(
        total=len(reservations),
        cliente_id=cliente_id,
        reservas=[ReservationResponse.model_validate(r) for r in reservations],
    )


@router.get("/{reservation_id}", description="Get reservation details")
async def get_reservation(
    reservation_id: int,
    user: UserDependency,
    reservation_service: ReservationServiceDependency,
) -> ReservationEnvelope:
    reservation = await reservation_service.get_reservation(reservation_id)
    return ReservationEnvelope(reserva=ReservationResponse.model_validate(reservation))


@router.post("", status_code=201, description="Book a space")
async def create_reservation(
    user: UserDependency,
    reservation_service: ReservationServiceDependency,
    data: ReservationCreate,
) -> ReservationEnvelope:
    reservation = await reservation_service.create_reservation(data)
    return ReservationEnvelope(
        mensaje="Reserva creada exitosamente",
        reserva=ReservationResponse.model_validate(reservation),
    )


@router.put("/{reservation_id}", description="Change an active reservation")
async def update_reservation(
    reservation_id: int,
    user: StaffUserDependency,
    reservation_service: ReservationServiceDependency,
    data: ReservationUpdate,
) -> ReservationEnvelope:
    reservation = await reservation_service.update_reservation(reservation_id, data)
    return ReservationEnvelope(
        mensaje="Reserva actualizada exitosamente",
        reserva=ReservationResponse.model_validate(reservation),
    )


@router.patch("/{reservation_id}/cancelar", description="Cancel an active reservation")
async def cancel_reservation(
    reservation_id: int,
    user: StaffUserDependency,
    reservation_service: ReservationServiceDependency,
) -> ReservationEnvelope:
    reservation = await reservation_service.cancel_reservation(reservation_id)
    return ReservationEnvelope(
        mensaje="Reserva cancelada exitosamente",
        reserva=ReservationResponse.model_validate(reservation),
    )


@router.patch("/{reservation_id}/finalizar", description="Finish an active reservation")
async def finish_reservation(
    reservation_id: int,
    user: StaffUserDependency,
    reservation_service: ReservationServiceDependency,
) -> ReservationEnvelope:
    reservation = await reservation_service.finish_reservation(reservation_id)
    return ReservationEnvelope(
        mensaje="Reserva finalizada exitosamente",
        reserva=ReservationResponse.model_validate(reservation),
    )
