# apps/api/reservation/service.py

import logging
from datetime import date, datetime
from typing import Annotated, List, Optional

from sqlalchemy import select

from apps.api.client.models import Client
from apps.api.reservation.models import Reservation, ReservationStatus
from apps.api.reservation.schema import ReservationCreate, ReservationUpdate
from apps.api.space.models import Space
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import ConflictException, InvalidRequestException, NotFoundException
from core.utils.dates import day_bounds

logger = logging.getLogger(__name__)


class ReservationService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_reservation(self, reservation_id: int) -> Reservation:
        reservation = await self.session.get(Reservation, reservation_id)
        if not reservation:
            raise NotFoundException(
                f"No existe una reserva con el ID {reservation_id}",
                error_code="RESERVATION_NOT_FOUND",
                title="Reserva no encontrada",
            )
        return reservation

    async def list_reservations(
        self,
        estado: Optional[ReservationStatus] = None,
        cliente_id: Optional[int] = None,
        fecha_inicio: Optional[date] = None,
        fecha_fin: Optional[date] = None,
    ) -> List[Reservation]:
        """
        Reservations, most recently booked first.

        ``fecha_inicio`` bounds the start of the reserved window and
        ``fecha_fin`` its end, both as UTC calendar days.
        """
        query = select(Reservation)
        if estado is not None:
            query = query.where(Reservation.estado == estado.value)
        if cliente_id is not None:
            query = query.where(Reservation.cliente_id == cliente_id)
        if fecha_inicio:
            query = query.where(Reservation.fecha_inicio >= day_bounds(fecha_inicio)[0])
        if fecha_fin:
            query = query.where(Reservation.fecha_fin < day_bounds(fecha_fin)[1])
        query = query.order_by(Reservation.fecha_reserva.desc(), Reservation.id.desc())
        result = await self.session.execute(query)
        return list(result.scalars().unique().all())

    async def list_active(self) -> List[Reservation]:
        result = await self.session.execute(
            select(Reservation)
            .where(Reservation.estado == ReservationStatus.ACTIVE.value)
            .order_by(Reservation.fecha_inicio)
        )
        return list(result.scalars().unique().all())

    async def _lock_space(self, space_id: int) -> Space:
        # serializes bookings of the same space
        space = await self.session.scalar(
            select(Space).where(Space.id == space_id).with_for_update(of=Space)
        )
        if not space:
            raise NotFoundException(
                f"No existe un espacio con el ID {space_id}",
                error_code="SPACE_NOT_FOUND",
                title="Espacio no encontrado",
            )
        return space

    async def _ensure_no_overlap(
        self,
        espacio_id: int,
        fecha_inicio: datetime,
        fecha_fin: datetime,
        exclude_id: Optional[int] = None,
    ) -> None:
        # windows that share an endpoint also conflict
        query = select(Reservation.id).where(
            Reservation.espacio_id == espacio_id,
            Reservation.estado == ReservationStatus.ACTIVE.value,
            Reservation.fecha_inicio <= fecha_fin,
            Reservation.fecha_fin >= fecha_inicio,
        )
        if exclude_id is not None:
            query = query.where(Reservation.id != exclude_id)
        conflict = await self.session.scalar(query)
        if conflict:
            raise ConflictException(
                "El espacio ya tiene una reserva en las fechas solicitadas",
                error_code="RESERVATION_CONFLICT",
                title="Espacio no disponible",
            )

    async def create_reservation(self, data: ReservationCreate) -> Reservation:
        """
        Book a space for a client.

        Checks run in order: client exists, space exists, no other active
        reservation of the space overlaps the requested window.
        """
        if not await self.session.get(Client, data.cliente_id):
            raise NotFoundException(
                f"No existe un cliente con el ID {data.cliente_id}",
                error_code="CLIENT_NOT_FOUND",
                title="Cliente no encontrado",
            )
        await self._lock_space(data.espacio_id)
        await self._ensure_no_overlap(data.espacio_id, data.fecha_inicio, data.fecha_fin)

        reservation = Reservation(
            cliente_id=data.cliente_id,
            espacio_id=data.espacio_id,
            fecha_inicio=data.fecha_inicio,
            fecha_fin=data.fecha_fin,
            estado=ReservationStatus.ACTIVE.value,
        )
        self.session.add(reservation)
        await self.session.commit()
        await self.session.refresh(reservation)
        logger.info(
            "Reservation %s: space %s for client %s",
            reservation.id,
            reservation.espacio_id,
            reservation.cliente_id,
        )
        return reservation

    def _ensure_active(self, reservation: Reservation, action: str) -> None:
        if not reservation.is_active:
            raise InvalidRequestException(
                f"Solo se pueden {action} reservas activas",
                error_code="RESERVATION_NOT_ACTIVE",
                title="Reserva no modificable",
            )

    async def update_reservation(
        self, reservation_id: int, data: ReservationUpdate
    ) -> Reservation:
        reservation = await self.get_reservation(reservation_id)
        self._ensure_active(reservation, "modificar")

        values = data.model_dump(exclude_unset=True)
        fecha_inicio = values.get("fecha_inicio") or reservation.fecha_inicio
        fecha_fin = values.get("fecha_fin") or reservation.fecha_fin
        if fecha_fin <= fecha_inicio:
            raise InvalidRequestException(
                "La fecha de fin debe ser posterior a la fecha de inicio",
                error_code="INVALID_DATE_RANGE",
                title="Fechas inválidas",
            )
        if (fecha_inicio, fecha_fin) != (reservation.fecha_inicio, reservation.fecha_fin):
            await self._lock_space(reservation.espacio_id)
            await self._ensure_no_overlap(
                reservation.espacio_id, fecha_inicio, fecha_fin, exclude_id=reservation_id
            )

        reservation.fecha_inicio = fecha_inicio
        reservation.fecha_fin = fecha_fin
        if values.get("estado") is not None:
            reservation.estado = values["estado"].value
        await self.session.commit()
        await self.session.refresh(reservation)
        return reservation

    async def _close(self, reservation_id: int, estado: ReservationStatus, action: str):
        reservation = await self.get_reservation(reservation_id)
        self._ensure_active(reservation, action)
        reservation.estado = estado.value
        await self.session.commit()
        await self.session.refresh(reservation)
        logger.info("Reservation %s -> %s", reservation_id, estado.value)
        return reservation

    async def cancel_reservation(self, reservation_id: int) -> Reservation:
        return await self._close(reservation_id, ReservationStatus.CANCELLED, "cancelar")

    async def finish_reservation(self, reservation_id: int) -> Reservation:
        return await self._close(reservation_id, ReservationStatus.FINISHED, "finalizar")


ReservationServiceDependency = Annotated[
    ReservationService, ReservationService.get_dependency()
]
