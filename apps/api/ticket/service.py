# apps/api/ticket/service.py
import logging
from datetime import date, datetime
from typing import Annotated, List, Optional

from sqlalchemy import select

from apps.api.space.models import Space
from apps.api.tariff.models import Tariff
from apps.api.ticket.billing import Charge, compute_charge, elapsed_minutes
from apps.api.ticket.models import Ticket, TicketStatus
from apps.api.ticket.schema import TicketEntryRequest
from apps.api.vehicle.models import Vehicle, normalize_plate
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.db.mixins import utcnow
from core.exceptions import ConflictException, NotFoundException
from core.utils.dates import day_bounds

logger = logging.getLogger(__name__)


class TicketService(AbstractService):
    """
    Opens and closes parking tickets.

    Every precondition of an operation is read before the first write and
    the whole operation is committed once, so a rejected request leaves the
    tickets and spaces untouched.
    """

    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_ticket(self, ticket_id: int, lock: bool = False) -> Ticket:
        query = select(Ticket).where(Ticket.id == ticket_id)
        if lock:
            query = query.with_for_update(of=Ticket)
        ticket = await self.session.scalar(query)
        if not ticket:
            raise NotFoundException(
                f"No existe un ticket con el ID {ticket_id}",
                error_code="TICKET_NOT_FOUND",
                title="Ticket no encontrado",
            )
        return ticket

    async def _lock_space(self, space_id: int) -> Optional[Space]:
        return await self.session.scalar(
            select(Space).where(Space.id == space_id).with_for_update(of=Space)
        )

    async def register_entry(self, data: TicketEntryRequest, empleado_id: int) -> Ticket:
        """
        Open a ticket for a vehicle entering a free space.

        Raises:
            NotFoundException: vehicle, space or tariff missing
            ConflictException: space occupied or vehicle already inside (400)
        """
        vehicle = await self.session.get(Vehicle, data.vehiculo_id)
        if not vehicle:
            raise NotFoundException(
                f"No existe un vehículo con el ID {data.vehiculo_id}",
                error_code="VEHICLE_NOT_FOUND",
                title="Vehículo no encontrado",
            )

        space = await self._lock_space(data.espacio_id)
        if not space:
            raise NotFoundException(
                f"No existe un espacio con el ID {data.espacio_id}",
                error_code="SPACE_NOT_FOUND",
                title="Espacio no encontrado",
            )
        if not space.disponible:
            logger.info("Entry rejected: space %s is occupied", space.id)
            raise ConflictException(
                "El espacio seleccionado está ocupado",
                error_code="SPACE_UNAVAILABLE",
                title="Espacio no disponible",
                status_code=400,
            )

        active_ticket = await self.session.scalar(
            select(Ticket.id).where(
                Ticket.vehiculo_id == vehicle.id,
                Ticket.estado == TicketStatus.ACTIVE.value,
            )
        )
        if active_ticket:
            logger.info(
                "Entry rejected: vehicle %s already has active ticket %s",
                vehicle.id,
                active_ticket,
            )
            raise ConflictException(
                "Este vehículo ya tiene un ticket activo",
                error_code="ACTIVE_TICKET_EXISTS",
                title="Ticket activo existente",
                status_code=400,
            )

        if not await self.session.get(Tariff, data.tarifa_id):
            raise NotFoundException(
                f"No existe una tarifa con el ID {data.tarifa_id}",
                error_code="TARIFF_NOT_FOUND",
                title="Tarifa no encontrada",
            )

        ticket = Ticket(
            vehiculo_id=vehicle.id,
            espacio_id=space.id,
            empleado_id=empleado_id,
            tarifa_id=data.tarifa_id,
            hora_entrada=utcnow(),
            estado=TicketStatus.ACTIVE.value,
        )
        self.session.add(ticket)
        space.disponible = False
        await self.session.commit()
        await self.session.refresh(ticket)

        logger.info(
            "Ticket %s opened for vehicle %s in space %s",
            ticket.id,
            ticket.vehiculo_id,
            ticket.espacio_id,
        )
        return ticket

    async def register_exit(self, ticket_id: int) -> tuple[Ticket, Charge]:
        """Close an active ticket, release its space and compute the charge."""
        ticket = await self.get_ticket(ticket_id, lock=True)
        if not ticket.is_active:
            logger.info("Exit rejected: ticket %s is already closed", ticket_id)
            raise ConflictException(
                "Este ticket ya fue cerrado anteriormente",
                error_code="TICKET_ALREADY_CLOSED",
                title="Ticket ya cerrado",
                status_code=400,
            )

        space = await self._lock_space(ticket.espacio_id)
        ticket.hora_salida = utcnow()
        ticket.estado = TicketStatus.CLOSED.value
        if space:
            space.disponible = True
        await self.session.commit()
        await self.session.refresh(ticket)

        charge = self.charge_for(ticket)
        logger.info(
            "Ticket %s closed after %s minutes, amount %s",
            ticket.id,
            charge.minutos_totales,
            charge.monto_total,
        )
        return ticket, charge

    @staticmethod
    def charge_for(ticket: Ticket) -> Charge:
        """Charge of a closed ticket at its tariff's current price."""
        return compute_charge(ticket.hora_entrada, ticket.hora_salida, ticket.precio_hora)

    @staticmethod
    def minutes_so_far(ticket: Ticket, now: Optional[datetime] = None) -> int:
        end = ticket.hora_salida or now or utcnow()
        return elapsed_minutes(ticket.hora_entrada, end)

    async def list_tickets(
        self,
        estado: Optional[TicketStatus] = None,
        fecha_inicio: Optional[date] = None,
        fecha_fin: Optional[date] = None,
    ) -> List[Ticket]:
        query = select(Ticket)
        if estado:
            query = query.where(Ticket.estado == estado.value)
        if fecha_inicio:
            query = query.where(Ticket.hora_entrada >= day_bounds(fecha_inicio)[0])
        if fecha_fin:
            query = query.where(Ticket.hora_entrada < day_bounds(fecha_fin)[1])
        query = query.order_by(Ticket.hora_entrada.desc(), Ticket.id.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_active(self) -> List[Ticket]:
        return await self.list_tickets(estado=TicketStatus.ACTIVE)

    async def list_by_plate(self, placa: str) -> tuple[str, List[Ticket]]:
        placa = normalize_plate(placa)
        query = (
            select(Ticket)
            .where(Ticket.vehiculo_id.in_(select(Vehicle.id).where(Vehicle.placa == placa)))
            .order_by(Ticket.hora_entrada.desc(), Ticket.id.desc())
        )
        result = await self.session.execute(query)
        return placa, list(result.scalars().all())


TicketServiceDependency = Annotated[TicketService, TicketService.get_dependency()]
