# apps/api/space/service.py
import logging
from typing import Annotated, List, Optional

from sqlalchemy import func, select

from apps.api.reservation.models import Reservation
from apps.api.space.models import Space
from apps.api.space.schema import SpaceCreate, SpaceUpdate
from apps.api.ticket.models import Ticket, TicketStatus
from apps.api.zone.models import Zone
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import ConflictException, InvalidRequestException, NotFoundException

logger = logging.getLogger(__name__)


class SpaceService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_space(self, space_id: int) -> Space:
        space = await self.session.get(Space, space_id)
        if not space:
            raise NotFoundException(
                f"No existe un espacio con el ID {space_id}",
                error_code="SPACE_NOT_FOUND",
                title="Espacio no encontrado",
            )
        return space

    async def list_spaces(
        self, zona_id: Optional[int] = None, disponible: Optional[bool] = None
    ) -> List[Space]:
        query = select(Space)
        if zona_id is not None:
            query = query.where(Space.zona_id == zona_id)
        if disponible is not None:
            query = query.where(Space.disponible == disponible)
        result = await self.session.execute(query.order_by(Space.codigo))
        return list(result.scalars().unique().all())

    async def _ensure_zone(self, zona_id: int) -> None:
        if not await self.session.get(Zone, zona_id):
            raise NotFoundException(
                f"No existe una zona con el ID {zona_id}",
                error_code="ZONE_NOT_FOUND",
                title="Zona no encontrada",
            )

    async def _ensure_unique_code(self, codigo: str, exclude_id: Optional[int] = None):
        query = select(Space.id).where(Space.codigo == codigo)
        if exclude_id is not None:
            query = query.where(Space.id != exclude_id)
        if await self.session.scalar(query):
            raise ConflictException(
                f"Ya existe un espacio con el código {codigo}",
                error_code="SPACE_CODE_EXISTS",
                title="Código duplicado",
            )

    async def create_space(self, data: SpaceCreate) -> Space:
        await self._ensure_zone(data.zona_id)
        await self._ensure_unique_code(data.codigo)
        space = Space(**data.model_dump())
        self.session.add(space)
        await self.session.commit()
        await self.session.refresh(space)
        return space

    async def update_space(self, space_id: int, data: SpaceUpdate) -> Space:
        space = await self.get_space(space_id)
        values = data.model_dump(exclude_unset=True)
        if values.get("zona_id") is not None:
            await self._ensure_zone(values["zona_id"])
        if values.get("codigo") is not None:
            await self._ensure_unique_code(values["codigo"], exclude_id=space_id)
        for field, value in values.items():
            if value is not None:
                setattr(space, field, value)
        await self.session.commit()
        await self.session.refresh(space)
        return space

    async def set_availability(self, space_id: int, disponible: bool) -> Space:
        """
        Manually override the availability flag.

        A space held by an active ticket cannot be released by hand; the exit
        operation releases it.
        """
        space = await self.session.scalar(
            select(Space).where(Space.id == space_id).with_for_update(of=Space)
        )
        if not space:
            raise NotFoundException(
                f"No existe un espacio con el ID {space_id}",
                error_code="SPACE_NOT_FOUND",
                title="Espacio no encontrado",
            )
        if disponible:
            active = await self.session.scalar(
                select(Ticket.id).where(
                    Ticket.espacio_id == space_id,
                    Ticket.estado == TicketStatus.ACTIVE.value,
                )
            )
            if active:
                raise ConflictException(
                    f"El espacio está ocupado por el ticket activo {active}",
                    error_code="SPACE_HAS_ACTIVE_TICKET",
                    title="Espacio ocupado",
                )
        space.disponible = disponible
        await self.session.commit()
        await self.session.refresh(space)
        logger.info("Space %s availability set to %s", space_id, disponible)
        return space

    async def delete_space(self, space_id: int) -> None:
        space = await self.get_space(space_id)
        tickets = await self.session.scalar(
            select(func.count(Ticket.id)).where(Ticket.espacio_id == space_id)
        )
        if tickets:
            raise InvalidRequestException(
                f"El espacio tiene {tickets} ticket(s) registrado(s)",
                error_code="SPACE_HAS_TICKETS",
                title="No se puede eliminar",
            )
        reservations = await self.session.scalar(
            select(func.count(Reservation.id)).where(Reservation.espacio_id == space_id)
        )
        if reservations:
            raise InvalidRequestException(
                f"El espacio tiene {reservations} reserva(s) registrada(s)",
                error_code="SPACE_HAS_RESERVATIONS",
                title="No se puede eliminar",
            )
        await self.session.delete(space)
        await self.session.commit()


SpaceServiceDependency = Annotated[SpaceService, SpaceService.get_dependency()]
