# apps/api/fine/service.py
import logging
from datetime import date
from typing import Annotated, List, Optional

from sqlalchemy import select

from apps.api.fine.models import Fine
from apps.api.fine.schema import FineCreate, FineUpdate
from apps.api.ticket.billing import to_money
from apps.api.ticket.models import Ticket
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.db.mixins import utcnow
from core.exceptions import NotFoundException
from core.utils.dates import day_bounds

logger = logging.getLogger(__name__)


class FineService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_fine(self, fine_id: int) -> Fine:
        fine = await self.session.get(Fine, fine_id)
        if not fine:
            raise NotFoundException(
                f"No existe una multa con el ID {fine_id}",
                error_code="FINE_NOT_FOUND",
                title="Multa no encontrada",
            )
        return fine

    async def list_fines(
        self,
        ticket_id: Optional[int] = None,
        fecha_inicio: Optional[date] = None,
        fecha_fin: Optional[date] = None,
    ) -> List[Fine]:
        query = select(Fine)
        if ticket_id is not None:
            query = query.where(Fine.ticket_id == ticket_id)
        if fecha_inicio:
            query = query.where(Fine.fecha >= day_bounds(fecha_inicio)[0])
        if fecha_fin:
            query = query.where(Fine.fecha < day_bounds(fecha_fin)[1])
        result = await self.session.execute(query.order_by(Fine.fecha.desc(), Fine.id.desc()))
        return list(result.scalars().all())

    async def create_fine(self, data: FineCreate) -> Fine:
        """Fines are billed apart from the ticket payment."""
        if not await self.session.get(Ticket, data.ticket_id):
            raise NotFoundException(
                f"No existe un ticket con el ID {data.ticket_id}",
                error_code="TICKET_NOT_FOUND",
                title="Ticket no encontrado",
            )
        fine = Fine(
            ticket_id=data.ticket_id,
            motivo=data.motivo,
            monto=to_money(data.monto),
            fecha=utcnow(),
        )
        self.session.add(fine)
        await self.session.commit()
        await self.session.refresh(fine)
        logger.info("Fine %s of %s issued on ticket %s", fine.id, fine.monto, fine.ticket_id)
        return fine

    async def update_fine(self, fine_id: int, data: FineUpdate) -> Fine:
        fine = await self.get_fine(fine_id)
        values = data.model_dump(exclude_unset=True)
        if values.get("motivo") is not None:
            fine.motivo = values["motivo"]
        if values.get("monto") is not None:
            fine.monto = to_money(values["monto"])
        await self.session.commit()
        await self.session.refresh(fine)
        return fine

    async def delete_fine(self, fine_id: int) -> None:
        fine = await self.get_fine(fine_id)
        await self.session.delete(fine)
        await self.session.commit()


FineServiceDependency = Annotated[FineService, FineService.get_dependency()]
