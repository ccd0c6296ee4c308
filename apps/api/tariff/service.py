# apps/api/tariff/service.py

from typing import Annotated, List

from sqlalchemy import func, select

from apps.api.tariff.models import Tariff
from apps.api.tariff.schema import TariffCreate, TariffUpdate
from apps.api.ticket.models import Ticket
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import InvalidRequestException, NotFoundException


class TariffService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_tariff(self, tariff_id: int) -> Tariff:
        tariff = await self.session.get(Tariff, tariff_id)
        if not tariff:
            raise NotFoundException(
                f"No existe una tarifa con el ID {tariff_id}",
                error_code="TARIFF_NOT_FOUND",
                title="Tarifa no encontrada",
            )
        return tariff

    async def list_tariffs(self) -> List[Tariff]:
        result = await self.session.execute(select(Tariff).order_by(Tariff.precio_hora))
        return list(result.scalars().all())

    async def create_tariff(self, data: TariffCreate) -> Tariff:
        tariff = Tariff(**data.model_dump())
        self.session.add(tariff)
        await self.session.commit()
        await self.session.refresh(tariff)
        return tariff

    async def update_tariff(self, tariff_id: int, data: TariffUpdate) -> Tariff:
        # price changes apply to tickets billed afterwards, closed ones included
        tariff = await self.get_tariff(tariff_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(tariff, field, value)
        await self.session.commit()
        await self.session.refresh(tariff)
        return tariff

    async def delete_tariff(self, tariff_id: int) -> None:
        tariff = await self.get_tariff(tariff_id)
        tickets = await self.session.scalar(
            select(func.count(Ticket.id)).where(Ticket.tarifa_id == tariff_id)
        )
        if tickets:
            raise InvalidRequestException(
                f"La tarifa está asignada a {tickets} ticket(s)",
                error_code="TARIFF_IN_USE",
                title="No se puede eliminar",
            )
        await self.session.delete(tariff)
        await self.session.commit()


TariffServiceDependency = Annotated[TariffService, TariffService.get_dependency()]
