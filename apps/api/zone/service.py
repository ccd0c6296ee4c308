# apps/api/zone/service.py

from typing import Annotated, List

from sqlalchemy import Integer, cast, func, select

from apps.api.space.models import Space
from apps.api.zone.models import Zone
from apps.api.zone.schema import ZoneCreate, ZoneSummary, ZoneUpdate
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import InvalidRequestException, NotFoundException


class ZoneService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_zone(self, zone_id: int) -> Zone:
        zone = await self.session.get(Zone, zone_id)
        if not zone:
            raise NotFoundException(
                f"No existe una zona con el ID {zone_id}",
                error_code="ZONE_NOT_FOUND",
                title="Zona no encontrada",
            )
        return zone

    async def list_zones(self) -> List[ZoneSummary]:
        """Zones with the number of spaces they hold and how many are free."""
        query = (
            select(
                Zone,
                func.count(Space.id).label("total_espacios"),
                func.coalesce(func.sum(cast(Space.disponible, Integer)), 0).label(
                    "espacios_disponibles"
                ),
            )
            .outerjoin(Space, Space.zona_id == Zone.id)
            .group_by(Zone.id)
            .order_by(Zone.nombre)
        )
        result = await self.session.execute(query)
        return [
            ZoneSummary(
                id=zone.id,
                nombre=zone.nombre,
                descripcion=zone.descripcion,
                total_espacios=total,
                espacios_disponibles=available,
            )
            for zone, total, available in result.all()
        ]

    async def create_zone(self, data: ZoneCreate) -> Zone:
        zone = Zone(**data.model_dump())
        self.session.add(zone)
        await self.session.commit()
        await self.session.refresh(zone)
        return zone

    async def update_zone(self, zone_id: int, data: ZoneUpdate) -> Zone:
        zone = await self.get_zone(zone_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(zone, field, value)
        await self.session.commit()
        await self.session.refresh(zone)
        return zone

    async def delete_zone(self, zone_id: int) -> None:
        zone = await self.get_zone(zone_id)
        spaces = await self.session.scalar(
            select(func.count(Space.id)).where(Space.zona_id == zone_id)
        )
        if spaces:
            raise InvalidRequestException(
                f"La zona tiene {spaces} espacio(s) asignado(s)",
                error_code="ZONE_HAS_SPACES",
                title="No se puede eliminar",
            )
        await self.session.delete(zone)
        await self.session.commit()


ZoneServiceDependency = Annotated[ZoneService, ZoneService.get_dependency()]
