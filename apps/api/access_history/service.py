# apps/api/access_history/service.py

from datetime import date
from typing import Annotated, List, Optional

from sqlalchemy import func, select

from apps.api.access_history.models import AccessHistory
from core.utils.dates import day_bounds
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import NotFoundException


class AccessHistoryService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def record(self, usuario_id: int, accion: str) -> AccessHistory:
        """Append an access event for a user."""
        entry = AccessHistory(usuario_id=usuario_id, accion=accion)
        self.session.add(entry)
        await self.session.commit()
        await self.session.refresh(entry)
        return entry

    async def get_record(self, record_id: int) -> AccessHistory:
        entry = await self.session.get(AccessHistory, record_id)
        if not entry:
            raise NotFoundException(
                f"No existe un registro con el ID {record_id}",
                error_code="ACCESS_RECORD_NOT_FOUND",
                title="Registro no encontrado",
            )
        return entry

    async def list_records(
        self,
        usuario_id: Optional[int] = None,
        accion: Optional[str] = None,
        fecha_inicio: Optional[date] = None,
        fecha_fin: Optional[date] = None,
        limit: int = 100,
    ) -> List[AccessHistory]:
        query = select(AccessHistory)
        if usuario_id is not None:
            query = query.where(AccessHistory.usuario_id == usuario_id)
        if accion:
            query = query.where(AccessHistory.accion == accion)
        if fecha_inicio:
            query = query.where(AccessHistory.fecha >= day_bounds(fecha_inicio)[0])
        if fecha_fin:
            query = query.where(AccessHistory.fecha < day_bounds(fecha_fin)[1])
        query = query.order_by(AccessHistory.fecha.desc(), AccessHistory.id.desc()).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_stats(self) -> dict:
        total = await self.session.scalar(select(func.count(AccessHistory.id)))
        users = await self.session.scalar(
            select(func.count(func.distinct(AccessHistory.usuario_id)))
        )
        rows = await self.session.execute(
            select(AccessHistory.accion, func.count(AccessHistory.id))
            .group_by(AccessHistory.accion)
            .order_by(func.count(AccessHistory.id).desc())
        )
        return {
            "total_registros": total or 0,
            "usuarios_distintos": users or 0,
            "por_accion": [{"accion": a, "cantidad": c} for a, c in rows],
        }


AccessHistoryServiceDependency = Annotated[
    AccessHistoryService, AccessHistoryService.get_dependency()
]
