# apps/api/shift/service.py

from typing import Annotated, List

from sqlalchemy import func, select

from apps.api.employee.models import Employee
from apps.api.shift.models import Shift
from apps.api.shift.schema import ShiftCreate, ShiftDetail, ShiftMember, ShiftSummary, ShiftUpdate
from apps.api.user.models import User
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import InvalidRequestException, NotFoundException


class ShiftService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_shift(self, shift_id: int) -> Shift:
        shift = await self.session.get(Shift, shift_id)
        if not shift:
            raise NotFoundException(
                f"No existe un turno con el ID {shift_id}",
                error_code="SHIFT_NOT_FOUND",
                title="Turno no encontrado",
            )
        return shift

    async def list_shifts(self) -> List[ShiftSummary]:
        query = (
            select(Shift, func.count(Employee.id))
            .outerjoin(Employee, Employee.turno_id == Shift.id)
            .group_by(Shift.id)
            .order_by(Shift.hora_inicio)
        )
        result = await self.session.execute(query)
        return [
            ShiftSummary(
                id=shift.id,
                descripcion=shift.descripcion,
                hora_inicio=shift.hora_inicio,
                hora_fin=shift.hora_fin,
                total_empleados=total,
            )
            for shift, total in result.all()
        ]

    async def get_shift_detail(self, shift_id: int) -> ShiftDetail:
        shift = await self.get_shift(shift_id)
        result = await self.session.execute(
            select(Employee)
            .join(User, User.id == Employee.usuario_id)
            .where(Employee.turno_id == shift_id)
            .order_by(User.nombre)
        )
        employees = list(result.scalars().unique().all())
        return ShiftDetail(
            id=shift.id,
            descripcion=shift.descripcion,
            hora_inicio=shift.hora_inicio,
            hora_fin=shift.hora_fin,
            total_empleados=len(employees),
            empleados=[ShiftMember.model_validate(e) for e in employees],
        )

    async def create_shift(self, data: ShiftCreate) -> Shift:
        shift = Shift(**data.model_dump())
        self.session.add(shift)
        await self.session.commit()
        await self.session.refresh(shift)
        return shift

    async def update_shift(self, shift_id: int, data: ShiftUpdate) -> Shift:
        shift = await self.get_shift(shift_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if field in ("hora_inicio", "hora_fin") and value is None:
                continue
            setattr(shift, field, value)
        await self.session.commit()
        await self.session.refresh(shift)
        return shift

    async def delete_shift(self, shift_id: int) -> None:
        shift = await self.get_shift(shift_id)
        employees = await self.session.scalar(
            select(func.count(Employee.id)).where(Employee.turno_id == shift_id)
        )
        if employees:
            raise InvalidRequestException(
                f"El turno tiene {employees} empleado(s) asignado(s). "
                "Reasigne los empleados antes de eliminar el turno.",
                error_code="SHIFT_HAS_EMPLOYEES",
                title="No se puede eliminar",
            )
        await self.session.delete(shift)
        await self.session.commit()


ShiftServiceDependency = Annotated[ShiftService, ShiftService.get_dependency()]
