# apps/api/employee/service.py

import logging
from typing import Annotated, List, Optional

from sqlalchemy import func, select

from apps.api.employee.models import Employee
from apps.api.employee.schema import EmployeeCreate, EmployeeUpdate
from apps.api.shift.models import Shift
from apps.api.ticket.models import Ticket
from apps.api.user.models import User
from apps.api.user.service import UserService
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import ConflictException, InvalidRequestException, NotFoundException

logger = logging.getLogger(__name__)


class EmployeeService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session
        self.users = UserService(session=session)

    async def get_employee(self, employee_id: int) -> Employee:
        employee = await self.session.get(Employee, employee_id)
        if not employee:
            raise NotFoundException(
                f"No existe un empleado con el ID {employee_id}",
                error_code="EMPLOYEE_NOT_FOUND",
                title="Empleado no encontrado",
            )
        return employee

    async def list_employees(self, turno_id: Optional[int] = None) -> List[Employee]:
        query = select(Employee).join(User, User.id == Employee.usuario_id)
        if turno_id is not None:
            query = query.where(Employee.turno_id == turno_id)
        result = await self.session.execute(query.order_by(User.nombre))
        return list(result.scalars().unique().all())

    async def _ensure_shift(self, turno_id: int) -> None:
        if not await self.session.get(Shift, turno_id):
            raise NotFoundException(
                f"No existe un turno con el ID {turno_id}",
                error_code="SHIFT_NOT_FOUND",
                title="Turno no encontrado",
            )

    async def _ensure_unique_dpi(self, dpi: str, exclude_id: Optional[int] = None) -> None:
        query = select(Employee.id).where(Employee.dpi == dpi)
        if exclude_id is not None:
            query = query.where(Employee.id != exclude_id)
        if await self.session.scalar(query):
            raise ConflictException(
                f"Ya existe un empleado con el DPI {dpi}",
                error_code="DPI_ALREADY_REGISTERED",
                title="DPI duplicado",
            )

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        """
        Attach a staff record to an existing user.

        Checks run in order: user exists, user has no record yet, DPI is
        unused, shift exists.
        """
        await self.users.get_user(data.usuario_id)
        existing = await self.session.scalar(
            select(Employee.id).where(Employee.usuario_id == data.usuario_id)
        )
        if existing:
            raise ConflictException(
                "Este usuario ya tiene un registro de empleado",
                error_code="USER_ALREADY_EMPLOYEE",
                title="Usuario ya es empleado",
            )
        await self._ensure_unique_dpi(data.dpi)
        if data.turno_id is not None:
            await self._ensure_shift(data.turno_id)

        employee = Employee(**data.model_dump())
        self.session.add(employee)
        await self.session.commit()
        await self.session.refresh(employee)
        logger.info("Created employee %s for user %s", employee.id, employee.usuario_id)
        return employee

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> Employee:
        employee = await self.get_employee(employee_id)
        values = data.model_dump(exclude_unset=True)
        if values.get("turno_id") is not None:
            await self._ensure_shift(values["turno_id"])
        if values.get("dpi") is not None:
            await self._ensure_unique_dpi(values["dpi"], exclude_id=employee_id)
        for field, value in values.items():
            if field == "dpi" and value is None:
                continue
            setattr(employee, field, value)
        await self.session.commit()
        await self.session.refresh(employee)
        return employee

    async def set_active(self, employee_id: int, activo: bool, acting_user: User) -> Employee:
        """Enable or disable the user account behind an employee."""
        employee = await self.get_employee(employee_id)
        await self.users.set_active(employee.usuario_id, activo, acting_user=acting_user)
        await self.session.refresh(employee)
        return employee

    async def delete_employee(self, employee_id: int) -> None:
        employee = await self.get_employee(employee_id)
        tickets = await self.session.scalar(
            select(func.count(Ticket.id)).where(Ticket.empleado_id == employee.usuario_id)
        )
        if tickets:
            raise InvalidRequestException(
                "El empleado tiene tickets asociados. "
                "Considere desactivar su usuario en lugar de eliminarlo.",
                error_code="EMPLOYEE_HAS_TICKETS",
                title="No se puede eliminar",
            )
        await self.session.delete(employee)
        await self.session.commit()
        logger.info("Deleted employee %s", employee_id)


EmployeeServiceDependency = Annotated[EmployeeService, EmployeeService.get_dependency()]
