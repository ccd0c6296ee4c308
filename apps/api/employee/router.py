# apps/api/employee/router.py

from typing import Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import AdminUserDependency, StaffUserDependency
from apps.api.employee.schema import (
    EmployeeCreate,
    EmployeeEnvelope,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeStatusUpdate,
    EmployeeUpdate,
)
from apps.api.employee.service import EmployeeServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/empleados",
    tags=["Empleados"],
)


@router.get("", description="List employees")
async def list_employees(
    user: StaffUserDependency,
    employee_service: EmployeeServiceDependency,
    turno_id: Optional[int] = Query(None, description="Filter by shift"),
) -> EmployeeListResponse:
    employees = await employee_service.list_employees(turno_id=turno_id)
    return EmployeeListResponse(
        total=len(employees),
        empleados=[EmployeeResponse.model_validate(e) for e in employees],
    )


@router.get("/{employee_id}", description="Get employee details")
async def get_employee(
    employee_id: int,
    user: StaffUserDependency,
    employee_service: EmployeeServiceDependency,
) -> EmployeeEnvelope:
    employee = await employee_service.get_employee(employee_id)
    return EmployeeEnvelope(empleado=EmployeeResponse.model_validate(employee))


@router.post("", status_code=201, description="Create an employee record (Admin only)")
async def create_employee(
    admin: AdminUserDependency,
    employee_service: EmployeeServiceDependency,
    data: EmployeeCreate,
) -> EmployeeEnvelope:
    employee = await employee_service.create_employee(data)
    return EmployeeEnvelope(
        mensaje="Empleado creado exitosamente",
        empleado=EmployeeResponse.model_validate(employee),
    )


@router.put("/{employee_id}", description="Update an employee (Admin only)")
async def update_employee(
    employee_id: int,
    admin: AdminUserDependency,
    employee_service: EmployeeServiceDependency,
    data: EmployeeUpdate,
) -> EmployeeEnvelope:
    employee = await employee_service.update_employee(employee_id, data)
    return EmployeeEnvelope(
        mensaje="Empleado actualizado exitosamente",
        empleado=EmployeeResponse.model_validate(employee),
    )


@router.patch("/{employee_id}/estado", description="Enable or disable an employee's user (Admin only)")
async def change_employee_status(
    employee_id: int,
    admin: AdminUserDependency,
    employee_service: EmployeeServiceDependency,
    data: EmployeeStatusUpdate,
) -> EmployeeEnvelope:
    employee = await employee_service.set_active(employee_id, data.activo, acting_user=admin)
    return EmployeeEnvelope(
        mensaje="Empleado activado exitosamente" if data.activo else "Empleado desactivado exitosamente",
        empleado=EmployeeResponse.model_validate(employee),
    )


@router.delete("/{employee_id}", description="Delete an employee (Admin only)")
async def delete_employee(
    employee_id: int,
    admin: AdminUserDependency,
    employee_service: EmployeeServiceDependency,
) -> MessageResponse:
    await employee_service.delete_employee(employee_id)
    return MessageResponse(mensaje="Empleado eliminado exitosamente")
