# apps/api/role/router.py

from fastapi import APIRouter

from apps.api.auth.dependency import AdminUserDependency, UserDependency
from apps.api.role.schema import (
    RoleCreate,
    RoleDetailEnvelope,
    RoleEnvelope,
    RoleListResponse,
    RoleResponse,
    RoleUpdate,
)
from apps.api.role.service import RoleServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/roles",
    tags=["Roles"],
)


@router.get("", description="List roles with the number of users holding each")
async def list_roles(
    user: UserDependency,
    role_service: RoleServiceDependency,
) -> RoleListResponse:
    roles = await role_service.list_roles()
    return RoleListResponse(total=len(roles), roles=roles)


@router.get("/{role_id}", description="Get a role and its users (Admin only)")
async def get_role(
    role_id: int,
    admin: AdminUserDependency,
    role_service: RoleServiceDependency,
) -> RoleDetailEnvelope:
    return RoleDetailEnvelope(rol=await role_service.get_role_detail(role_id))


@router.post("", status_code=201, description="Create a role (Admin only)")
async def create_role(
    admin: AdminUserDependency,
    role_service: RoleServiceDependency,
    data: RoleCreate,
) -> RoleEnvelope:
    role = await role_service.create_role(data)
    return RoleEnvelope(
        mensaje="Rol creado exitosamente",
        rol=RoleResponse.model_validate(role),
    )


@router.put("/{role_id}", description="Update a role (Admin only)")
async def update_role(
    role_id: int,
    admin: AdminUserDependency,
    role_service: RoleServiceDependency,
    data: RoleUpdate,
) -> RoleEnvelope:
    role = await role_service.update_role(role_id, data)
    return RoleEnvelope(
        mensaje="Rol actualizado exitosamente",
        rol=RoleResponse.model_validate(role),
    )


@router.delete("/{role_id}", description="Delete a role (Admin only)")
async def delete_role(
    role_id: int,
    admin: AdminUserDependency,
    role_service: RoleServiceDependency,
) -> MessageResponse:
    await role_service.delete_role(role_id)
    return MessageResponse(mensaje="Rol eliminado exitosamente")
