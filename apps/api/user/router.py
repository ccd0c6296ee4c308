# apps/api/user/router.py

from typing import Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import AdminUserDependency
from apps.api.user.schema import (
    UserListResponse,
    UserResponse,
    UserStatusResponse,
    UserStatusUpdate,
)
from apps.api.user.service import UserServiceDependency

router = APIRouter(tags=["Usuarios"])


@router.get("/usuarios", description="List users (Admin only)")
async def list_users(
    admin: AdminUserDependency,
    user_service: UserServiceDependency,
    activo: Optional[bool] = Query(None, description="Filter by active flag"),
) -> UserListResponse:
    users = await user_service.list_users(activo=activo)
    return UserListResponse(
        total=len(users),
        usuarios=[UserResponse.model_validate(u) for u in users],
    )


@router.patch("/usuarios/{user_id}/estado", description="Enable or disable a user (Admin only)")
async def change_user_status(
    user_id: int,
    admin: AdminUserDependency,
    user_service: UserServiceDependency,
    data: UserStatusUpdate,
) -> UserStatusResponse:
    user = await user_service.set_active(user_id, data.activo, acting_user=admin)
    return UserStatusResponse(
        mensaje="Usuario activado" if data.activo else "Usuario desactivado",
        usuario=UserResponse.model_validate(user),
    )
