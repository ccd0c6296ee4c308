from datetime import datetime
from typing import List, Optional

from pydantic import Field

from core.response.models import CustomBaseModel


class UserResponse(CustomBaseModel):
    id: int
    nombre: str
    correo: str
    activo: bool
    rol: Optional[str] = Field(None, validation_alias="rol_nombre")
    fecha_creacion: Optional[datetime] = None


class UserListResponse(CustomBaseModel):
    total: int
    usuarios: List[UserResponse]


class UserStatusUpdate(CustomBaseModel):
    activo: bool


class UserStatusResponse(CustomBaseModel):
    mensaje: str
    usuario: UserResponse
