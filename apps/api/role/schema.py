from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from core.response.models import CustomBaseModel


class RoleCreate(CustomBaseModel):
    nombre: str = Field(..., min_length=1, max_length=50)
    descripcion: Optional[str] = Field(None, max_length=255)

    @field_validator("nombre")
    def validate_nombre(cls, v):
        return v.strip().upper()


class RoleUpdate(CustomBaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=50)
    descripcion: Optional[str] = Field(None, max_length=255)

    @field_validator("nombre")
    def validate_nombre(cls, v):
        return v.strip().upper() if v is not None else v


class RoleResponse(CustomBaseModel):
    id: int
    nombre: str
    descripcion: Optional[str] = None


class RoleSummary(RoleResponse):
    total_usuarios: int = 0


class RoleMember(CustomBaseModel):
    id: int
    nombre: str
    correo: str
    activo: bool
    fecha_creacion: Optional[datetime] = None


class RoleDetail(RoleSummary):
    usuarios: List[RoleMember] = []


class RoleListResponse(CustomBaseModel):
    total: int
    roles: List[RoleSummary]


class RoleEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    rol: RoleResponse


class RoleDetailEnvelope(CustomBaseModel):
    rol: RoleDetail
