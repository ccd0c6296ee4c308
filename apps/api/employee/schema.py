from datetime import time
from typing import List, Optional

from pydantic import Field, field_validator

from core.response.models import CustomBaseModel


class EmployeeCreate(CustomBaseModel):
    usuario_id: int = Field(..., gt=0)
    turno_id: Optional[int] = Field(None, gt=0)
    telefono: Optional[str] = Field(None, max_length=30)
    direccion: Optional[str] = Field(None, max_length=255)
    dpi: str = Field(..., min_length=1, max_length=20)

    @field_validator("dpi")
    def validate_dpi(cls, v):
        return v.strip()


class EmployeeUpdate(CustomBaseModel):
    turno_id: Optional[int] = Field(None, gt=0)
    telefono: Optional[str] = Field(None, max_length=30)
    direccion: Optional[str] = Field(None, max_length=255)
    dpi: Optional[str] = Field(None, min_length=1, max_length=20)

    @field_validator("dpi")
    def validate_dpi(cls, v):
        return v.strip() if v is not None else v


class EmployeeStatusUpdate(CustomBaseModel):
    activo: bool


class EmployeeResponse(CustomBaseModel):
    id: int
    usuario_id: int
    usuario_nombre: Optional[str] = None
    usuario_correo: Optional[str] = None
    usuario_activo: Optional[bool] = None
    rol_nombre: Optional[str] = None
    turno_id: Optional[int] = None
    turno_descripcion: Optional[str] = None
    hora_inicio: Optional[time] = None
    hora_fin: Optional[time] = None
    telefono: Optional[str] = None
    direccion: Optional[str] = None
    dpi: str


class EmployeeListResponse(CustomBaseModel):
    total: int
    empleados: List[EmployeeResponse]


class EmployeeEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    empleado: EmployeeResponse
