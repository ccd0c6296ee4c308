from datetime import time
from typing import List, Optional

from pydantic import Field

from core.response.models import CustomBaseModel


class ShiftCreate(CustomBaseModel):
    descripcion: Optional[str] = Field(None, max_length=120)
    hora_inicio: time = Field(..., examples=["08:00:00"])
    hora_fin: time = Field(..., examples=["16:00:00"])


class ShiftUpdate(CustomBaseModel):
    descripcion: Optional[str] = Field(None, max_length=120)
    hora_inicio: Optional[time] = None
    hora_fin: Optional[time] = None


class ShiftResponse(CustomBaseModel):
    id: int
    descripcion: Optional[str] = None
    hora_inicio: time
    hora_fin: time


class ShiftSummary(ShiftResponse):
    total_empleados: int = 0


class ShiftMember(CustomBaseModel):
    id: int
    dpi: str
    telefono: Optional[str] = None
    nombre: Optional[str] = Field(None, validation_alias="usuario_nombre")
    correo: Optional[str] = Field(None, validation_alias="usuario_correo")
    activo: Optional[bool] = Field(None, validation_alias="usuario_activo")


class ShiftDetail(ShiftSummary):
    empleados: List[ShiftMember] = []


class ShiftListResponse(CustomBaseModel):
    total: int
    turnos: List[ShiftSummary]


class ShiftEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    turno: ShiftResponse


class ShiftDetailEnvelope(CustomBaseModel):
    turno: ShiftDetail
