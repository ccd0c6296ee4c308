from datetime import datetime
from typing import List, Optional

from pydantic import Field

from core.response.models import CustomBaseModel


class AccessRecordCreate(CustomBaseModel):
    accion: str = Field(..., min_length=1, max_length=100)


class AccessRecordResponse(CustomBaseModel):
    id: int
    usuario_id: int
    accion: str
    fecha: datetime
    usuario_nombre: Optional[str] = None
    usuario_correo: Optional[str] = None


class AccessRecordCreatedResponse(CustomBaseModel):
    mensaje: str
    registro: AccessRecordResponse


class AccessHistoryListResponse(CustomBaseModel):
    total: int
    historial: List[AccessRecordResponse]


class ActionCount(CustomBaseModel):
    accion: str
    cantidad: int


class AccessStatsResponse(CustomBaseModel):
    total_registros: int
    usuarios_distintos: int
    por_accion: List[ActionCount]
