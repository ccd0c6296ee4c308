from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from core.response.models import CustomBaseModel


class FineCreate(CustomBaseModel):
    ticket_id: int = Field(..., gt=0)
    motivo: str = Field(..., min_length=1, max_length=255)
    monto: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class FineUpdate(CustomBaseModel):
    motivo: Optional[str] = Field(None, min_length=1, max_length=255)
    monto: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)


class FineResponse(CustomBaseModel):
    id: int
    ticket_id: int
    motivo: str
    monto: Decimal
    fecha: datetime
    placa: Optional[str] = None
    cliente_nombre: Optional[str] = None
    ticket_estado: Optional[str] = None


class FineListResponse(CustomBaseModel):
    total: int
    total_monto: Decimal
    multas: List[FineResponse]


class FineEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    multa: FineResponse
