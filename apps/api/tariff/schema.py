from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from core.response.models import CustomBaseModel


class TariffCreate(CustomBaseModel):
    descripcion: str = Field(..., min_length=1, max_length=120)
    precio_hora: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class TariffUpdate(CustomBaseModel):
    descripcion: Optional[str] = Field(None, min_length=1, max_length=120)
    precio_hora: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)


class TariffResponse(CustomBaseModel):
    id: int
    descripcion: str
    precio_hora: Decimal


class TariffListResponse(CustomBaseModel):
    total: int
    tarifas: List[TariffResponse]


class TariffEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    tarifa: TariffResponse
