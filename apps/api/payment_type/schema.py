from typing import List, Optional

from pydantic import Field, field_validator

from core.response.models import CustomBaseModel


class PaymentTypeCreate(CustomBaseModel):
    nombre: str = Field(..., min_length=1, max_length=50)

    @field_validator("nombre")
    def validate_nombre(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("El nombre no puede estar vacío")
        return v


class PaymentTypeResponse(CustomBaseModel):
    id: int
    nombre: str


class PaymentTypeListResponse(CustomBaseModel):
    total: int
    tipos_pago: List[PaymentTypeResponse]


class PaymentTypeEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    tipo_pago: PaymentTypeResponse
