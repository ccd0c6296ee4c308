# apps/api/vehicle/schema.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from apps.api.vehicle.models import normalize_plate
from core.response.models import CustomBaseModel


class VehicleCreate(CustomBaseModel):
    cliente_id: int = Field(..., gt=0)
    placa: str = Field(..., min_length=1, max_length=20)
    marca: Optional[str] = Field(None, max_length=50)
    modelo: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=30)

    @field_validator("placa")
    def validate_placa(cls, v):
        v = normalize_plate(v)
        if not v:
            raise ValueError("La placa debe contener letras o números")
        return v


class VehicleUpdate(CustomBaseModel):
    cliente_id: Optional[int] = Field(None, gt=0)
    marca: Optional[str] = Field(None, max_length=50)
    modelo: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=30)


class VehicleResponse(CustomBaseModel):
    id: int
    cliente_id: int
    cliente_nombre: Optional[str] = None
    placa: str = Field(..., description="Normalized plate, uppercase alphanumerics")
    marca: Optional[str] = None
    modelo: Optional[str] = None
    color: Optional[str] = None
    created_at: Optional[datetime] = None


class VehicleListResponse(CustomBaseModel):
    total: int
    vehiculos: List[VehicleResponse]


class VehicleEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    vehiculo: VehicleResponse
