from typing import List, Optional

from pydantic import Field, field_validator

from core.response.models import CustomBaseModel


class SpaceCreate(CustomBaseModel):
    zona_id: int = Field(..., gt=0)
    codigo: str = Field(..., min_length=1, max_length=20)
    disponible: bool = True

    @field_validator("codigo")
    def validate_codigo(cls, v):
        return v.strip().upper()


class SpaceUpdate(CustomBaseModel):
    zona_id: Optional[int] = Field(None, gt=0)
    codigo: Optional[str] = Field(None, min_length=1, max_length=20)

    @field_validator("codigo")
    def validate_codigo(cls, v):
        return v.strip().upper() if v is not None else v


class SpaceAvailabilityUpdate(CustomBaseModel):
    disponible: bool


class SpaceResponse(CustomBaseModel):
    id: int
    zona_id: int
    zona_nombre: Optional[str] = None
    codigo: str
    disponible: bool


class SpaceListResponse(CustomBaseModel):
    total: int
    disponibles: int
    ocupados: int
    espacios: List[SpaceResponse]


class AvailableSpacesResponse(CustomBaseModel):
    total: int
    espacios: List[SpaceResponse]


class SpaceEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    espacio: SpaceResponse
