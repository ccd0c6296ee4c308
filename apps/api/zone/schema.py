from typing import List, Optional

from pydantic import Field

from core.response.models import CustomBaseModel


class ZoneCreate(CustomBaseModel):
    nombre: str = Field(..., min_length=1, max_length=80)
    descripcion: Optional[str] = Field(None, max_length=255)


class ZoneUpdate(CustomBaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=80)
    descripcion: Optional[str] = Field(None, max_length=255)


class ZoneResponse(CustomBaseModel):
    id: int
    nombre: str
    descripcion: Optional[str] = None


class ZoneSummary(ZoneResponse):
    total_espacios: int = 0
    espacios_disponibles: int = 0


class ZoneListResponse(CustomBaseModel):
    total: int
    zonas: List[ZoneSummary]


class ZoneEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    zona: ZoneResponse
