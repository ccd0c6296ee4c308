from datetime import datetime
from typing import List, Optional

from pydantic import AwareDatetime, Field, model_validator

from apps.api.reservation.models import ReservationStatus
from core.response.models import CustomBaseModel


class ReservationCreate(CustomBaseModel):
    cliente_id: int = Field(..., gt=0)
    espacio_id: int = Field(..., gt=0)
    fecha_inicio: AwareDatetime = Field(..., examples=["2026-10-20T08:00:00-06:00"])
    fecha_fin: AwareDatetime = Field(..., examples=["2026-10-20T12:00:00-06:00"])

    @model_validator(mode="after")
    def validate_range(self):
        if self.fecha_fin <= self.fecha_inicio:
            raise ValueError("La fecha de fin debe ser posterior a la fecha de inicio")
        return self


class ReservationUpdate(CustomBaseModel):
    fecha_inicio: Optional[AwareDatetime] = None
    fecha_fin: Optional[AwareDatetime] = None
    estado: Optional[ReservationStatus] = None


class ReservationResponse(CustomBaseModel):
    id: int
    cliente_id: int
    cliente_nombre: Optional[str] = None
    cliente_telefono: Optional[str] = None
    espacio_id: int
    espacio_codigo: Optional[str] = None
    zona_nombre: Optional[str] = None
    fecha_reserva: datetime
    fecha_inicio: datetime
    fecha_fin: datetime
    estado: str


class ReservationListResponse(CustomBaseModel):
    total: int
    activas: int
    finalizadas: int
    canceladas: int
    reservas: List[ReservationResponse]


class ActiveReservationListResponse(CustomBaseModel):
    total: int
    reservas: List[ReservationResponse]


class ClientReservationsResponse(CustomBaseModel):
    total: int
    cliente_id: int
    reservas: List[ReservationResponse]


class ReservationEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    reserva: ReservationResponse
