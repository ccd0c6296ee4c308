# apps/api/ticket/schema.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from core.response.models import CustomBaseModel


class TicketEntryRequest(CustomBaseModel):
    vehiculo_id: int = Field(..., gt=0)
    espacio_id: int = Field(..., gt=0)
    tarifa_id: int = Field(..., gt=0)


class TicketResponse(CustomBaseModel):
    id: int
    vehiculo_id: int
    espacio_id: int
    empleado_id: int
    tarifa_id: int
    hora_entrada: datetime
    hora_salida: Optional[datetime] = None
    estado: str

    placa: Optional[str] = None
    marca: Optional[str] = None
    modelo: Optional[str] = None
    color: Optional[str] = None
    cliente_nombre: Optional[str] = None
    espacio_codigo: Optional[str] = None
    zona_nombre: Optional[str] = None
    tarifa_descripcion: Optional[str] = None
    precio_hora: Optional[Decimal] = None
    empleado_nombre: Optional[str] = None


class ClosedTicketResponse(TicketResponse):
    minutos_totales: int
    horas_cobrar: int
    monto_total: Decimal


class ActiveTicketResponse(TicketResponse):
    minutos_transcurridos: int


class TicketDetailResponse(TicketResponse):
    minutos_totales: int


class TicketEntryResponse(CustomBaseModel):
    mensaje: str = "Entrada registrada exitosamente"
    ticket: TicketResponse


class TicketExitResponse(CustomBaseModel):
    mensaje: str = "Salida registrada exitosamente"
    ticket: ClosedTicketResponse


class TicketListResponse(CustomBaseModel):
    total: int
    tickets: List[TicketResponse]


class ActiveTicketListResponse(CustomBaseModel):
    total: int
    tickets: List[ActiveTicketResponse]


class VehicleTicketsResponse(CustomBaseModel):
    total: int
    placa: str
    tickets: List[TicketResponse]


class TicketEnvelope(CustomBaseModel):
    ticket: TicketDetailResponse
