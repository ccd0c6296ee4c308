# apps/api/payment/schema.py
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from core.response.models import CustomBaseModel


class PaymentCreate(CustomBaseModel):
    ticket_id: int = Field(..., gt=0)
    tipo_pago_id: int = Field(..., gt=0)
    monto: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class PaymentResponse(CustomBaseModel):
    id: int
    ticket_id: int
    tipo_pago_id: int
    monto: Decimal
    fecha_pago: datetime

    tipo_pago_nombre: Optional[str] = None
    placa: Optional[str] = None
    marca: Optional[str] = None
    modelo: Optional[str] = None
    cliente_nombre: Optional[str] = None
    hora_entrada: Optional[datetime] = None
    hora_salida: Optional[datetime] = None
    tarifa_descripcion: Optional[str] = None
    precio_hora: Optional[Decimal] = None


class PaymentRegisteredResponse(CustomBaseModel):
    mensaje: str = "Pago registrado exitosamente"
    pago: PaymentResponse
    monto_esperado: Decimal
    cambio: Decimal


class PaymentEnvelope(CustomBaseModel):
    pago: PaymentResponse


class PaymentListResponse(CustomBaseModel):
    total: int
    total_monto: Decimal
    pagos: List[PaymentResponse]


class PaymentSummary(CustomBaseModel):
    total_pagos: int
    total_recaudado: Decimal
    promedio_pago: Decimal
    pago_minimo: Optional[Decimal] = None
    pago_maximo: Optional[Decimal] = None


class PaymentTypeTotal(CustomBaseModel):
    tipo_pago: Optional[str] = None
    cantidad: int
    total: Decimal


class DailyTotal(CustomBaseModel):
    fecha: date
    cantidad: int
    total: Decimal


class PaymentReportResponse(CustomBaseModel):
    resumen: PaymentSummary
    por_tipo_pago: List[PaymentTypeTotal]
    por_dia: List[DailyTotal]
