# apps/api/payment/router.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import StaffUserDependency
from apps.api.payment.schema import (
    PaymentCreate,
    PaymentEnvelope,
    PaymentListResponse,
    PaymentRegisteredResponse,
    PaymentReportResponse,
    PaymentResponse,
)
from apps.api.payment.service import PaymentServiceDependency
from apps.api.ticket.billing import to_money

router = APIRouter(
    prefix="/pagos",
    tags=["Pagos"],
)


@router.post("", status_code=201, description="Register the payment of a closed ticket")
async def register_payment(
    user: StaffUserDependency,
    payment_service: PaymentServiceDependency,
    data: PaymentCreate,
) -> PaymentRegisteredResponse:
    payment, expected, change = await payment_service.register_payment(data)
    return PaymentRegisteredResponse(
        pago=PaymentResponse.model_validate(payment),
        monto_esperado=expected,
        cambio=change,
    )


@router.get("", description="List payments")
async def list_payments(
    user: StaffUserDependency,
    payment_service: PaymentServiceDependency,
    tipo_pago_id: Optional[int] = Query(None),
    fecha_inicio: Optional[date] = Query(None),
    fecha_fin: Optional[date] = Query(None),
) -> PaymentListResponse:
    payments = await payment_service.list_payments(
        tipo_pago_id=tipo_pago_id, fecha_inicio=fecha_inicio, fecha_fin=fecha_fin
    )
    return PaymentListResponse(
        total=len(payments),
        total_monto=to_money(sum((p.monto for p in payments), 0)),
        pagos=[PaymentResponse.model_validate(p) for p in payments],
    )


@router.get("/reporte", description="Payment statistics")
async def payment_report(
    user: StaffUserDependency,
    payment_service: PaymentServiceDependency,
    fecha_inicio: Optional[date] = Query(None),
    fecha_fin: Optional[date] = Query(None),
) -> PaymentReportResponse:
    return await payment_service.get_report(fecha_inicio=fecha_inicio, fecha_fin=fecha_fin)


@router.get("/ticket/{ticket_id}", description="Payment of a ticket")
async def get_payment_by_ticket(
    ticket_id: int,
    user: StaffUserDependency,
    payment_service: PaymentServiceDependency,
) -> PaymentEnvelope:
    payment = await payment_service.get_by_ticket(ticket_id)
    return PaymentEnvelope(pago=PaymentResponse.model_validate(payment))


@router.get("/{payment_id}", description="Get payment details")
async def get_payment(
    payment_id: int,
    user: StaffUserDependency,
    payment_service: PaymentServiceDependency,
) -> PaymentEnvelope:
    payment = await payment_service.get_payment(payment_id)
    return PaymentEnvelope(pago=PaymentResponse.model_validate(payment))
