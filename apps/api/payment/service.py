# apps/api/payment/service.py
import logging
from collections import OrderedDict
from datetime import date, timezone
from decimal import Decimal
from typing import Annotated, List, Optional

from sqlalchemy import Numeric, cast, func, select

from apps.api.payment.models import Payment
from apps.api.payment.schema import (
    DailyTotal,
    PaymentCreate,
    PaymentReportResponse,
    PaymentSummary,
    PaymentTypeTotal,
)
from apps.api.payment_type.models import PaymentType
from apps.api.ticket.billing import change_due, to_money
from apps.api.ticket.models import Ticket, TicketStatus
from apps.api.ticket.service import TicketService
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.db.mixins import utcnow
from core.exceptions import ConflictException, NotFoundException
from core.utils.dates import day_bounds

logger = logging.getLogger(__name__)

REPORT_DAYS = 30


class PaymentService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def register_payment(
        self, data: PaymentCreate
    ) -> tuple[Payment, Decimal, Decimal]:
        """
        Record the payment of a closed ticket.

        The expected amount is recomputed from the ticket's elapsed time and
        the current price of its tariff; the tendered amount is stored as
        given. Returns the payment, the expected amount and the change.
        """
        ticket = await self.session.scalar(
            select(Ticket).where(Ticket.id == data.ticket_id).with_for_update(of=Ticket)
        )
        if not ticket:
            raise NotFoundException(
                f"No existe un ticket con el ID {data.ticket_id}",
                error_code="TICKET_NOT_FOUND",
                title="Ticket no encontrado",
            )
        if ticket.estado != TicketStatus.CLOSED.value:
            logger.info("Payment rejected: ticket %s is still active", ticket.id)
            raise ConflictException(
                "El ticket debe estar cerrado antes de procesar el pago",
                error_code="TICKET_NOT_CLOSED",
                title="Ticket no cerrado",
                status_code=400,
            )

        existing = await self.session.scalar(
            select(Payment.id).where(Payment.ticket_id == ticket.id)
        )
        if existing:
            logger.info("Payment rejected: ticket %s already paid (%s)", ticket.id, existing)
            raise ConflictException(
                "Este ticket ya tiene un pago registrado",
                error_code="PAYMENT_ALREADY_REGISTERED",
                title="Pago ya registrado",
            )

        expected = TicketService.charge_for(ticket).monto_total

        if not await self.session.get(PaymentType, data.tipo_pago_id):
            raise NotFoundException(
                f"No existe un tipo de pago con el ID {data.tipo_pago_id}",
                error_code="PAYMENT_TYPE_NOT_FOUND",
                title="Tipo de pago no encontrado",
            )

        payment = Payment(
            ticket_id=ticket.id,
            tipo_pago_id=data.tipo_pago_id,
            monto=to_money(data.monto),
            fecha_pago=utcnow(),
        )
        self.session.add(payment)
        await self.session.commit()
        await self.session.refresh(payment)

        if payment.monto < expected:
            logger.warning(
                "Payment %s for ticket %s is short: %s tendered, %s expected",
                payment.id,
                ticket.id,
                payment.monto,
                expected,
            )
        logger.info("Payment %s registered for ticket %s", payment.id, ticket.id)
        return payment, expected, change_due(payment.monto, expected)

    async def get_payment(self, payment_id: int) -> Payment:
        payment = await self.session.get(Payment, payment_id)
        if not payment:
            raise NotFoundException(
                f"No existe un pago con el ID {payment_id}",
                error_code="PAYMENT_NOT_FOUND",
                title="Pago no encontrado",
            )
        return payment

    async def get_by_ticket(self, ticket_id: int) -> Payment:
        payment = await self.session.scalar(
            select(Payment).where(Payment.ticket_id == ticket_id)
        )
        if not payment:
            raise NotFoundException(
                f"No existe un pago para el ticket {ticket_id}",
                error_code="PAYMENT_NOT_FOUND",
                title="Pago no encontrado",
            )
        return payment

    def _date_filters(self, fecha_inicio: Optional[date], fecha_fin: Optional[date]):
        filters = []
        if fecha_inicio:
            filters.append(Payment.fecha_pago >= day_bounds(fecha_inicio)[0])
        if fecha_fin:
            filters.append(Payment.fecha_pago < day_bounds(fecha_fin)[1])
        return filters

    async def list_payments(
        self,
        tipo_pago_id: Optional[int] = None,
        fecha_inicio: Optional[date] = None,
        fecha_fin: Optional[date] = None,
    ) -> List[Payment]:
        query = select(Payment).where(*self._date_filters(fecha_inicio, fecha_fin))
        if tipo_pago_id is not None:
            query = query.where(Payment.tipo_pago_id == tipo_pago_id)
        query = query.order_by(Payment.fecha_pago.desc(), Payment.id.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_report(
        self, fecha_inicio: Optional[date] = None, fecha_fin: Optional[date] = None
    ) -> PaymentReportResponse:
        filters = self._date_filters(fecha_inicio, fecha_fin)

        totals = (
            await self.session.execute(
                select(
                    func.count(Payment.id),
                    func.sum(Payment.monto),
                    cast(func.avg(Payment.monto), Numeric(12, 4)),
                    func.min(Payment.monto),
                    func.max(Payment.monto),
                ).where(*filters)
            )
        ).one()
        count, total, average, minimum, maximum = totals
        summary = PaymentSummary(
            total_pagos=count or 0,
            total_recaudado=to_money(total or 0),
            promedio_pago=to_money(average or 0),
            pago_minimo=to_money(minimum) if minimum is not None else None,
            pago_maximo=to_money(maximum) if maximum is not None else None,
        )

        by_type = await self.session.execute(
            select(
                PaymentType.nombre,
                func.count(Payment.id),
                func.sum(Payment.monto).label("total"),
            )
            .select_from(Payment)
            .outerjoin(PaymentType, Payment.tipo_pago_id == PaymentType.id)
            .where(*filters)
            .group_by(PaymentType.id, PaymentType.nombre)
            .order_by(func.sum(Payment.monto).desc())
        )
        per_type = [
            PaymentTypeTotal(tipo_pago=name, cantidad=qty, total=to_money(amount or 0))
            for name, qty, amount in by_type.all()
        ]

        # grouped here on the UTC calendar day so the result does not depend
        # on the database session time zone
        rows = await self.session.execute(
            select(Payment.fecha_pago, Payment.monto)
            .where(*filters)
            .order_by(Payment.fecha_pago.desc())
        )
        days: "OrderedDict[date, list]" = OrderedDict()
        for paid_at, amount in rows.all():
            day = paid_at.astimezone(timezone.utc).date()
            bucket = days.setdefault(day, [0, Decimal("0")])
            bucket[0] += 1
            bucket[1] += Decimal(amount)
        per_day = [
            DailyTotal(fecha=day, cantidad=qty, total=to_money(amount))
            for day, (qty, amount) in list(days.items())[:REPORT_DAYS]
        ]

        return PaymentReportResponse(resumen=summary, por_tipo_pago=per_type, por_dia=per_day)


PaymentServiceDependency = Annotated[PaymentService, PaymentService.get_dependency()]
