from decimal import Decimal

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import IntegrityError

from apps.api.payment.models import Payment
from apps.api.ticket.models import Ticket, TicketStatus
from core.db.mixins import utcnow
from core.fastapi.handlers import register_exception_handlers


def _ticket(seed, vehiculo_id=None, espacio_id=None, closed=False) -> Ticket:
    return Ticket(
        vehiculo_id=vehiculo_id or seed.vehicle_id,
        espacio_id=espacio_id or seed.space_id,
        empleado_id=seed.operator_id,
        tarifa_id=seed.tariff_id,
        estado=TicketStatus.CLOSED.value if closed else TicketStatus.ACTIVE.value,
        hora_salida=utcnow() if closed else None,
    )


async def test_second_active_ticket_for_vehicle_is_rejected(session_factory, seed):
    async with session_factory() as session:
        session.add(_ticket(seed, espacio_id=seed.space_id))
        await session.commit()

        session.add(_ticket(seed, espacio_id=seed.other_space_id))
        with pytest.raises(IntegrityError):
            await session.commit()


async def test_second_active_ticket_for_space_is_rejected(session_factory, seed):
    async with session_factory() as session:
        session.add(_ticket(seed, vehiculo_id=seed.vehicle_id))
        await session.commit()

        session.add(_ticket(seed, vehiculo_id=seed.other_vehicle_id))
        with pytest.raises(IntegrityError):
            await session.commit()


async def test_closed_tickets_do_not_count_as_active(session_factory, seed):
    async with session_factory() as session:
        session.add_all([_ticket(seed, closed=True), _ticket(seed, closed=True), _ticket(seed)])
        await session.commit()


async def test_closed_ticket_requires_exit_time(session_factory, seed):
    async with session_factory() as session:
        ticket = _ticket(seed)
        ticket.estado = TicketStatus.CLOSED.value
        session.add(ticket)
        with pytest.raises(IntegrityError):
            await session.commit()


async def test_second_payment_for_ticket_is_rejected(session_factory, seed):
    async with session_factory() as session:
        ticket = _ticket(seed, closed=True)
        session.add(ticket)
        await session.flush()
        session.add(Payment(ticket_id=ticket.id, tipo_pago_id=seed.cash_id, monto=Decimal("10.00")))
        await session.commit()

        session.add(Payment(ticket_id=ticket.id, tipo_pago_id=seed.card_id, monto=Decimal("10.00")))
        with pytest.raises(IntegrityError):
            await session.commit()


async def test_integrity_error_becomes_conflict_response():
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/duplicado")
    async def duplicate():
        raise IntegrityError(
            "INSERT INTO pagos", {}, Exception("UNIQUE constraint failed: pagos.ticket_id")
        )

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        response = await http.post("/duplicado")

    assert response.status_code == 409
    assert response.json() == {
        "error": "Conflicto de integridad",
        "mensaje": "La operación viola una restricción de datos",
        "codigo": "INTEGRITY_ERROR",
    }
