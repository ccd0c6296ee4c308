from sqlalchemy import func, select

from apps.api.payment.models import Payment


async def _payment_count(session_factory) -> int:
    async with session_factory() as session:
        return await session.scalar(select(func.count(Payment.id)))


async def test_overpayment_returns_change(client, seed, operator_headers, closed_ticket):
    ticket = await closed_ticket(minutes=125)

    response = await client.post(
        "/api/pagos",
        json={"ticket_id": ticket["id"], "tipo_pago_id": seed.cash_id, "monto": 35},
        headers=operator_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["mensaje"] == "Pago registrado exitosamente"
    assert body["monto_esperado"] == "30.00"
    assert body["cambio"] == "5.00"
    pago = body["pago"]
    assert pago["monto"] == "35.00"
    assert pago["ticket_id"] == ticket["id"]
    assert pago["tipo_pago_nombre"] == "Efectivo"
    assert pago["placa"] == "P123ABC"
    assert pago["cliente_nombre"] == "Juan Pérez"


async def test_exact_payment_has_no_change(client, seed, operator_headers, closed_ticket):
    ticket = await closed_ticket(minutes=60)

    response = await client.post(
        "/api/pagos",
        json={"ticket_id": ticket["id"], "tipo_pago_id": seed.card_id, "monto": "10.00"},
        headers=operator_headers,
    )

    body = response.json()
    assert body["monto_esperado"] == "10.00"
    assert body["cambio"] == "0.00"


async def test_underpayment_is_recorded(client, seed, operator_headers, closed_ticket):
    ticket = await closed_ticket(minutes=125)

    response = await client.post(
        "/api/pagos",
        json={"ticket_id": ticket["id"], "tipo_pago_id": seed.cash_id, "monto": 20},
        headers=operator_headers,
    )

    assert response.status_code == 201
    assert response.json()["cambio"] == "0.00"
    assert response.json()["pago"]["monto"] == "20.00"


async def test_expected_amount_uses_current_tariff_price(
    client, seed, operator_headers, admin_headers, closed_ticket
):
    ticket = await closed_ticket(minutes=125)
    update = await client.put(
        f"/api/tarifas/{seed.tariff_id}", json={"precio_hora": "12.50"}, headers=admin_headers
    )
    assert update.status_code == 200

    response = await client.post(
        "/api/pagos",
        json={"ticket_id": ticket["id"], "tipo_pago_id": seed.cash_id, "monto": 40},
        headers=operator_headers,
    )

    assert response.json()["monto_esperado"] == "37.50"
    assert response.json()["cambio"] == "2.50"


async def test_active_ticket_cannot_be_paid(
    client, seed, operator_headers, open_ticket, session_factory
):
    ticket = await open_ticket()

    response = await client.post(
        "/api/pagos",
        json={"ticket_id": ticket["id"], "tipo_pago_id": seed.cash_id, "monto": 10},
        headers=operator_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Ticket no cerrado"
    assert await _payment_count(session_factory) == 0


async def test_second_payment_is_a_conflict(
    client, seed, operator_headers, closed_ticket, session_factory
):
    ticket = await closed_ticket(minutes=30)
    payload = {"ticket_id": ticket["id"], "tipo_pago_id": seed.cash_id, "monto": 10}
    first = await client.post("/api/pagos", json=payload, headers=operator_headers)
    assert first.status_code == 201

    second = await client.post("/api/pagos", json=payload, headers=operator_headers)

    assert second.status_code == 409
    assert second.json()["error"] == "Pago ya registrado"
    assert second.json()["codigo"] == "PAYMENT_ALREADY_REGISTERED"
    assert await _payment_count(session_factory) == 1


async def test_payment_for_unknown_ticket(client, seed, operator_headers):
    response = await client.post(
        "/api/pagos",
        json={"ticket_id": 999, "tipo_pago_id": seed.cash_id, "monto": 10},
        headers=operator_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"] == "Ticket no encontrado"


async def test_payment_with_unknown_type(client, operator_headers, closed_ticket, session_factory):
    ticket = await closed_ticket(minutes=30)

    response = await client.post(
        "/api/pagos",
        json={"ticket_id": ticket["id"], "tipo_pago_id": 999, "monto": 10},
        headers=operator_headers,
    )

    assert response.status_code == 404
    assert response.json()["codigo"] == "PAYMENT_TYPE_NOT_FOUND"
    assert await _payment_count(session_factory) == 0


async def test_payment_amount_must_be_positive(client, seed, operator_headers, closed_ticket):
    ticket = await closed_ticket(minutes=30)

    response = await client.post(
        "/api/pagos",
        json={"ticket_id": ticket["id"], "tipo_pago_id": seed.cash_id, "monto": 0},
        headers=operator_headers,
    )

    assert response.status_code == 400
    assert response.json()["codigo"] == "VALIDATION_ERROR"


async def test_payment_listing_report_and_lookups(client, seed, operator_headers, closed_ticket):
    first = await closed_ticket(minutes=125)
    second = await closed_ticket(minutes=30, vehiculo_id=seed.other_vehicle_id, espacio_id=seed.other_space_id)
    paid_cash = await client.post(
        "/api/pagos",
        json={"ticket_id": first["id"], "tipo_pago_id": seed.cash_id, "monto": 30},
        headers=operator_headers,
    )
    await client.post(
        "/api/pagos",
        json={"ticket_id": second["id"], "tipo_pago_id": seed.card_id, "monto": 10},
        headers=operator_headers,
    )

    listing = (await client.get("/api/pagos", headers=operator_headers)).json()
    assert listing["total"] == 2
    assert listing["total_monto"] == "40.00"

    by_type = (
        await client.get("/api/pagos", params={"tipo_pago_id": seed.card_id}, headers=operator_headers)
    ).json()
    assert by_type["total"] == 1

    report = (await client.get("/api/pagos/reporte", headers=operator_headers)).json()
    assert report["resumen"]["total_pagos"] == 2
    assert report["resumen"]["total_recaudado"] == "40.00"
    assert report["resumen"]["promedio_pago"] == "20.00"
    assert report["resumen"]["pago_minimo"] == "10.00"
    assert report["resumen"]["pago_maximo"] == "30.00"
    assert {row["tipo_pago"]: row["total"] for row in report["por_tipo_pago"]} == {
        "Efectivo": "30.00",
        "Tarjeta": "10.00",
    }
    assert len(report["por_dia"]) == 1
    assert report["por_dia"][0]["cantidad"] == 2

    payment_id = paid_cash.json()["pago"]["id"]
    by_ticket = await client.get(f"/api/pagos/ticket/{first['id']}", headers=operator_headers)
    assert by_ticket.json()["pago"]["id"] == payment_id
    detail = await client.get(f"/api/pagos/{payment_id}", headers=operator_headers)
    assert detail.json()["pago"]["precio_hora"] == "10.00"


async def test_unknown_payment_lookups(client, operator_headers):
    assert (await client.get("/api/pagos/77", headers=operator_headers)).status_code == 404
    assert (await client.get("/api/pagos/ticket/77", headers=operator_headers)).status_code == 404


async def test_empty_report(client, operator_headers):
    report = (await client.get("/api/pagos/reporte", headers=operator_headers)).json()

    assert report["resumen"]["total_pagos"] == 0
    assert report["resumen"]["total_recaudado"] == "0.00"
    assert report["por_dia"] == []
