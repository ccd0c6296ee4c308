async def test_client_crud(client, operator_headers):
    created = await client.post(
        "/api/clientes",
        json={"nombre": "María López", "telefono": "5555-0000", "correo": "maria@correo.com"},
        headers=operator_headers,
    )
    assert created.status_code == 201
    client_id = created.json()["cliente"]["id"]

    updated = await client.put(
        f"/api/clientes/{client_id}", json={"nit": "1234567-8"}, headers=operator_headers
    )
    assert updated.json()["cliente"]["nit"] == "1234567-8"
    assert updated.json()["cliente"]["nombre"] == "María López"

    search = await client.get("/api/clientes", params={"buscar": "maría"}, headers=operator_headers)
    assert search.json()["total"] == 1

    deleted = await client.delete(f"/api/clientes/{client_id}", headers=operator_headers)
    assert deleted.status_code == 200
    missing = await client.get(f"/api/clientes/{client_id}", headers=operator_headers)
    assert missing.status_code == 404


async def test_client_with_vehicles_cannot_be_deleted(client, seed, operator_headers):
    response = await client.delete(f"/api/clientes/{seed.client_id}", headers=operator_headers)

    assert response.status_code == 400
    assert response.json()["codigo"] == "CLIENT_HAS_VEHICLES"


async def test_vehicle_plate_is_normalized_and_unique(client, seed, operator_headers):
    created = await client.post(
        "/api/vehiculos",
        json={"cliente_id": seed.client_id, "placa": "m-789 xyz", "marca": "Mazda"},
        headers=operator_headers,
    )
    assert created.status_code == 201
    assert created.json()["vehiculo"]["placa"] == "M789XYZ"
    assert created.json()["vehiculo"]["cliente_nombre"] == "Juan Pérez"

    duplicate = await client.post(
        "/api/vehiculos",
        json={"cliente_id": seed.client_id, "placa": "M789XYZ"},
        headers=operator_headers,
    )
    assert duplicate.status_code == 409

    found = await client.get("/api/vehiculos/placa/m789xyz", headers=operator_headers)
    assert found.json()["vehiculo"]["id"] == created.json()["vehiculo"]["id"]


async def test_vehicle_requires_existing_client(client, operator_headers):
    response = await client.post(
        "/api/vehiculos", json={"cliente_id": 999, "placa": "ABC123"}, headers=operator_headers
    )

    assert response.status_code == 404
    assert response.json()["codigo"] == "CLIENT_NOT_FOUND"


async def test_vehicle_with_tickets_cannot_be_deleted(client, seed, operator_headers, closed_ticket):
    await closed_ticket(minutes=10)

    response = await client.delete(f"/api/vehiculos/{seed.vehicle_id}", headers=operator_headers)

    assert response.status_code == 400
    assert response.json()["codigo"] == "VEHICLE_HAS_TICKETS"


async def test_zone_listing_counts_spaces(client, seed, admin_headers, open_ticket):
    await open_ticket()

    response = await client.get("/api/zonas", headers=admin_headers)

    zona = response.json()["zonas"][0]
    assert zona["nombre"] == "Zona A"
    assert zona["total_espacios"] == 2
    assert zona["espacios_disponibles"] == 1


async def test_zone_writes_are_admin_only(client, operator_headers, admin_headers):
    denied = await client.post("/api/zonas", json={"nombre": "Zona B"}, headers=operator_headers)
    assert denied.status_code == 403

    created = await client.post("/api/zonas", json={"nombre": "Zona B"}, headers=admin_headers)
    assert created.status_code == 201
    zone_id = created.json()["zona"]["id"]
    assert (await client.delete(f"/api/zonas/{zone_id}", headers=admin_headers)).status_code == 200


async def test_zone_with_spaces_cannot_be_deleted(client, seed, admin_headers):
    response = await client.delete(f"/api/zonas/{seed.zone_id}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["codigo"] == "ZONE_HAS_SPACES"


async def test_space_codes_are_unique(client, seed, admin_headers):
    created = await client.post(
        "/api/espacios", json={"zona_id": seed.zone_id, "codigo": "b-01"}, headers=admin_headers
    )
    assert created.status_code == 201
    assert created.json()["espacio"]["codigo"] == "B-01"
    assert created.json()["espacio"]["disponible"] is True

    duplicate = await client.post(
        "/api/espacios", json={"zona_id": seed.zone_id, "codigo": "A-01"}, headers=admin_headers
    )
    assert duplicate.status_code == 409


async def test_space_listing_and_available_spaces(client, seed, operator_headers, open_ticket):
    await open_ticket()

    listing = (await client.get("/api/espacios", headers=operator_headers)).json()
    assert (listing["total"], listing["disponibles"], listing["ocupados"]) == (2, 1, 1)

    available = await client.get(
        "/api/espacios/disponibles", params={"zona_id": seed.zone_id}, headers=operator_headers
    )
    assert [s["codigo"] for s in available.json()["espacios"]] == ["A-02"]


async def test_occupied_space_cannot_be_freed_by_hand(client, seed, operator_headers, open_ticket):
    await open_ticket()

    response = await client.patch(
        f"/api/espacios/{seed.space_id}/disponibilidad",
        json={"disponible": True},
        headers=operator_headers,
    )

    assert response.status_code == 409
    assert response.json()["codigo"] == "SPACE_HAS_ACTIVE_TICKET"


async def test_manual_availability_override(client, seed, operator_headers):
    blocked = await client.patch(
        f"/api/espacios/{seed.other_space_id}/disponibilidad",
        json={"disponible": False},
        headers=operator_headers,
    )
    assert blocked.json()["espacio"]["disponible"] is False

    entry = await client.post(
        "/api/tickets/entrada",
        json={
            "vehiculo_id": seed.vehicle_id,
            "espacio_id": seed.other_space_id,
            "tarifa_id": seed.tariff_id,
        },
        headers=operator_headers,
    )
    assert entry.status_code == 400


async def test_tariff_price_must_be_positive(client, admin_headers):
    response = await client.post(
        "/api/tarifas", json={"descripcion": "Gratis", "precio_hora": 0}, headers=admin_headers
    )

    assert response.status_code == 400


async def test_tariff_crud(client, admin_headers, operator_headers):
    created = await client.post(
        "/api/tarifas",
        json={"descripcion": "Nocturna", "precio_hora": "7.5"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    assert created.json()["tarifa"]["precio_hora"] == "7.50"

    listing = await client.get("/api/tarifas", headers=operator_headers)
    assert listing.json()["total"] == 2


async def test_tariff_in_use_cannot_be_deleted(client, seed, admin_headers, open_ticket):
    await open_ticket()

    response = await client.delete(f"/api/tarifas/{seed.tariff_id}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["codigo"] == "TARIFF_IN_USE"


async def test_payment_type_names_are_unique(client, admin_headers):
    duplicate = await client.post(
        "/api/tipospago", json={"nombre": "efectivo"}, headers=admin_headers
    )
    assert duplicate.status_code == 409

    created = await client.post(
        "/api/tipospago", json={"nombre": "Cheque"}, headers=admin_headers
    )
    assert created.status_code == 201
    assert created.json()["tipo_pago"]["nombre"] == "Cheque"


async def test_fines_are_listed_with_total(client, operator_headers, closed_ticket):
    ticket = await closed_ticket(minutes=20)
    for motivo, monto in [("Estacionó en doble fila", "50"), ("Ticket extraviado", "25.50")]:
        created = await client.post(
            "/api/multas",
            json={"ticket_id": ticket["id"], "motivo": motivo, "monto": monto},
            headers=operator_headers,
        )
        assert created.status_code == 201

    response = await client.get(f"/api/multas/ticket/{ticket['id']}", headers=operator_headers)

    body = response.json()
    assert body["total"] == 2
    assert body["total_monto"] == "75.50"
    assert body["multas"][0]["placa"] == "P123ABC"


async def test_fine_validation_and_lifecycle(client, operator_headers, closed_ticket):
    missing_ticket = await client.post(
        "/api/multas",
        json={"ticket_id": 999, "motivo": "Daños", "monto": "10"},
        headers=operator_headers,
    )
    assert missing_ticket.status_code == 404

    ticket = await closed_ticket(minutes=20)
    negative = await client.post(
        "/api/multas",
        json={"ticket_id": ticket["id"], "motivo": "Daños", "monto": "-1"},
        headers=operator_headers,
    )
    assert negative.status_code == 400

    created = await client.post(
        "/api/multas",
        json={"ticket_id": ticket["id"], "motivo": "Daños", "monto": "10"},
        headers=operator_headers,
    )
    fine_id = created.json()["multa"]["id"]
    updated = await client.put(
        f"/api/multas/{fine_id}", json={"monto": "12.25"}, headers=operator_headers
    )
    assert updated.json()["multa"]["monto"] == "12.25"
    assert (await client.delete(f"/api/multas/{fine_id}", headers=operator_headers)).status_code == 200
    assert (await client.get(f"/api/multas/{fine_id}", headers=operator_headers)).status_code == 404
