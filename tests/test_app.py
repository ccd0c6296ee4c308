async def test_root_banner_lists_endpoints(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["endpoints"]["tickets"] == "/api/tickets"


async def test_ping(client):
    response = await client.get("/api/ping")

    assert response.json() == {"status": "ok"}


async def test_unknown_route(client):
    response = await client.get("/api/no-existe")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Ruta no encontrada",
        "ruta": "/api/no-existe",
        "metodo": "GET",
    }


async def test_validation_error_shape(client, operator_headers):
    response = await client.post("/api/pagos", json={}, headers=operator_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Campos requeridos"
    assert body["codigo"] == "VALIDATION_ERROR"
    assert {"ticket_id", "tipo_pago_id", "monto"} <= {d["loc"][-1] for d in body["detalles"]}


async def test_not_found_error_shape(client, operator_headers):
    response = await client.get("/api/clientes/999", headers=operator_headers)

    assert response.status_code == 404
    assert set(response.json()) == {"error", "mensaje", "codigo"}
    assert response.json()["codigo"] == "CLIENT_NOT_FOUND"
