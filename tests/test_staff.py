async def _shift(client, admin_headers, inicio="08:00:00", fin="16:00:00", descripcion="Mañana"):
    response = await client.post(
        "/api/turnos",
        json={"descripcion": descripcion, "hora_inicio": inicio, "hora_fin": fin},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["turno"]


async def _employee(client, admin_headers, usuario_id, dpi="1234567890101", turno_id=None):
    return await client.post(
        "/api/empleados",
        json={"usuario_id": usuario_id, "dpi": dpi, "turno_id": turno_id, "telefono": "5555-2222"},
        headers=admin_headers,
    )


async def test_shift_crud(client, admin_headers):
    turno = await _shift(client, admin_headers)
    assert turno["hora_inicio"] == "08:00:00"

    await _shift(client, admin_headers, inicio="00:00:00", fin="08:00:00", descripcion="Noche")
    listing = await client.get("/api/turnos", headers=admin_headers)
    assert [t["descripcion"] for t in listing.json()["turnos"]] == ["Noche", "Mañana"]

    updated = await client.put(
        f"/api/turnos/{turno['id']}", json={"hora_fin": "17:30:00"}, headers=admin_headers
    )
    assert updated.json()["turno"]["hora_fin"] == "17:30:00"
    assert updated.json()["turno"]["hora_inicio"] == "08:00:00"

    deleted = await client.delete(f"/api/turnos/{turno['id']}", headers=admin_headers)
    assert deleted.status_code == 200


async def test_shift_rejects_malformed_time(client, admin_headers):
    response = await client.post(
        "/api/turnos",
        json={"hora_inicio": "25:00:00", "hora_fin": "08:00:00"},
        headers=admin_headers,
    )

    assert response.status_code == 400


async def test_shift_writes_are_admin_only(client, operator_headers):
    response = await client.post(
        "/api/turnos",
        json={"hora_inicio": "08:00:00", "hora_fin": "16:00:00"},
        headers=operator_headers,
    )

    assert response.status_code == 403


async def test_employee_lifecycle(client, seed, admin_headers):
    turno = await _shift(client, admin_headers)

    created = await _employee(client, admin_headers, seed.operator_id, turno_id=turno["id"])
    assert created.status_code == 201
    empleado = created.json()["empleado"]
    assert empleado["usuario_nombre"] == "Oscar Operador"
    assert empleado["rol_nombre"] == "OPERADOR"
    assert empleado["turno_descripcion"] == "Mañana"
    assert empleado["hora_inicio"] == "08:00:00"

    detail = await client.get(f"/api/turnos/{turno['id']}", headers=admin_headers)
    assert detail.json()["turno"]["total_empleados"] == 1
    assert detail.json()["turno"]["empleados"][0]["nombre"] == "Oscar Operador"

    blocked = await client.delete(f"/api/turnos/{turno['id']}", headers=admin_headers)
    assert blocked.status_code == 400
    assert blocked.json()["codigo"] == "SHIFT_HAS_EMPLOYEES"

    updated = await client.put(
        f"/api/empleados/{empleado['id']}",
        json={"direccion": "Zona 1", "turno_id": None},
        headers=admin_headers,
    )
    assert updated.json()["empleado"]["direccion"] == "Zona 1"
    assert updated.json()["empleado"]["turno_id"] is None

    disabled = await client.patch(
        f"/api/empleados/{empleado['id']}/estado", json={"activo": False}, headers=admin_headers
    )
    assert disabled.status_code == 200
    assert disabled.json()["mensaje"] == "Empleado desactivado exitosamente"
    assert disabled.json()["empleado"]["usuario_activo"] is False

    deleted = await client.delete(f"/api/empleados/{empleado['id']}", headers=admin_headers)
    assert deleted.status_code == 200


async def test_employee_conflicts(client, seed, admin_headers):
    assert (await _employee(client, admin_headers, seed.operator_id)).status_code == 201

    again = await _employee(client, admin_headers, seed.operator_id, dpi="999")
    assert again.status_code == 409
    assert again.json()["codigo"] == "USER_ALREADY_EMPLOYEE"

    same_dpi = await _employee(client, admin_headers, seed.admin_id)
    assert same_dpi.status_code == 409
    assert same_dpi.json()["codigo"] == "DPI_ALREADY_REGISTERED"

    no_user = await _employee(client, admin_headers, 999, dpi="111")
    assert no_user.status_code == 404

    no_shift = await _employee(client, admin_headers, seed.admin_id, dpi="222", turno_id=999)
    assert no_shift.status_code == 404
    assert no_shift.json()["codigo"] == "SHIFT_NOT_FOUND"


async def test_employee_with_tickets_cannot_be_deleted(
    client, seed, admin_headers, open_ticket
):
    empleado = (await _employee(client, admin_headers, seed.operator_id)).json()["empleado"]
    await open_ticket()

    response = await client.delete(f"/api/empleados/{empleado['id']}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["codigo"] == "EMPLOYEE_HAS_TICKETS"


async def test_roles_crud(client, seed, admin_headers):
    created = await client.post(
        "/api/roles", json={"nombre": "supervisor", "descripcion": "Turno nocturno"}, headers=admin_headers
    )
    assert created.status_code == 201
    rol = created.json()["rol"]
    assert rol["nombre"] == "SUPERVISOR"

    duplicate = await client.post("/api/roles", json={"nombre": "Supervisor"}, headers=admin_headers)
    assert duplicate.status_code == 409
    assert duplicate.json()["codigo"] == "ROLE_EXISTS"

    renamed = await client.put(
        f"/api/roles/{rol['id']}", json={"nombre": "jefe de turno"}, headers=admin_headers
    )
    assert renamed.json()["rol"]["nombre"] == "JEFE DE TURNO"

    listing = await client.get("/api/roles", headers=admin_headers)
    counts = {r["nombre"]: r["total_usuarios"] for r in listing.json()["roles"]}
    assert counts == {"ADMIN": 1, "CLIENTE": 1, "JEFE DE TURNO": 0, "OPERADOR": 1}

    deleted = await client.delete(f"/api/roles/{rol['id']}", headers=admin_headers)
    assert deleted.status_code == 200


async def test_role_detail_lists_users(client, admin_headers):
    listing = await client.get("/api/roles", headers=admin_headers)
    admin_role = next(r for r in listing.json()["roles"] if r["nombre"] == "ADMIN")

    detail = await client.get(f"/api/roles/{admin_role['id']}", headers=admin_headers)

    assert detail.status_code == 200
    assert [u["correo"] for u in detail.json()["rol"]["usuarios"]] == ["admin@parqueo.com"]


async def test_system_roles_are_protected(client, admin_headers):
    listing = await client.get("/api/roles", headers=admin_headers)
    operator_role = next(r for r in listing.json()["roles"] if r["nombre"] == "OPERADOR")

    deleted = await client.delete(f"/api/roles/{operator_role['id']}", headers=admin_headers)
    assert deleted.status_code == 403
    assert deleted.json()["codigo"] == "SYSTEM_ROLE"

    renamed = await client.put(
        f"/api/roles/{operator_role['id']}", json={"nombre": "CAJERO"}, headers=admin_headers
    )
    assert renamed.status_code == 403

    described = await client.put(
        f"/api/roles/{operator_role['id']}", json={"descripcion": "Caseta"}, headers=admin_headers
    )
    assert described.json()["rol"]["descripcion"] == "Caseta"


async def test_role_with_users_cannot_be_deleted(client, seed, admin_headers):
    rol = (
        await client.post("/api/roles", json={"nombre": "AUDITOR"}, headers=admin_headers)
    ).json()["rol"]
    await client.post(
        "/api/auth/register",
        json={
            "nombre": "Auditora",
            "correo": "auditora@parqueo.com",
            "password": "clave123",
            "rol_id": rol["id"],
        },
        headers=admin_headers,
    )

    response = await client.delete(f"/api/roles/{rol['id']}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["codigo"] == "ROLE_HAS_USERS"


async def test_role_writes_are_admin_only(client, operator_headers):
    response = await client.post("/api/roles", json={"nombre": "X"}, headers=operator_headers)

    assert response.status_code == 403
