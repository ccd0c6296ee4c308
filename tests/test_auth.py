from sqlalchemy import select, update

from apps.api.user.models import Role, RoleName, User
from tests.conftest import PASSWORD, bearer, make_token


async def test_register_defaults_to_customer_role(client):
    response = await client.post(
        "/api/auth/register",
        json={"nombre": "Nuevo Usuario", "correo": "nuevo@parqueo.com", "password": "clave123"},
    )

    assert response.status_code == 201
    usuario = response.json()["usuario"]
    assert usuario["rol"] == "CLIENTE"
    assert usuario["activo"] is True
    assert "password" not in usuario


async def test_register_duplicate_email(client):
    response = await client.post(
        "/api/auth/register",
        json={"nombre": "Otra Ana", "correo": "admin@parqueo.com", "password": "clave123"},
    )

    assert response.status_code == 409
    assert response.json()["codigo"] == "EMAIL_ALREADY_REGISTERED"


async def test_register_short_password(client):
    response = await client.post(
        "/api/auth/register",
        json={"nombre": "X", "correo": "x@parqueo.com", "password": "123"},
    )

    assert response.status_code == 400


async def test_login_returns_usable_token(client):
    response = await client.post(
        "/api/auth/login", json={"correo": "operador@parqueo.com", "password": PASSWORD}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["usuario"]["rol"] == "OPERADOR"
    assert body["expira_en"] == 24 * 60 * 60

    profile = await client.get("/api/auth/perfil", headers=bearer(body["token"]))
    assert profile.status_code == 200
    assert profile.json()["usuario"]["correo"] == "operador@parqueo.com"


async def test_login_wrong_password(client):
    response = await client.post(
        "/api/auth/login", json={"correo": "operador@parqueo.com", "password": "incorrecta"}
    )

    assert response.status_code == 401
    assert response.json()["codigo"] == "INVALID_CREDENTIALS"


async def test_login_unknown_user(client):
    response = await client.post(
        "/api/auth/login", json={"correo": "nadie@parqueo.com", "password": PASSWORD}
    )

    assert response.status_code == 401


async def test_inactive_user_is_locked_out(client, seed, operator_headers, session_factory):
    async with session_factory() as session:
        await session.execute(update(User).where(User.id == seed.operator_id).values(activo=False))
        await session.commit()

    login = await client.post(
        "/api/auth/login", json={"correo": "operador@parqueo.com", "password": PASSWORD}
    )
    assert login.status_code == 403
    assert login.json()["codigo"] == "USER_INACTIVE"

    existing_token = await client.get("/api/auth/perfil", headers=operator_headers)
    assert existing_token.status_code == 403


async def test_missing_token(client):
    response = await client.get("/api/tickets")

    assert response.status_code == 403
    assert response.json()["error"] == "Token no proporcionado"


async def test_invalid_token(client):
    response = await client.get("/api/tickets", headers=bearer("not-a-jwt"))

    assert response.status_code == 401
    assert response.json()["error"] == "Token inválido"


async def test_expired_token(client, seed):
    token = make_token(seed.admin_id, "Ana Admin", "admin@parqueo.com", "ADMIN", expires_minutes=-5)

    response = await client.get("/api/tickets", headers=bearer(token))

    assert response.status_code == 401
    assert response.json()["error"] == "Token expirado"


async def test_token_for_deleted_user(client):
    token = make_token(4242, "Fantasma", "fantasma@parqueo.com", "ADMIN")

    response = await client.get("/api/auth/perfil", headers=bearer(token))

    assert response.status_code == 401


async def test_role_comes_from_stored_user_not_token(client, seed):
    forged = make_token(seed.customer_id, "Carla Cliente", "cliente@parqueo.com", "ADMIN")

    response = await client.post("/api/zonas", json={"nombre": "Zona Z"}, headers=bearer(forged))

    assert response.status_code == 403
    assert response.json()["codigo"] == "ROLE_NOT_ALLOWED"


async def test_login_and_logout_are_recorded(client, admin_headers):
    login = await client.post(
        "/api/auth/login", json={"correo": "operador@parqueo.com", "password": PASSWORD}
    )
    token = login.json()["token"]
    user_id = login.json()["usuario"]["id"]
    logout = await client.post("/api/auth/logout", headers=bearer(token))
    assert logout.status_code == 200

    history = await client.get(f"/api/historial/usuario/{user_id}", headers=admin_headers)

    assert history.status_code == 200
    actions = sorted(r["accion"] for r in history.json()["historial"])
    assert actions == ["LOGIN", "LOGOUT"]

    stats = await client.get("/api/historial/estadisticas", headers=admin_headers)
    assert stats.json()["total_registros"] == 2


async def test_history_is_admin_only(client, operator_headers):
    response = await client.get("/api/historial", headers=operator_headers)

    assert response.status_code == 403


async def test_roles_catalog(client, customer_headers):
    response = await client.get("/api/roles", headers=customer_headers)

    assert response.status_code == 200
    assert {r["nombre"] for r in response.json()["roles"]} == {"ADMIN", "OPERADOR", "CLIENTE"}


async def test_admin_can_deactivate_users_but_not_self(client, seed, admin_headers):
    response = await client.patch(
        f"/api/usuarios/{seed.customer_id}/estado", json={"activo": False}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["usuario"]["activo"] is False

    self_response = await client.patch(
        f"/api/usuarios/{seed.admin_id}/estado", json={"activo": False}, headers=admin_headers
    )
    assert self_response.status_code == 403


async def _role_id(session_factory, name: RoleName) -> int:
    async with session_factory() as session:
        return await session.scalar(select(Role.id).where(Role.nombre == name.value))


async def test_self_registration_cannot_pick_admin_role(client, session_factory):
    admin_role = await _role_id(session_factory, RoleName.ADMIN)
    response = await client.post(
        "/api/auth/register",
        json={
            "nombre": "Intruso",
            "correo": "intruso@parqueo.com",
            "password": "clave123",
            "rol_id": admin_role,
        },
    )
    assert response.status_code == 201
    assert response.json()["usuario"]["rol"] == "CLIENTE"

    login = await client.post(
        "/api/auth/login", json={"correo": "intruso@parqueo.com", "password": "clave123"}
    )
    token = login.json()["token"]

    response = await client.post(
        "/api/zonas", json={"nombre": "Zona Z"}, headers=bearer(token)
    )
    assert response.status_code == 403
    assert response.json()["codigo"] == "ROLE_NOT_ALLOWED"


async def test_admin_registration_assigns_requested_role(client, session_factory, admin_headers):
    operator_role = await _role_id(session_factory, RoleName.OPERATOR)
    response = await client.post(
        "/api/auth/register",
        json={
            "nombre": "Nuevo Operador",
            "correo": "nuevo.operador@parqueo.com",
            "password": "clave123",
            "rol_id": operator_role,
        },
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["usuario"]["rol"] == "OPERADOR"


async def test_operator_registration_cannot_pick_role(client, session_factory, operator_headers):
    admin_role = await _role_id(session_factory, RoleName.ADMIN)
    response = await client.post(
        "/api/auth/register",
        json={
            "nombre": "Otro",
            "correo": "otro@parqueo.com",
            "password": "clave123",
            "rol_id": admin_role,
        },
        headers=operator_headers,
    )

    assert response.status_code == 201
    assert response.json()["usuario"]["rol"] == "CLIENTE"
