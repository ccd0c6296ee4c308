import os

os.environ.setdefault("APP_SECRET_KEY", "test-secret-key")
os.environ["APP_DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["APP_BCRYPT_ROUNDS"] = "4"

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, update
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import app
from apps.api.client.models import Client
from apps.api.payment_type.models import PaymentType
from apps.api.space.models import Space
from apps.api.tariff.models import Tariff
from apps.api.ticket.models import Ticket
from apps.api.user.models import Role, RoleName, User
from apps.api.vehicle.models import Vehicle
from apps.api.zone.models import Zone
from core.authentication.jwt.dependency import jwt_client
from core.authentication.passwords import hash_password
from core.db.base import AbstractSQLModel
from core.db.core import get_db
from core.db.mixins import utcnow

PASSWORD = "secret123"


@dataclass
class Seed:
    admin_id: int
    operator_id: int
    customer_id: int
    client_id: int
    vehicle_id: int
    other_vehicle_id: int
    zone_id: int
    space_id: int
    other_space_id: int
    tariff_id: int
    cash_id: int
    card_id: int


def _enable_sqlite_fk(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine.sync_engine, "connect", _enable_sqlite_fk)
    async with engine.begin() as conn:
        await conn.run_sync(AbstractSQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def seed(session_factory) -> Seed:
    async with session_factory() as session:
        roles = {name: Role(nombre=name.value) for name in RoleName}
        session.add_all(roles.values())
        await session.flush()

        def make_user(nombre, correo, role):
            return User(
                nombre=nombre,
                correo=correo,
                password=hash_password(PASSWORD),
                rol_id=roles[role].id,
                activo=True,
            )

        admin = make_user("Ana Admin", "admin@parqueo.com", RoleName.ADMIN)
        operator = make_user("Oscar Operador", "operador@parqueo.com", RoleName.OPERATOR)
        customer = make_user("Carla Cliente", "cliente@parqueo.com", RoleName.CLIENT)
        session.add_all([admin, operator, customer])

        client = Client(nombre="Juan Pérez", telefono="5555-1234")
        session.add(client)
        await session.flush()

        vehicle = Vehicle(cliente_id=client.id, placa="P123ABC", marca="Toyota", modelo="Corolla")
        other_vehicle = Vehicle(cliente_id=client.id, placa="P456DEF", marca="Honda", modelo="Civic")
        zone = Zone(nombre="Zona A", descripcion="Primer nivel")
        session.add_all([vehicle, other_vehicle, zone])
        await session.flush()

        space = Space(zona_id=zone.id, codigo="A-01", disponible=True)
        other_space = Space(zona_id=zone.id, codigo="A-02", disponible=True)
        tariff = Tariff(descripcion="Tarifa general", precio_hora=Decimal("10.00"))
        cash = PaymentType(nombre="Efectivo")
        card = PaymentType(nombre="Tarjeta")
        session.add_all([space, other_space, tariff, cash, card])
        await session.commit()

        return Seed(
            admin_id=admin.id,
            operator_id=operator.id,
            customer_id=customer.id,
            client_id=client.id,
            vehicle_id=vehicle.id,
            other_vehicle_id=other_vehicle.id,
            zone_id=zone.id,
            space_id=space.id,
            other_space_id=other_space.id,
            tariff_id=tariff.id,
            cash_id=cash.id,
            card_id=card.id,
        )


@pytest_asyncio.fixture
async def client(session_factory, seed):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


def make_token(user_id: int, nombre: str, correo: str, rol: str, expires_minutes=None) -> str:
    claims = {"id": user_id, "nombre": nombre, "correo": correo, "rol": rol}
    return jwt_client.create_token(claims, expires_minutes=expires_minutes).token


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(seed):
    return bearer(make_token(seed.admin_id, "Ana Admin", "admin@parqueo.com", "ADMIN"))


@pytest.fixture
def operator_headers(seed):
    return bearer(
        make_token(seed.operator_id, "Oscar Operador", "operador@parqueo.com", "OPERADOR")
    )


@pytest.fixture
def customer_headers(seed):
    return bearer(
        make_token(seed.customer_id, "Carla Cliente", "cliente@parqueo.com", "CLIENTE")
    )


@pytest.fixture
def backdate(session_factory):
    """Move a ticket's entry time ``minutes`` (plus a few seconds) into the past."""

    async def _backdate(ticket_id: int, minutes: int):
        async with session_factory() as session:
            await session.execute(
                update(Ticket)
                .where(Ticket.id == ticket_id)
                .values(hora_entrada=utcnow() - timedelta(minutes=minutes, seconds=5))
            )
            await session.commit()

    return _backdate


@pytest.fixture
def open_ticket(client, seed, operator_headers):
    async def _open(vehiculo_id=None, espacio_id=None, tarifa_id=None) -> dict:
        response = await client.post(
            "/api/tickets/entrada",
            json={
                "vehiculo_id": vehiculo_id or seed.vehicle_id,
                "espacio_id": espacio_id or seed.space_id,
                "tarifa_id": tarifa_id or seed.tariff_id,
            },
            headers=operator_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["ticket"]

    return _open


@pytest.fixture
def closed_ticket(client, open_ticket, backdate, operator_headers):
    """Open a ticket, age it by ``minutes`` and close it."""

    async def _closed(minutes: int = 125, **kwargs) -> dict:
        ticket = await open_ticket(**kwargs)
        await backdate(ticket["id"], minutes)
        response = await client.put(
            f"/api/tickets/{ticket['id']}/salida", headers=operator_headers
        )
        assert response.status_code == 200, response.text
        return response.json()["ticket"]

    return _closed
