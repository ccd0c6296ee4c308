# apps/api/client/service.py

from typing import Annotated, List, Optional

from sqlalchemy import func, or_, select

from apps.api.client.models import Client
from apps.api.client.schema import ClientCreate, ClientUpdate
from apps.api.reservation.models import Reservation
from apps.api.vehicle.models import Vehicle
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import InvalidRequestException, NotFoundException


class ClientService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_client(self, client_id: int) -> Client:
        client = await self.session.get(Client, client_id)
        if not client:
            raise NotFoundException(
                f"No existe un cliente con el ID {client_id}",
                error_code="CLIENT_NOT_FOUND",
                title="Cliente no encontrado",
            )
        return client

    async def list_clients(self, search: Optional[str] = None) -> List[Client]:
        query = select(Client)
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(Client.nombre.ilike(pattern), Client.nit.ilike(pattern))
            )
        result = await self.session.execute(query.order_by(Client.nombre))
        return list(result.scalars().all())

    async def create_client(self, data: ClientCreate) -> Client:
        client = Client(**data.model_dump())
        self.session.add(client)
        await self.session.commit()
        await self.session.refresh(client)
        return client

    async def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        client = await self.get_client(client_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(client, field, value)
        await self.session.commit()
        await self.session.refresh(client)
        return client

    async def delete_client(self, client_id: int) -> None:
        """Delete a client with no registered vehicles or reservations."""
        client = await self.get_client(client_id)
        vehicles = await self.session.scalar(
            select(func.count(Vehicle.id)).where(Vehicle.cliente_id == client_id)
        )
        if vehicles:
            raise InvalidRequestException(
                f"El cliente tiene {vehicles} vehículo(s) registrado(s)",
                error_code="CLIENT_HAS_VEHICLES",
                title="No se puede eliminar",
            )
        reservations = await self.session.scalar(
            select(func.count(Reservation.id)).where(Reservation.cliente_id == client_id)
        )
        if reservations:
            raise InvalidRequestException(
                f"El cliente tiene {reservations} reserva(s) registrada(s)",
                error_code="CLIENT_HAS_RESERVATIONS",
                title="No se puede eliminar",
            )
        await self.session.delete(client)
        await self.session.commit()


ClientServiceDependency = Annotated[ClientService, ClientService.get_dependency()]
