# apps/api/vehicle/service.py
import logging
from typing import Annotated, List, Optional

from sqlalchemy import func, select

from apps.api.client.models import Client
from apps.api.ticket.models import Ticket
from apps.api.vehicle.models import Vehicle, normalize_plate
from apps.api.vehicle.schema import VehicleCreate, VehicleUpdate
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import ConflictException, InvalidRequestException, NotFoundException

logger = logging.getLogger(__name__)


class VehicleService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_vehicle(self, vehicle_id: int) -> Vehicle:
        vehicle = await self.session.get(Vehicle, vehicle_id)
        if not vehicle:
            raise NotFoundException(
                f"No existe un vehículo con el ID {vehicle_id}",
                error_code="VEHICLE_NOT_FOUND",
                title="Vehículo no encontrado",
            )
        return vehicle

    async def get_by_plate(self, placa: str) -> Vehicle:
        placa = normalize_plate(placa)
        vehicle = await self.session.scalar(select(Vehicle).where(Vehicle.placa == placa))
        if not vehicle:
            raise NotFoundException(
                f"No existe un vehículo con la placa {placa}",
                error_code="VEHICLE_NOT_FOUND",
                title="Vehículo no encontrado",
            )
        return vehicle

    async def list_vehicles(self, cliente_id: Optional[int] = None) -> List[Vehicle]:
        query = select(Vehicle)
        if cliente_id is not None:
            query = query.where(Vehicle.cliente_id == cliente_id)
        result = await self.session.execute(query.order_by(Vehicle.placa))
        return list(result.scalars().unique().all())

    async def _ensure_client(self, cliente_id: int) -> None:
        if not await self.session.get(Client, cliente_id):
            raise NotFoundException(
                f"No existe un cliente con el ID {cliente_id}",
                error_code="CLIENT_NOT_FOUND",
                title="Cliente no encontrado",
            )

    async def create_vehicle(self, data: VehicleCreate) -> Vehicle:
        """
        Register a vehicle for an existing client.

        Raises:
            NotFoundException: if the client does not exist
            ConflictException: if the plate is already registered
        """
        await self._ensure_client(data.cliente_id)
        existing = await self.session.scalar(
            select(Vehicle.id).where(Vehicle.placa == data.placa)
        )
        if existing:
            raise ConflictException(
                f"Ya existe un vehículo con la placa {data.placa}",
                error_code="PLATE_ALREADY_REGISTERED",
                title="Placa duplicada",
            )

        vehicle = Vehicle(**data.model_dump())
        self.session.add(vehicle)
        await self.session.commit()
        await self.session.refresh(vehicle)
        logger.info("Vehicle %s registered with plate %s", vehicle.id, vehicle.placa)
        return vehicle

    async def update_vehicle(self, vehicle_id: int, data: VehicleUpdate) -> Vehicle:
        vehicle = await self.get_vehicle(vehicle_id)
        values = data.model_dump(exclude_unset=True)
        if values.get("cliente_id") is not None:
            await self._ensure_client(values["cliente_id"])
        for field, value in values.items():
            setattr(vehicle, field, value)
        await self.session.commit()
        await self.session.refresh(vehicle)
        return vehicle

    async def delete_vehicle(self, vehicle_id: int) -> None:
        vehicle = await self.get_vehicle(vehicle_id)
        tickets = await self.session.scalar(
            select(func.count(Ticket.id)).where(Ticket.vehiculo_id == vehicle_id)
        )
        if tickets:
            raise InvalidRequestException(
                f"El vehículo tiene {tickets} ticket(s) registrado(s)",
                error_code="VEHICLE_HAS_TICKETS",
                title="No se puede eliminar",
            )
        await self.session.delete(vehicle)
        await self.session.commit()


VehicleServiceDependency = Annotated[VehicleService, VehicleService.get_dependency()]
