# apps/api/vehicle/router.py
from typing import Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import StaffUserDependency, UserDependency
from apps.api.vehicle.schema import (
    VehicleCreate,
    VehicleEnvelope,
    VehicleListResponse,
    VehicleResponse,
    VehicleUpdate,
)
from apps.api.vehicle.service import VehicleServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/vehiculos",
    tags=["Vehiculos"],
)


@router.get("", description="List vehicles")
async def list_vehicles(
    user: UserDependency,
    vehicle_service: VehicleServiceDependency,
    cliente_id: Optional[int] = Query(None),
) -> VehicleListResponse:
    vehicles = await vehicle_service.list_vehicles(cliente_id=cliente_id)
    return VehicleListResponse(
        total=len(vehicles),
        vehiculos=[VehicleResponse.model_validate(v) for v in vehicles],
    )


@router.get("/placa/{placa}", description="Find a vehicle by plate")
async def get_vehicle_by_plate(
    placa: str,
    user: UserDependency,
    vehicle_service: VehicleServiceDependency,
) -> VehicleEnvelope:
    vehicle = await vehicle_service.get_by_plate(placa)
    return VehicleEnvelope(vehiculo=VehicleResponse.model_validate(vehicle))


@router.get("/{vehicle_id}", description="Get vehicle details")
async def get_vehicle(
    vehicle_id: int,
    user: UserDependency,
    vehicle_service: VehicleServiceDependency,
) -> VehicleEnvelope:
    vehicle = await vehicle_service.get_vehicle(vehicle_id)
    return VehicleEnvelope(vehiculo=VehicleResponse.model_validate(vehicle))


@router.post("", status_code=201, description="Register a vehicle")
async def create_vehicle(
    user: StaffUserDependency,
    vehicle_service: VehicleServiceDependency,
    data: VehicleCreate,
) -> VehicleEnvelope:
    vehicle = await vehicle_service.create_vehicle(data)
    return VehicleEnvelope(
        mensaje="Vehículo registrado exitosamente",
        vehiculo=VehicleResponse.model_validate(vehicle),
    )


@router.put("/{vehicle_id}", description="Update a vehicle")
async def update_vehicle(
    vehicle_id: int,
    user: StaffUserDependency,
    vehicle_service: VehicleServiceDependency,
    data: VehicleUpdate,
) -> VehicleEnvelope:
    vehicle = await vehicle_service.update_vehicle(vehicle_id, data)
    return VehicleEnvelope(
        mensaje="Vehículo actualizado exitosamente",
        vehiculo=VehicleResponse.model_validate(vehicle),
    )


@router.delete("/{vehicle_id}", description="Delete a vehicle")
async def delete_vehicle(
    vehicle_id: int,
    user: StaffUserDependency,
    vehicle_service: VehicleServiceDependency,
) -> MessageResponse:
    await vehicle_service.delete_vehicle(vehicle_id)
    return MessageResponse(mensaje="Vehículo eliminado exitosamente")
