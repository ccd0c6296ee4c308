# apps/api/client/router.py

from typing import Optional

from fastapi import APIRouter, Query

from apps.api.auth.dependency import StaffUserDependency, UserDependency
from apps.api.client.schema import (
    ClientCreate,
    ClientEnvelope,
    ClientListResponse,
    ClientResponse,
    ClientUpdate,
)
from apps.api.client.service import ClientServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/clientes",
    tags=["Clientes"],
)


@router.get("", description="List clients")
async def list_clients(
    user: UserDependency,
    client_service: ClientServiceDependency,
    buscar: Optional[str] = Query(None, description="Search by name or NIT"),
) -> ClientListResponse:
    clients = await client_service.list_clients(search=buscar)
    return ClientListResponse(
        total=len(clients),
        clientes=[ClientResponse.model_validate(c) for c in clients],
    )


@router.get("/{client_id}", description="Get client details")
async def get_client(
    client_id: int,
    user: UserDependency,
    client_service: ClientServiceDependency,
) -> ClientEnvelope:
    client = await client_service.get_client(client_id)
    return ClientEnvelope(cliente=ClientResponse.model_validate(client))


@router.post("", status_code=201, description="Create a client")
async def create_client(
    user: StaffUserDependency,
    client_service: ClientServiceDependency,
    data: ClientCreate,
) -> ClientEnvelope:
    client = await client_service.create_client(data)
    return ClientEnvelope(
        mensaje="Cliente creado exitosamente",
        cliente=ClientResponse.model_validate(client),
    )


@router.put("/{client_id}", description="Update a client")
async def update_client(
    client_id: int,
    user: StaffUserDependency,
    client_service: ClientServiceDependency,
    data: ClientUpdate,
) -> ClientEnvelope:
    client = await client_service.update_client(client_id, data)
    return ClientEnvelope(
        mensaje="Cliente actualizado exitosamente",
        cliente=ClientResponse.model_validate(client),
    )


@router.delete("/{client_id}", description="Delete a client")
async def delete_client(
    client_id: int,
    user: StaffUserDependency,
    client_service: ClientServiceDependency,
) -> MessageResponse:
    await client_service.delete_client(client_id)
    return MessageResponse(mensaje="Cliente eliminado exitosamente")
