# apps/api/tariff/router.py

from fastapi import APIRouter

from apps.api.auth.dependency import AdminUserDependency, UserDependency
from apps.api.tariff.schema import (
    TariffCreate,
    TariffEnvelope,
    TariffListResponse,
    TariffResponse,
    TariffUpdate,
)
from apps.api.tariff.service import TariffServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/tarifas",
    tags=["Tarifas"],
)


@router.get("", description="List tariffs")
async def list_tariffs(
    user: UserDependency,
    tariff_service: TariffServiceDependency,
) -> TariffListResponse:
    tariffs = await tariff_service.list_tariffs()
    return TariffListResponse(
        total=len(tariffs),
        tarifas=[TariffResponse.model_validate(t) for t in tariffs],
    )


@router.get("/{tariff_id}", description="Get tariff details")
async def get_tariff(
    tariff_id: int,
    user: UserDependency,
    tariff_service: TariffServiceDependency,
) -> TariffEnvelope:
    tariff = await tariff_service.get_tariff(tariff_id)
    return TariffEnvelope(tarifa=TariffResponse.model_validate(tariff))


@router.post("", status_code=201, description="Create a tariff")
async def create_tariff(
    user: AdminUserDependency,
    tariff_service: TariffServiceDependency,
    data: TariffCreate,
) -> TariffEnvelope:
    tariff = await tariff_service.create_tariff(data)
    return TariffEnvelope(
        mensaje="Tarifa creada exitosamente",
        tarifa=TariffResponse.model_validate(tariff),
    )


@router.put("/{tariff_id}", description="Update a tariff")
async def update_tariff(
    tariff_id: int,
    user: AdminUserDependency,
    tariff_service: TariffServiceDependency,
    data: TariffUpdate,
) -> TariffEnvelope:
    tariff = await tariff_service.update_tariff(tariff_id, data)
    return TariffEnvelope(
        mensaje="Tarifa actualizada exitosamente",
        tarifa=TariffResponse.model_validate(tariff),
    )


@router.delete("/{tariff_id}", description="Delete a tariff")
async def delete_tariff(
    tariff_id: int,
    user: AdminUserDependency,
    tariff_service: TariffServiceDependency,
) -> MessageResponse:
    await tariff_service.delete_tariff(tariff_id)
    return MessageResponse(mensaje="Tarifa eliminada exitosamente")
