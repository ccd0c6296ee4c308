# apps/api/payment_type/router.py

from fastapi import APIRouter

from apps.api.auth.dependency import AdminUserDependency, UserDependency
from apps.api.payment_type.schema import (
    PaymentTypeCreate,
    PaymentTypeEnvelope,
    PaymentTypeListResponse,
    PaymentTypeResponse,
)
from apps.api.payment_type.service import PaymentTypeServiceDependency
from core.response.models import MessageResponse

router = APIRouter(
    prefix="/tipospago",
    tags=["Tipos de pago"],
)


@router.get("", description="List payment types")
async def list_payment_types(
    user: UserDependency,
    payment_type_service: PaymentTypeServiceDependency,
) -> PaymentTypeListResponse:
    payment_types = await payment_type_service.list_payment_types()
    return PaymentTypeListResponse(
        total=len(payment_types),
        tipos_pago=[PaymentTypeResponse.model_validate(p) for p in payment_types],
    )


@router.get("/{payment_type_id}", description="Get payment type")
async def get_payment_type(
    payment_type_id: int,
    user: UserDependency,
    payment_type_service: PaymentTypeServiceDependency,
) -> PaymentTypeEnvelope:
    payment_type = await payment_type_service.get_payment_type(payment_type_id)
    return PaymentTypeEnvelope(tipo_pago=PaymentTypeResponse.model_validate(payment_type))


@router.post("", status_code=201, description="Create a payment type")
async def create_payment_type(
    user: AdminUserDependency,
    payment_type_service: PaymentTypeServiceDependency,
    data: PaymentTypeCreate,
) -> PaymentTypeEnvelope:
    payment_type = await payment_type_service.create_payment_type(data)
    return PaymentTypeEnvelope(
        mensaje="Tipo de pago creado exitosamente",
        tipo_pago=PaymentTypeResponse.model_validate(payment_type),
    )


@router.put("/{payment_type_id}", description="Rename a payment type")
async def update_payment_type(
    payment_type_id: int,
    user: AdminUserDependency,
    payment_type_service: PaymentTypeServiceDependency,
    data: PaymentTypeCreate,
) -> PaymentTypeEnvelope:
    payment_type = await payment_type_service.update_payment_type(payment_type_id, data)
    return PaymentTypeEnvelope(
        mensaje="Tipo de pago actualizado exitosamente",
        tipo_pago=PaymentTypeResponse.model_validate(payment_type),
    )


@router.delete("/{payment_type_id}", description="Delete a payment type")
async def delete_payment_type(
    payment_type_id: int,
    user: AdminUserDependency,
    payment_type_service: PaymentTypeServiceDependency,
) -> MessageResponse:
    await payment_type_service.delete_payment_type(payment_type_id)
    return MessageResponse(mensaje="Tipo de pago eliminado exitosamente")
