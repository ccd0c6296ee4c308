# apps/api/payment_type/service.py

from typing import Annotated, List, Optional

from sqlalchemy import func, select

from apps.api.payment.models import Payment
from apps.api.payment_type.models import PaymentType
from apps.api.payment_type.schema import PaymentTypeCreate
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import ConflictException, InvalidRequestException, NotFoundException


class PaymentTypeService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_payment_type(self, payment_type_id: int) -> PaymentType:
        payment_type = await self.session.get(PaymentType, payment_type_id)
        if not payment_type:
            raise NotFoundException(
                f"No existe un tipo de pago con el ID {payment_type_id}",
                error_code="PAYMENT_TYPE_NOT_FOUND",
                title="Tipo de pago no encontrado",
            )
        return payment_type

    async def list_payment_types(self) -> List[PaymentType]:
        result = await self.session.execute(select(PaymentType).order_by(PaymentType.nombre))
        return list(result.scalars().all())

    async def _ensure_unique_name(self, nombre: str, exclude_id: Optional[int] = None):
        query = select(PaymentType.id).where(func.lower(PaymentType.nombre) == nombre.lower())
        if exclude_id is not None:
            query = query.where(PaymentType.id != exclude_id)
        if await self.session.scalar(query):
            raise ConflictException(
                f"Ya existe el tipo de pago {nombre}",
                error_code="PAYMENT_TYPE_EXISTS",
                title="Tipo de pago duplicado",
            )

    async def create_payment_type(self, data: PaymentTypeCreate) -> PaymentType:
        await self._ensure_unique_name(data.nombre)
        payment_type = PaymentType(nombre=data.nombre)
        self.session.add(payment_type)
        await self.session.commit()
        await self.session.refresh(payment_type)
        return payment_type

    async def update_payment_type(
        self, payment_type_id: int, data: PaymentTypeCreate
    ) -> PaymentType:
        payment_type = await self.get_payment_type(payment_type_id)
        await self._ensure_unique_name(data.nombre, exclude_id=payment_type_id)
        payment_type.nombre = data.nombre
        await self.session.commit()
        await self.session.refresh(payment_type)
        return payment_type

    async def delete_payment_type(self, payment_type_id: int) -> None:
        payment_type = await self.get_payment_type(payment_type_id)
        payments = await self.session.scalar(
            select(func.count(Payment.id)).where(Payment.tipo_pago_id == payment_type_id)
        )
        if payments:
            raise InvalidRequestException(
                f"El tipo de pago tiene {payments} pago(s) registrado(s)",
                error_code="PAYMENT_TYPE_IN_USE",
                title="No se puede eliminar",
            )
        await self.session.delete(payment_type)
        await self.session.commit()


PaymentTypeServiceDependency = Annotated[
    PaymentTypeService, PaymentTypeService.get_dependency()
]
