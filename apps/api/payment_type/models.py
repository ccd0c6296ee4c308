# apps/api/payment_type/models.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel


class PaymentType(AbstractSQLModel):
    __tablename__ = "tipos_pago"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(50), unique=True, nullable=False)

    pagos = relationship("Payment", back_populates="tipo_pago", passive_deletes=True)
