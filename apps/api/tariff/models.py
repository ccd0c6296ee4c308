# apps/api/tariff/models.py

from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel


class Tariff(AbstractSQLModel):
    __tablename__ = "tarifas"
    __table_args__ = (CheckConstraint("precio_hora > 0", name="precio_hora_positivo"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    descripcion = Column(String(120), nullable=False)
    precio_hora = Column(Numeric(10, 2), nullable=False)

    tickets = relationship("Ticket", back_populates="tarifa", passive_deletes=True)
