# apps/api/vehicle/models.py

import re

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.mixins import TimestampsMixin


def normalize_plate(placa: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "", placa).upper()


# -------------------------
# 1. Vehicle Model
# -------------------------
class Vehicle(AbstractSQLModel, TimestampsMixin):
    __tablename__ = "vehiculos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=False)
    placa = Column(String(20), unique=True, nullable=False, index=True)
    marca = Column(String(50), nullable=True)
    modelo = Column(String(50), nullable=True)
    color = Column(String(30), nullable=True)

    cliente = relationship("Client", back_populates="vehiculos", lazy="joined")
    tickets = relationship("Ticket", back_populates="vehiculo", passive_deletes=True)

    @property
    def cliente_nombre(self) -> str | None:
        return self.cliente.nombre if self.cliente else None
