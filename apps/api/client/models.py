# apps/api/client/models.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.mixins import TimestampsMixin


class Client(AbstractSQLModel, TimestampsMixin):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(120), nullable=False)
    telefono = Column(String(30), nullable=True)
    correo = Column(String(120), nullable=True)
    nit = Column(String(20), nullable=True)

    vehiculos = relationship("Vehicle", back_populates="cliente", passive_deletes=True)
