# apps/api/zone/models.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel


class Zone(AbstractSQLModel):
    __tablename__ = "zonas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(80), nullable=False)
    descripcion = Column(String(255), nullable=True)

    espacios = relationship("Space", back_populates="zona", passive_deletes=True)
