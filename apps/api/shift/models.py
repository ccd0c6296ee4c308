# apps/api/shift/models.py

from sqlalchemy import Column, Integer, String, Time

from core.db.base import AbstractSQLModel


class Shift(AbstractSQLModel):
    __tablename__ = "turnos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    descripcion = Column(String(120), nullable=True)
    hora_inicio = Column(Time, nullable=False)
    # may be earlier than hora_inicio for overnight shifts
    hora_fin = Column(Time, nullable=False)
