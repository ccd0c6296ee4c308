# apps/api/reservation/models.py

from enum import Enum as PyEnum

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.fields import TZAwareDateTime
from core.db.mixins import utcnow


class ReservationStatus(str, PyEnum):
    ACTIVE = "ACTIVA"
    FINISHED = "FINALIZADA"
    CANCELLED = "CANCELADA"


class Reservation(AbstractSQLModel):
    __tablename__ = "reservas"
    __table_args__ = (
        CheckConstraint(
            "estado IN ('ACTIVA', 'FINALIZADA', 'CANCELADA')", name="estado_valido"
        ),
        CheckConstraint("fecha_fin > fecha_inicio", name="rango_valido"),
        Index("ix_reservas_espacio_estado", "espacio_id", "estado"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=False, index=True)
    espacio_id = Column(Integer, ForeignKey("espacios.id"), nullable=False)
    fecha_reserva = Column(TZAwareDateTime(timezone=True), default=utcnow, nullable=False)
    fecha_inicio = Column(TZAwareDateTime(timezone=True), nullable=False)
    fecha_fin = Column(TZAwareDateTime(timezone=True), nullable=False)
    estado = Column(String(12), default=ReservationStatus.ACTIVE.value, nullable=False)

    cliente = relationship("Client", lazy="joined")
    espacio = relationship("Space", lazy="joined")

    @property
    def is_active(self) -> bool:
        return self.estado == ReservationStatus.ACTIVE.value

    @property
    def cliente_nombre(self):
        return self.cliente.nombre if self.cliente else None

    @property
    def cliente_telefono(self):
        return self.cliente.telefono if self.cliente else None

    @property
    def espacio_codigo(self):
        return self.espacio.codigo if self.espacio else None

    @property
    def zona_nombre(self):
        return self.espacio.zona_nombre if self.espacio else None
