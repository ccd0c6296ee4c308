# apps/api/ticket/models.py

from enum import Enum as PyEnum

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.fields import TZAwareDateTime
from core.db.mixins import utcnow


class TicketStatus(str, PyEnum):
    ACTIVE = "ACTIVO"
    CLOSED = "CERRADO"


ACTIVE_ONLY = text("estado = 'ACTIVO'")


# -------------------------
# 1. Ticket Model
# -------------------------
class Ticket(AbstractSQLModel):
    __tablename__ = "tickets"
    __table_args__ = (
        CheckConstraint("estado IN ('ACTIVO', 'CERRADO')", name="estado_valido"),
        CheckConstraint(
            "(estado = 'ACTIVO' AND hora_salida IS NULL) "
            "OR (estado = 'CERRADO' AND hora_salida IS NOT NULL)",
            name="salida_segun_estado",
        ),
        # one open ticket per vehicle and per space
        Index(
            "uq_tickets_vehiculo_activo",
            "vehiculo_id",
            unique=True,
            postgresql_where=ACTIVE_ONLY,
            sqlite_where=ACTIVE_ONLY,
        ),
        Index(
            "uq_tickets_espacio_activo",
            "espacio_id",
            unique=True,
            postgresql_where=ACTIVE_ONLY,
            sqlite_where=ACTIVE_ONLY,
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehiculo_id = Column(Integer, ForeignKey("vehiculos.id"), nullable=False, index=True)
    espacio_id = Column(Integer, ForeignKey("espacios.id"), nullable=False, index=True)
    empleado_id = Column(Integer, ForeignKey("usuarios.id"), nullable=False)
    tarifa_id = Column(Integer, ForeignKey("tarifas.id"), nullable=False)
    hora_entrada = Column(TZAwareDateTime(timezone=True), default=utcnow, nullable=False)
    hora_salida = Column(TZAwareDateTime(timezone=True), nullable=True)
    estado = Column(String(10), default=TicketStatus.ACTIVE.value, nullable=False)

    vehiculo = relationship("Vehicle", back_populates="tickets", lazy="joined")
    espacio = relationship("Space", back_populates="tickets", lazy="joined")
    tarifa = relationship("Tariff", back_populates="tickets", lazy="joined")
    empleado = relationship("User", lazy="joined")
    multas = relationship("Fine", back_populates="ticket", passive_deletes=True)

    @property
    def is_active(self) -> bool:
        return self.estado == TicketStatus.ACTIVE.value

    @property
    def placa(self):
        return self.vehiculo.placa if self.vehiculo else None

    @property
    def marca(self):
        return self.vehiculo.marca if self.vehiculo else None

    @property
    def modelo(self):
        return self.vehiculo.modelo if self.vehiculo else None

    @property
    def color(self):
        return self.vehiculo.color if self.vehiculo else None

    @property
    def cliente_nombre(self):
        return self.vehiculo.cliente_nombre if self.vehiculo else None

    @property
    def espacio_codigo(self):
        return self.espacio.codigo if self.espacio else None

    @property
    def zona_nombre(self):
        return self.espacio.zona_nombre if self.espacio else None

    @property
    def tarifa_descripcion(self):
        return self.tarifa.descripcion if self.tarifa else None

    @property
    def precio_hora(self):
        return self.tarifa.precio_hora if self.tarifa else None

    @property
    def empleado_nombre(self):
        return self.empleado.nombre if self.empleado else None
