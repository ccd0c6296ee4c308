# apps/api/payment/models.py

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.fields import TZAwareDateTime
from core.db.mixins import utcnow


class Payment(AbstractSQLModel):
    __tablename__ = "pagos"
    __table_args__ = (CheckConstraint("monto > 0", name="monto_positivo"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    # unique: at most one payment per ticket, also under concurrent requests
    ticket_id = Column(Integer, ForeignKey("tickets.id"), unique=True, nullable=False)
    tipo_pago_id = Column(Integer, ForeignKey("tipos_pago.id"), nullable=False)
    monto = Column(Numeric(10, 2), nullable=False)
    fecha_pago = Column(TZAwareDateTime(timezone=True), default=utcnow, nullable=False)

    ticket = relationship("Ticket", lazy="joined")
    tipo_pago = relationship("PaymentType", back_populates="pagos", lazy="joined")

    @property
    def tipo_pago_nombre(self):
        return self.tipo_pago.nombre if self.tipo_pago else None

    @property
    def placa(self):
        return self.ticket.placa if self.ticket else None

    @property
    def marca(self):
        return self.ticket.marca if self.ticket else None

    @property
    def modelo(self):
        return self.ticket.modelo if self.ticket else None

    @property
    def cliente_nombre(self):
        return self.ticket.cliente_nombre if self.ticket else None

    @property
    def hora_entrada(self):
        return self.ticket.hora_entrada if self.ticket else None

    @property
    def hora_salida(self):
        return self.ticket.hora_salida if self.ticket else None

    @property
    def tarifa_descripcion(self):
        return self.ticket.tarifa_descripcion if self.ticket else None

    @property
    def precio_hora(self):
        return self.ticket.precio_hora if self.ticket else None
