# apps/api/fine/models.py

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.fields import TZAwareDateTime
from core.db.mixins import utcnow


class Fine(AbstractSQLModel):
    __tablename__ = "multas"
    __table_args__ = (CheckConstraint("monto > 0", name="monto_positivo"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, index=True)
    motivo = Column(String(255), nullable=False)
    monto = Column(Numeric(10, 2), nullable=False)
    fecha = Column(TZAwareDateTime(timezone=True), default=utcnow, nullable=False)

    ticket = relationship("Ticket", back_populates="multas", lazy="joined")

    @property
    def placa(self):
        return self.ticket.placa if self.ticket else None

    @property
    def cliente_nombre(self):
        return self.ticket.cliente_nombre if self.ticket else None

    @property
    def ticket_estado(self):
        return self.ticket.estado if self.ticket else None
