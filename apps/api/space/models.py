# apps/api/space/models.py

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel


class Space(AbstractSQLModel):
    __tablename__ = "espacios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    zona_id = Column(Integer, ForeignKey("zonas.id"), nullable=False)
    codigo = Column(String(20), unique=True, nullable=False)
    disponible = Column(Boolean, default=True, nullable=False)

    zona = relationship("Zone", back_populates="espacios", lazy="joined")
    tickets = relationship("Ticket", back_populates="espacio", passive_deletes=True)

    @property
    def zona_nombre(self) -> str | None:
        return self.zona.nombre if self.zona else None
