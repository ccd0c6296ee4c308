# apps/api/access_history/models.py

from enum import Enum as PyEnum

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.fields import TZAwareDateTime
from core.db.mixins import utcnow


class AccessAction(str, PyEnum):
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"


class AccessHistory(AbstractSQLModel):
    """One row per login/logout or manually recorded access event."""

    __tablename__ = "historial_accesos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id"), nullable=False, index=True)
    accion = Column(String(100), nullable=False)
    fecha = Column(TZAwareDateTime(timezone=True), default=utcnow, nullable=False, index=True)

    usuario = relationship("User", lazy="joined")

    @property
    def usuario_nombre(self) -> str | None:
        return self.usuario.nombre if self.usuario else None

    @property
    def usuario_correo(self) -> str | None:
        return self.usuario.correo if self.usuario else None
