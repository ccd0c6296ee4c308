# apps/api/employee/models.py

from datetime import time

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.mixins import TimestampsMixin


class Employee(AbstractSQLModel, TimestampsMixin):
    """Staff record attached to a user account."""

    __tablename__ = "empleados"

    id = Column(Integer, primary_key=True, autoincrement=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id"), unique=True, nullable=False)
    turno_id = Column(Integer, ForeignKey("turnos.id"), nullable=True, index=True)
    telefono = Column(String(30), nullable=True)
    direccion = Column(String(255), nullable=True)
    dpi = Column(String(20), unique=True, nullable=False)

    usuario = relationship("User", lazy="joined")
    turno = relationship("Shift", lazy="joined")

    @property
    def usuario_nombre(self) -> str | None:
        return self.usuario.nombre if self.usuario else None

    @property
    def usuario_correo(self) -> str | None:
        return self.usuario.correo if self.usuario else None

    @property
    def usuario_activo(self) -> bool | None:
        return self.usuario.activo if self.usuario else None

    @property
    def rol_nombre(self) -> str | None:
        return self.usuario.rol_nombre if self.usuario else None

    @property
    def turno_descripcion(self) -> str | None:
        return self.turno.descripcion if self.turno else None

    @property
    def hora_inicio(self) -> time | None:
        return self.turno.hora_inicio if self.turno else None

    @property
    def hora_fin(self) -> time | None:
        return self.turno.hora_fin if self.turno else None
