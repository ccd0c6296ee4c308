# apps/api/user/models.py

from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.db.base import AbstractSQLModel
from core.db.fields import TZAwareDateTime
from core.db.mixins import utcnow


class RoleName(str, PyEnum):
    ADMIN = "ADMIN"
    OPERATOR = "OPERADOR"
    CLIENT = "CLIENTE"


# -------------------------
# 1. Role Model
# -------------------------
class Role(AbstractSQLModel):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(50), unique=True, nullable=False)
    descripcion = Column(String(255), nullable=True)

    usuarios = relationship("User", back_populates="rol", passive_deletes=True)


# -------------------------
# 2. User Model
# -------------------------
class User(AbstractSQLModel):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(120), nullable=False)
    correo = Column(String(120), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    rol_id = Column(Integer, ForeignKey("roles.id"), nullable=False)
    activo = Column(Boolean, default=True, nullable=False)
    fecha_creacion = Column(TZAwareDateTime(timezone=True), default=utcnow, nullable=False)

    rol = relationship("Role", back_populates="usuarios", lazy="joined")

    @property
    def rol_nombre(self) -> str | None:
        return self.rol.nombre if self.rol else None

    def has_role(self, *roles: RoleName) -> bool:
        return self.rol_nombre in {role.value for role in roles}
