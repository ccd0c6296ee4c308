# apps/api/role/service.py

import logging
from typing import Annotated, List, Optional

from sqlalchemy import func, select

from apps.api.role.schema import RoleCreate, RoleDetail, RoleMember, RoleSummary, RoleUpdate
from apps.api.user.models import Role, RoleName, User
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import (
    ConflictException,
    ForbiddenException,
    InvalidRequestException,
    NotFoundException,
)

logger = logging.getLogger(__name__)

# role checks compare against these names
SYSTEM_ROLES = {role.value for role in RoleName}


class RoleService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_role(self, role_id: int) -> Role:
        role = await self.session.get(Role, role_id)
        if not role:
            raise NotFoundException(
                f"No existe un rol con el ID {role_id}",
                error_code="ROLE_NOT_FOUND",
                title="Rol no encontrado",
            )
        return role

    async def list_roles(self) -> List[RoleSummary]:
        query = (
            select(Role, func.count(User.id))
            .outerjoin(User, User.rol_id == Role.id)
            .group_by(Role.id)
            .order_by(Role.nombre)
        )
        result = await self.session.execute(query)
        return [
            RoleSummary(
                id=role.id,
                nombre=role.nombre,
                descripcion=role.descripcion,
                total_usuarios=total,
            )
            for role, total in result.all()
        ]

    async def get_role_detail(self, role_id: int) -> RoleDetail:
        """A role together with the users holding it."""
        role = await self.get_role(role_id)
        result = await self.session.execute(
            select(User).where(User.rol_id == role_id).order_by(User.nombre)
        )
        users = list(result.scalars().unique().all())
        return RoleDetail(
            id=role.id,
            nombre=role.nombre,
            descripcion=role.descripcion,
            total_usuarios=len(users),
            usuarios=[RoleMember.model_validate(u) for u in users],
        )

    async def _ensure_unique_name(self, nombre: str, exclude_id: Optional[int] = None):
        query = select(Role.id).where(Role.nombre == nombre)
        if exclude_id is not None:
            query = query.where(Role.id != exclude_id)
        if await self.session.scalar(query):
            raise ConflictException(
                f"Ya existe un rol con el nombre: {nombre}",
                error_code="ROLE_EXISTS",
                title="Rol ya existe",
            )

    async def create_role(self, data: RoleCreate) -> Role:
        await self._ensure_unique_name(data.nombre)
        role = Role(**data.model_dump())
        self.session.add(role)
        await self.session.commit()
        await self.session.refresh(role)
        logger.info("Created role %s", role.nombre)
        return role

    async def update_role(self, role_id: int, data: RoleUpdate) -> Role:
        role = await self.get_role(role_id)
        values = data.model_dump(exclude_unset=True)
        nombre = values.get("nombre")
        if nombre is not None and nombre != role.nombre:
            if role.nombre in SYSTEM_ROLES:
                raise ForbiddenException(
                    "No se puede renombrar un rol del sistema",
                    error_code="SYSTEM_ROLE",
                    title="Rol del sistema",
                )
            await self._ensure_unique_name(nombre, exclude_id=role_id)
        for field, value in values.items():
            if field == "nombre" and value is None:
                continue
            setattr(role, field, value)
        await self.session.commit()
        await self.session.refresh(role)
        return role

    async def delete_role(self, role_id: int) -> None:
        """Delete a custom role nobody holds."""
        role = await self.get_role(role_id)
        if role.nombre in SYSTEM_ROLES:
            raise ForbiddenException(
                "No se pueden eliminar roles del sistema",
                error_code="SYSTEM_ROLE",
                title="No se puede eliminar",
            )
        users = await self.session.scalar(
            select(func.count(User.id)).where(User.rol_id == role_id)
        )
        if users:
            raise InvalidRequestException(
                f"El rol tiene {users} usuario(s) asignado(s). "
                "Reasigne los usuarios antes de eliminar el rol.",
                error_code="ROLE_HAS_USERS",
                title="No se puede eliminar",
            )
        await self.session.delete(role)
        await self.session.commit()
        logger.info("Deleted role %s", role_id)


RoleServiceDependency = Annotated[RoleService, RoleService.get_dependency()]
