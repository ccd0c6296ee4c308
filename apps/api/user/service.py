# apps/api/user/service.py

import logging
from typing import Annotated, List, Optional

from sqlalchemy import select

from apps.api.user.models import Role, RoleName, User
from core.architecture.service import AbstractService
from core.db.core import SessionDep
from core.exceptions import ForbiddenException, NotFoundException

logger = logging.getLogger(__name__)


class UserService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session

    async def get_user(self, user_id: int) -> User:
        user = await self.session.get(User, user_id)
        if not user:
            raise NotFoundException(
                f"No existe un usuario con el ID {user_id}",
                error_code="USER_NOT_FOUND",
                title="Usuario no encontrado",
            )
        return user

    async def get_by_email(self, correo: str) -> Optional[User]:
        return await self.session.scalar(select(User).where(User.correo == correo))

    async def list_users(self, activo: Optional[bool] = None) -> List[User]:
        query = select(User).order_by(User.nombre)
        if activo is not None:
            query = query.where(User.activo == activo)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def set_active(self, user_id: int, activo: bool, acting_user: User) -> User:
        """Enable or disable a user account (admin only)."""
        user = await self.get_user(user_id)
        if user.id == acting_user.id and not activo:
            raise ForbiddenException(
                "No puedes desactivar tu propia cuenta",
                error_code="SELF_DEACTIVATION",
            )
        user.activo = activo
        await self.session.commit()
        logger.info("User %s active=%s by %s", user.id, activo, acting_user.id)
        return user

    async def get_role(self, rol_id: Optional[int] = None, nombre: Optional[RoleName] = None) -> Role:
        query = select(Role)
        if rol_id is not None:
            query = query.where(Role.id == rol_id)
        if nombre is not None:
            query = query.where(Role.nombre == nombre.value)
        role = await self.session.scalar(query)
        if not role:
            raise NotFoundException(
                "El rol indicado no existe",
                error_code="ROLE_NOT_FOUND",
                title="Rol no encontrado",
            )
        return role


UserServiceDependency = Annotated[UserService, UserService.get_dependency()]
