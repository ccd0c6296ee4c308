# apps/api/auth/dependency.py

from typing import Annotated, Callable, Optional

from fastapi import Depends
from sqlalchemy import select

from apps.api.user.models import RoleName, User
from apps.context import set_current_user_id
from core.authentication.jwt.dependency import JWTAuthDependency, OptionalJWTAuthDependency
from core.db.core import SessionDep
from core.exceptions.authentication import ForbiddenException, UnauthorizedException


async def get_current_user(session: SessionDep, decoded_token: JWTAuthDependency) -> User:
    user = await session.scalar(select(User).where(User.id == decoded_token.id))
    if not user:
        raise UnauthorizedException(
            "El usuario del token ya no existe",
            error_code="USER_NOT_FOUND",
            title="No autenticado",
        )
    if not user.activo:
        raise ForbiddenException(
            "Tu cuenta ha sido desactivada. Contacta al administrador",
            error_code="USER_INACTIVE",
            title="Usuario inactivo",
        )
    # used to stamp log records of the current request with the caller id
    set_current_user_id(user.id)
    return user


UserDependency = Annotated[User, Depends(get_current_user)]


async def get_optional_user(
    session: SessionDep, decoded_token: OptionalJWTAuthDependency
) -> Optional[User]:
    if decoded_token is None:
        return None
    return await get_current_user(session, decoded_token)


OptionalUserDependency = Annotated[Optional[User], Depends(get_optional_user)]


def require_roles(*roles: RoleName) -> Callable:
    """
    Build a dependency that admits only users holding one of ``roles``.

    The role is read from the stored user row, never from the token claims,
    so a role change takes effect on the next request.
    """
    allowed = ", ".join(role.value for role in roles)

    async def role_policy(user: UserDependency) -> User:
        if not user.has_role(*roles):
            raise ForbiddenException(
                f"Esta acción requiere uno de estos roles: {allowed}",
                error_code="ROLE_NOT_ALLOWED",
            )
        return user

    return role_policy


AdminUserDependency = Annotated[User, Depends(require_roles(RoleName.ADMIN))]

StaffUserDependency = Annotated[
    User, Depends(require_roles(RoleName.ADMIN, RoleName.OPERATOR))
]
