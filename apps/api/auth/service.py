# apps/api/auth/service.py

import logging
from typing import Annotated, Optional, Tuple

from apps.api.access_history.models import AccessAction
from apps.api.access_history.service import AccessHistoryService
from apps.api.auth.schema import LoginRequest, RegisterRequest
from apps.api.user.models import RoleName, User
from apps.api.user.service import UserService
from core.architecture.service import AbstractService
from core.authentication.jwt.client import create_jwt_client
from core.authentication.jwt.models import AccessToken
from core.authentication.passwords import hash_password, verify_password
from core.db.core import SessionDep
from core.exceptions import ConflictException, ForbiddenException, UnauthorizedException

logger = logging.getLogger(__name__)

jwt_client = create_jwt_client()


class AuthService(AbstractService):
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: SessionDep, **kwargs):
        super().__init__(session=session, **kwargs)
        self.session = session
        self.users = UserService(session=session)
        self.history = AccessHistoryService(session=session)

    async def register(self, data: RegisterRequest, acting_user: Optional[User] = None) -> User:
        """
        Create an account.

        Only an authenticated ADMIN may choose the role; everyone else is
        registered as CLIENTE whatever ``rol_id`` says.
        """
        if await self.users.get_by_email(data.correo):
            raise ConflictException(
                "Ya existe un usuario con este correo electrónico",
                error_code="EMAIL_ALREADY_REGISTERED",
                title="Correo ya registrado",
            )
        is_admin = acting_user is not None and acting_user.has_role(RoleName.ADMIN)
        if data.rol_id is not None and is_admin:
            role = await self.users.get_role(rol_id=data.rol_id)
        else:
            if data.rol_id is not None:
                logger.warning(
                    "Ignoring rol_id %s on self registration of %s", data.rol_id, data.correo
                )
            role = await self.users.get_role(nombre=RoleName.CLIENT)

        user = User(
            nombre=data.nombre,
            correo=data.correo,
            password=hash_password(data.password),
            rol_id=role.id,
            activo=True,
        )
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        logger.info("Registered user %s with role %s", user.id, role.nombre)
        return user

    async def login(self, data: LoginRequest) -> Tuple[User, AccessToken]:
        """
        Check credentials, issue a token and record the login.

        Unknown email and wrong password produce the same error so the
        endpoint does not reveal which accounts exist.
        """
        user = await self.users.get_by_email(data.correo)
        if not user or not verify_password(data.password, user.password):
            raise UnauthorizedException(
                "Correo o contraseña incorrectos",
                error_code="INVALID_CREDENTIALS",
                title="Credenciales inválidas",
            )
        if not user.activo:
            raise ForbiddenException(
                "Tu cuenta ha sido desactivada. Contacta al administrador",
                error_code="USER_INACTIVE",
                title="Usuario inactivo",
            )

        token = jwt_client.create_token(
            {
                "id": user.id,
                "nombre": user.nombre,
                "correo": user.correo,
                "rol": user.rol_nombre,
            }
        )
        await self.history.record(user.id, AccessAction.LOGIN.value)
        logger.info("User %s logged in", user.id)
        return user, token

    async def logout(self, user: User) -> None:
        await self.history.record(user.id, AccessAction.LOGOUT.value)
        logger.info("User %s logged out", user.id)


AuthServiceDependency = Annotated[AuthService, AuthService.get_dependency()]
