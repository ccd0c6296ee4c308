from fastapi import APIRouter

from apps.api.auth.dependency import OptionalUserDependency, UserDependency
from apps.api.auth.schema import (
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
)
from apps.api.auth.service import AuthServiceDependency
from apps.api.user.schema import UserResponse
from core.response.models import MessageResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", status_code=201, summary="Register a new user")
async def register(
    auth_service: AuthServiceDependency,
    caller: OptionalUserDependency,
    data: RegisterRequest,
) -> RegisterResponse:
    user = await auth_service.register(data, acting_user=caller)
    return RegisterResponse(
        mensaje="Usuario registrado exitosamente",
        usuario=UserResponse.model_validate(user),
    )


@router.post("/login", summary="Log in and obtain a bearer token")
async def login(
    auth_service: AuthServiceDependency,
    data: LoginRequest,
) -> LoginResponse:
    user, token = await auth_service.login(data)
    return LoginResponse(
        mensaje="Login exitoso",
        token=token.token,
        expira_en=token.expires_in,
        usuario=UserResponse.model_validate(user),
    )


@router.get("/perfil", summary="Profile of the authenticated user")
async def profile(user: UserDependency) -> ProfileResponse:
    return ProfileResponse(usuario=UserResponse.model_validate(user))


@router.post("/logout", summary="Record a logout")
async def logout(
    user: UserDependency,
    auth_service: AuthServiceDependency,
) -> MessageResponse:
    await auth_service.logout(user)
    return MessageResponse(mensaje="Sesión cerrada exitosamente")
