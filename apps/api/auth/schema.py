from typing import Optional

from pydantic import EmailStr, Field

from apps.api.user.schema import UserResponse
from core.response.models import CustomBaseModel


class RegisterRequest(CustomBaseModel):
    nombre: str = Field(..., min_length=1, max_length=120)
    correo: EmailStr = Field(...)
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=6, max_length=72)
    rol_id: Optional[int] = Field(None, description="Honored only when an ADMIN registers the user")


class LoginRequest(CustomBaseModel):
    correo: EmailStr = Field(...)
    password: str = Field(..., min_length=1, max_length=72)


class RegisterResponse(CustomBaseModel):
    mensaje: str
    usuario: UserResponse


class LoginResponse(CustomBaseModel):
    mensaje: str
    token: str
    expira_en: int = Field(..., description="Token lifetime in seconds")
    usuario: UserResponse


class ProfileResponse(CustomBaseModel):
    usuario: UserResponse
