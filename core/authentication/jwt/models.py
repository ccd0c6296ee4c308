from typing import Optional

from pydantic import BaseModel, Field


class DecodedToken(BaseModel):
    """Claims carried by an access token"""

    id: int = Field(..., description="User ID")
    nombre: str = Field(..., description="Display name")
    correo: str = Field(..., description="User email")
    rol: Optional[str] = Field(None, description="Role name at issue time")
    iat: int = Field(..., description="Issued at")
    exp: int = Field(..., description="Expiration time")


class AccessToken(BaseModel):
    token: str
    expires_in: int = Field(..., description="Lifetime in seconds")
