from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.authentication.jwt.client import create_jwt_client
from core.authentication.jwt.models import DecodedToken
from core.exceptions.authentication import ForbiddenException

jwt_client = create_jwt_client()

http_bearer = HTTPBearer(auto_error=False)


async def jwt_authenticate(
    token: Annotated[Optional[HTTPAuthorizationCredentials], Depends(http_bearer)],
) -> DecodedToken:
    if not token or not token.credentials:
        raise ForbiddenException(
            "Debes incluir el header Authorization con el token",
            error_code="TOKEN_MISSING",
            title="Token no proporcionado",
        )
    return jwt_client.verify_token(token.credentials)


JWTAuthDependency = Annotated[DecodedToken, Depends(jwt_authenticate)]


async def jwt_authenticate_optional(
    token: Annotated[Optional[HTTPAuthorizationCredentials], Depends(http_bearer)],
) -> Optional[DecodedToken]:
    if not token or not token.credentials:
        return None
    return jwt_client.verify_token(token.credentials)


OptionalJWTAuthDependency = Annotated[
    Optional[DecodedToken], Depends(jwt_authenticate_optional)
]
