import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from apps.settings import settings
from core.authentication.jwt.models import AccessToken, DecodedToken
from core.exceptions.authentication import UnauthorizedException

logger = logging.getLogger(__name__)


class JWTAuthClient:
    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_minutes: int = 60):
        """
        Issue and verify HMAC signed access tokens.

        Args:
            secret_key: Signing key
            algorithm: JOSE algorithm name
            expires_minutes: Token lifetime
        """
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def create_token(
        self, claims: Dict[str, Any], expires_minutes: Optional[int] = None
    ) -> AccessToken:
        lifetime = timedelta(minutes=expires_minutes or self.expires_minutes)
        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
        }
        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        return AccessToken(token=token, expires_in=int(lifetime.total_seconds()))

    def verify_token(self, token: str) -> DecodedToken:
        """
        Decode a token and validate its claims.

        Raises:
            UnauthorizedException: expired, tampered or malformed token
        """
        if token.startswith("Bearer "):
            token = token[7:]
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise UnauthorizedException(
                "Tu sesión ha expirado, inicia sesión nuevamente",
                error_code="TOKEN_EXPIRED",
                title="Token expirado",
            )
        except JWTError as e:
            logger.info("Rejected token: %s", e)
            raise UnauthorizedException(
                "El token proporcionado no es válido",
                error_code="TOKEN_INVALID",
                title="Token inválido",
            )
        try:
            return DecodedToken(**payload)
        except ValidationError:
            raise UnauthorizedException(
                "El token proporcionado no es válido",
                error_code="TOKEN_INVALID",
                title="Token inválido",
            )


def create_jwt_client() -> JWTAuthClient:
    return JWTAuthClient(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expires_minutes=settings.JWT_EXPIRES_MINUTES,
    )
