import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from loguru import logger

from src.bookstore.core.exceptions import BookStoreError
from src.bookstore.core.models.claims import AccessToken
from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.context import get_config

_RESERVED = frozenset({"iss", "sub", "aud", "exp", "iat", "nbf", "jti"})


class TokenConfigurationError(BookStoreError):
    status_code = 500


class JwtGeneratorService:
    """Service for generating JWT access tokens for API authentication."""

    def generate_jwt(
        self,
        subject: str,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int | None = None,
        include_jti: bool = True,
        secret: str | None = None,
    ) -> str:
        """Generate a signed JWT using authlib.

        Args:
            subject: Subject (sub) claim, the user id
            claims: Additional claims; registered claim names are ignored
            expires_in_seconds: Token lifetime (defaults to config)
            include_jti: Whether to include a unique JWT ID claim
            secret: Signing key override (defaults to config)

        Raises:
            TokenConfigurationError: If no secret or a disallowed algorithm is configured
        """
        config: ConfigData = get_config()
        jwt_cfg = config.jwt

        secret = secret or jwt_cfg.secret
        if not secret:
            raise TokenConfigurationError("JWT signing secret not configured")

        if jwt_cfg.algorithm not in jwt_cfg.allowed_algorithms:
            logger.debug(
                "Attempted to use disallowed algorithm: {}, only {} are allowed",
                jwt_cfg.algorithm,
                jwt_cfg.allowed_algorithms,
            )
            raise TokenConfigurationError(f"Algorithm {jwt_cfg.algorithm} not allowed")

        now = int(time.time())
        lifetime = (
            expires_in_seconds
            if expires_in_seconds is not None
            else jwt_cfg.access_token_ttl_seconds
        )
        payload: dict[str, Any] = {
            "iss": jwt_cfg.issuer,
            "sub": subject,
            "aud": jwt_cfg.audience,
            "exp": now + lifetime,
            "iat": now,
            "nbf": now,
        }
        if include_jti:
            payload["jti"] = generate_token(16)

        if claims:
            payload.update({k: v for k, v in claims.items() if k not in _RESERVED})

        header = {"alg": jwt_cfg.algorithm, "typ": "JWT"}
        try:
            token = jwt.encode(header, payload, secret)
        except JoseError as e:
            raise TokenConfigurationError(f"JWT encoding failed: {e}") from e

        return token.decode() if isinstance(token, bytes) else token

    def generate_access_token(
        self,
        user_id: str,
        role: str,
        username: str,
        expires_in_seconds: int | None = None,
    ) -> AccessToken:
        """Issue the bearer token handed out by the login endpoint."""
        lifetime = (
            expires_in_seconds
            if expires_in_seconds is not None
            else get_config().jwt.access_token_ttl_seconds
        )
        token = self.generate_jwt(
            subject=user_id,
            claims={"role": role, "username": username},
            expires_in_seconds=lifetime,
        )
        return AccessToken(access_token=token, expires_in=lifetime)
