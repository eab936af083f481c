"""JWT verification service."""

from authlib.jose import JoseError, JsonWebToken
from fastapi import HTTPException
from loguru import logger

from src.bookstore.core.models.claims import TokenClaims
from src.bookstore.runtime.context import get_config


class JwtVerificationService:
    def verify_jwt(self, token: str, *, key: str | None = None) -> TokenClaims:
        """Verify signature, issuer, audience and lifetime of an access token.

        Raises:
            HTTPException: 401 for any invalid token, 500 if no key is configured
        """
        cfg = get_config()
        verification_key = key or cfg.jwt.secret
        if not verification_key:
            raise HTTPException(status_code=500, detail="JWT signing secret not configured")

        claims_options = {
            "iss": {"essential": True, "values": [cfg.jwt.issuer]},
            "aud": {"essential": True, "values": [cfg.jwt.audience]},
            "sub": {"essential": True},
            "exp": {"essential": True},
        }

        # alg allowlist is enforced by the JsonWebToken instance
        decoder = JsonWebToken(cfg.jwt.allowed_algorithms)
        try:
            claims = decoder.decode(token, verification_key, claims_options=claims_options)
            claims.validate(leeway=cfg.jwt.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug("Rejected access token: {}", exc)
            raise HTTPException(status_code=401, detail=f"JWT error: {exc}") from exc

        return TokenClaims.from_payload(dict(claims))
