"""Access token claim models."""

from typing import Any

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """Validated claims of an access token issued by this API."""

    subject: str = Field(description="User id (sub)")
    issuer: str = Field(description="Token issuer (iss)")
    audience: list[str] = Field(default_factory=list, description="Audiences (aud)")
    expires_at: int = Field(description="Expiry timestamp (exp)")
    issued_at: int | None = Field(default=None, description="Issue timestamp (iat)")
    jti: str | None = Field(default=None, description="Unique token id")
    role: str | None = Field(default=None, description="User role at issue time")
    username: str | None = Field(default=None, description="Username at issue time")
    custom_claims: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TokenClaims":
        aud = payload.get("aud") or []
        standard = {"sub", "iss", "aud", "exp", "iat", "nbf", "jti", "role", "username"}
        return cls(
            subject=str(payload["sub"]),
            issuer=str(payload["iss"]),
            audience=[aud] if isinstance(aud, str) else list(aud),
            expires_at=int(payload["exp"]),
            issued_at=int(payload["iat"]) if "iat" in payload else None,
            jti=payload.get("jti"),
            role=payload.get("role"),
            username=payload.get("username"),
            custom_claims={k: v for k, v in payload.items() if k not in standard},
        )


class AccessToken(BaseModel):
    """Bearer token returned to clients after a successful login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
