import time

import pytest
from authlib.jose import jwt
from fastapi import HTTPException

from src.bookstore.core.services.jwt import (
    JwtGeneratorService,
    JwtVerificationService,
    TokenConfigurationError,
)
from src.bookstore.runtime.config.config_data import ConfigData, JWTConfig
from src.bookstore.runtime.context import get_config, with_context


class TestJwtServices:
    """Issue and validate access tokens."""

    def test_generate_verify_roundtrip(self):
        token = JwtGeneratorService().generate_access_token(
            user_id="user-123", role="admin", username="root"
        )

        claims = JwtVerificationService().verify_jwt(token.access_token)

        assert token.token_type == "bearer"
        assert token.expires_in == get_config().jwt.access_token_ttl_seconds
        assert claims.subject == "user-123"
        assert claims.role == "admin"
        assert claims.username == "root"
        assert claims.issuer == get_config().jwt.issuer
        assert claims.audience == [get_config().jwt.audience]
        assert claims.jti is not None

    def test_custom_claims_and_secret(self):
        token = JwtGeneratorService().generate_jwt(
            subject="user-456",
            claims={"department": "fiction", "sub": "ignored"},
            include_jti=False,
            secret="another-secret",
        )

        claims = JwtVerificationService().verify_jwt(token, key="another-secret")

        assert claims.subject == "user-456"
        assert claims.jti is None
        assert claims.custom_claims == {"department": "fiction"}

    def test_wrong_key_rejected(self):
        token = JwtGeneratorService().generate_jwt(subject="u", secret="one")

        with pytest.raises(HTTPException) as exc_info:
            JwtVerificationService().verify_jwt(token, key="two")
        assert exc_info.value.status_code == 401

    def test_expired_token_rejected(self):
        token = JwtGeneratorService().generate_jwt(subject="u", expires_in_seconds=-600)

        with pytest.raises(HTTPException) as exc_info:
            JwtVerificationService().verify_jwt(token)
        assert exc_info.value.status_code == 401

    def test_wrong_audience_rejected(self):
        cfg = get_config().jwt
        now = int(time.time())
        token = jwt.encode(
            {"alg": "HS256"},
            {"iss": cfg.issuer, "aud": "someone-else", "sub": "u", "exp": now + 60},
            cfg.secret,
        ).decode()

        with pytest.raises(HTTPException) as exc_info:
            JwtVerificationService().verify_jwt(token)
        assert exc_info.value.status_code == 401

    def test_wrong_issuer_rejected(self):
        with with_context(ConfigData(jwt=JWTConfig(secret="k", issuer="elsewhere"))):
            token = JwtGeneratorService().generate_jwt(subject="u")

        with pytest.raises(HTTPException):
            JwtVerificationService().verify_jwt(token, key="k")

    def test_garbage_token_rejected(self):
        with pytest.raises(HTTPException) as exc_info:
            JwtVerificationService().verify_jwt("not-a-jwt")
        assert exc_info.value.status_code == 401

    def test_missing_secret(self):
        with with_context(ConfigData(jwt=JWTConfig(secret=""))):
            with pytest.raises(TokenConfigurationError):
                JwtGeneratorService().generate_jwt(subject="u")

    def test_disallowed_algorithm(self):
        config = ConfigData(jwt=JWTConfig(algorithm="none", allowed_algorithms=["HS256"]))
        with with_context(config):
            with pytest.raises(TokenConfigurationError):
                JwtGeneratorService().generate_jwt(subject="u")
