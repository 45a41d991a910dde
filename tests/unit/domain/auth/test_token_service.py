"""Unit tests for TokenService JWT creation and validation."""

from datetime import UTC, datetime

import jwt
import pytest

from hrm.config import JwtConfig
from hrm.domain.auth.service.token import TokenService

SECRET = "test-secret-key-256-bits-long-xx"


def make_service(secret: str = SECRET, audience: str = "authenticated") -> TokenService:
    config = JwtConfig(
        secret=secret,
        algorithm="HS256",
        audience=audience,
        access_token_expire_minutes=60,
    )
    return TokenService(_config=config)


class TestTokenService:
    def test_create_access_token_returns_valid_jwt(self):
        token = make_service().create_access_token("user_123", {"name": "Ada"})

        payload = jwt.decode(token, SECRET, algorithms=["HS256"], audience="authenticated")
        assert payload["sub"] == "user_123"
        assert payload["name"] == "Ada"
        assert payload["exp"] - payload["iat"] == 60 * 60
        assert "jti" in payload

    def test_jti_is_unique(self):
        service = make_service()

        first = service.validate_access_token(service.create_access_token("user_123"))
        second = service.validate_access_token(service.create_access_token("user_123"))

        assert first["jti"] != second["jti"]

    def test_validate_roundtrip(self):
        service = make_service()

        payload = service.validate_access_token(
            service.create_access_token("user_123", {"unsafe_metadata": {"role": "employee"}})
        )

        assert payload["unsafe_metadata"] == {"role": "employee"}

    def test_wrong_secret_is_rejected(self):
        token = make_service().create_access_token("user_123")

        with pytest.raises(jwt.InvalidSignatureError):
            make_service(secret="another-secret-key-256-bits-long").validate_access_token(token)

    def test_wrong_audience_is_rejected(self):
        token = make_service(audience="someone-else").create_access_token("user_123")

        with pytest.raises(jwt.InvalidAudienceError):
            make_service().validate_access_token(token)

    def test_expired_token_is_rejected(self):
        token = jwt.encode(
            {"sub": "user_123", "aud": "authenticated", "exp": datetime(2020, 1, 1, tzinfo=UTC)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(jwt.ExpiredSignatureError):
            make_service().validate_access_token(token)

    def test_token_without_subject_is_rejected(self):
        token = jwt.encode(
            {"aud": "authenticated", "exp": 4102444800},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(jwt.MissingRequiredClaimError):
            make_service().validate_access_token(token)

    def test_reserved_claims_cannot_be_overridden(self):
        with pytest.raises(ValueError, match="sub"):
            make_service().create_access_token("user_123", {"sub": "someone_else"})
