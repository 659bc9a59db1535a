"""사용자 JWT 서비스 테스트."""

from __future__ import annotations

import jwt
import pytest

from app.core.config import Settings
from app.services.jwt_service import JwtService


def _settings(**overrides) -> Settings:
    values = {
        "SERVICE_SECRET": "test-service-secret",
        "JWT_ACCESS_SECRET": "test-secret",
        "JWT_ACCESS_EXPIRY_MINUTES": 30,
    }
    values.update(overrides)
    return Settings(**values)


def test_sign_and_verify_user_token() -> None:
    service = JwtService(_settings())

    token = service.sign_user_token("user-1", email="user@example.com")
    payload = service.verify_user_token(token)

    assert payload.user_id == "user-1"
    assert payload.sub == "user-1"
    assert payload.email == "user@example.com"


def test_verify_rejects_token_signed_with_other_secret() -> None:
    token = JwtService(_settings(JWT_ACCESS_SECRET="other-secret")).sign_user_token("user-1")

    with pytest.raises(ValueError):
        JwtService(_settings()).verify_user_token(token)


def test_verify_rejects_payload_without_user_id() -> None:
    token = jwt.encode({"sub": "user-1"}, "test-secret", algorithm="HS256")

    with pytest.raises(ValueError):
        JwtService(_settings()).verify_user_token(token)


def test_expired_token_is_rejected() -> None:
    token = jwt.encode({"sub": "u", "userId": "u", "exp": 1}, "test-secret", algorithm="HS256")

    with pytest.raises(ValueError):
        JwtService(_settings()).verify_user_token(token)


def test_missing_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        JwtService(_settings(JWT_ACCESS_SECRET=""))
