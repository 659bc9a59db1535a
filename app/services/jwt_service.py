"""사용자 JWT 발급 및 검증을 담당하는 서비스 모듈."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError

from app.core.config import Settings, get_settings
from app.schemas.jwt import UserTokenPayload


class JwtService:
    """사용자 토큰 서명/검증 유틸리티."""

    algorithm = "HS256"

    def __init__(self, settings: Settings | None = None):
        """환경 설정을 불러와 서명 시크릿과 만료 시간을 초기화한다."""
        resolved_settings = settings or get_settings()
        self.secret = resolved_settings.JWT_ACCESS_SECRET
        self.expires_delta = timedelta(minutes=resolved_settings.JWT_ACCESS_EXPIRY_MINUTES)

        if not self.secret:
            raise ValueError("JWT access secret is not set.")

    def sign_user_token(self, user_id: str, email: str | None = None, sub: str | None = None) -> str:
        """사용자 액세스 토큰을 생성한다."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": sub or user_id,
            "userId": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + self.expires_delta).timestamp()),
        }
        if email:
            payload["email"] = email
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_user_token(self, token: str) -> UserTokenPayload:
        """사용자 토큰을 검증하고 페이로드를 반환한다.

        Raises:
            ValueError: 서명/만료 오류 또는 필수 필드 누락 시.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise ValueError("Invalid token") from None

        try:
            return UserTokenPayload.model_validate(payload)
        except ValidationError:
            raise ValueError("Invalid user token payload.") from None
