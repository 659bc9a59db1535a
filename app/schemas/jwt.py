"""`JWT` 토큰 페이로드 스키마 정의."""

from pydantic import BaseModel, ConfigDict, Field


class UserTokenPayload(BaseModel):
    """일반 사용자용 `JWT` 페이로드."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sub: str = Field(..., description="토큰 subject (일반적으로 사용자 UUID)")
    user_id: str = Field(..., alias="userId", description="사용자 식별자 (추천 기록 조회 키)")
    email: str | None = Field(default=None, description="사용자 이메일")
    iat: int | None = Field(None, description="발급 시각(Unix timestamp, seconds)")
    exp: int | None = Field(None, description="만료 시각(Unix timestamp, seconds)")
