"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_MAX_TEXT_LENGTH = 20000


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    SERVICE_SECRET: str
    JWT_ACCESS_SECRET: str
    JWT_ACCESS_EXPIRY_MINUTES: int = 60
    SUGGESTION_API_BASE_URL: str = "http://localhost:8080"
    REQUEST_TIMEOUT_SECONDS: int = 30
    EXTERNAL_API_TIMEOUT_SECONDS: int = 15
    SUGGESTION_API_TIMEOUT_SECONDS: int = 10
    SUGGESTION_API_MAX_RETRIES: int = 2
    SUGGESTION_API_BACKOFF_BASE_SECONDS: float = 0.5
    SUGGESTION_API_BACKOFF_MAX_SECONDS: float = 5.0
    ITINERARY_MAX_TEXT_LENGTH: int = _DEFAULT_MAX_TEXT_LENGTH
    APP_ENV: str = "development"
    DOCS_MODE: str = "disabled"
    EXPOSE_INTERNAL_ERRORS: bool = False
    CORS_ALLOW_ORIGINS: str = ""
    CORS_ALLOW_METHODS: str = "GET,POST,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Authorization,Content-Type,x-service-secret"
    CORS_ALLOW_CREDENTIALS: bool = False
    SECURITY_HEADERS_ENABLED: bool = True
    ENABLE_HSTS: bool = False
    HSTS_MAX_AGE_SECONDS: int = 31536000
    PROXY_HEADERS_ENABLED: bool = True
    PROXY_TRUSTED_HOSTS: str = "127.0.0.1"
    TRUSTED_HOSTS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ITINERARY_MAX_TEXT_LENGTH", mode="before")
    @classmethod
    def _clamp_itinerary_max_text_length(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else _DEFAULT_MAX_TEXT_LENGTH
        except (TypeError, ValueError):
            numeric = _DEFAULT_MAX_TEXT_LENGTH
        return min(200000, max(1000, numeric))

    @field_validator("SUGGESTION_API_MAX_RETRIES", mode="before")
    @classmethod
    def _clamp_suggestion_api_max_retries(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 2
        except (TypeError, ValueError):
            numeric = 2
        return min(5, max(0, numeric))


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
