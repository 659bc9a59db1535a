"""추천 기록 백엔드 API 클라이언트."""

from __future__ import annotations

import asyncio
from typing import Any
from urllib.parse import quote

import requests

from app.core.config import Settings, get_settings
from app.core.logger import get_logger
from app.core.timeout_policy import get_timeout_policy, to_requests_timeout

logger = get_logger(__name__)


class SuggestionApiError(RuntimeError):
    """추천 기록 조회가 최종 실패했을 때 발생하는 예외."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _is_retryable_request_error(exc: Exception) -> bool:
    """재시도 가능한 요청 예외인지 판별합니다."""
    if isinstance(exc, (requests.Timeout, requests.ConnectionError)):
        return True

    if isinstance(exc, requests.HTTPError):
        status_code = exc.response.status_code if exc.response is not None else None
        return status_code is None or status_code == 429 or status_code >= 500

    return False


class SuggestionClient:
    """`GET {base_url}/user/suggest/{member_id}` 호출 클라이언트."""

    _SUGGEST_PATH = "/user/suggest"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: int = 10,
        max_retries: int = 2,
        backoff_base_seconds: float = 0.5,
        backoff_max_seconds: float = 5.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._max_retries = max(0, int(max_retries))
        self._backoff_base_seconds = max(0.0, float(backoff_base_seconds))
        self._backoff_max_seconds = max(self._backoff_base_seconds, float(backoff_max_seconds))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SuggestionClient:
        """애플리케이션 설정으로 클라이언트를 생성합니다."""
        resolved_settings = settings or get_settings()
        timeout_policy = get_timeout_policy(resolved_settings)
        return cls(
            base_url=resolved_settings.SUGGESTION_API_BASE_URL,
            timeout_seconds=timeout_policy.suggestion_api_timeout_seconds,
            max_retries=resolved_settings.SUGGESTION_API_MAX_RETRIES,
            backoff_base_seconds=resolved_settings.SUGGESTION_API_BACKOFF_BASE_SECONDS,
            backoff_max_seconds=resolved_settings.SUGGESTION_API_BACKOFF_MAX_SECONDS,
        )

    def build_url(self, member_id: str) -> str:
        return f"{self._base_url}{self._SUGGEST_PATH}/{quote(member_id, safe='')}"

    async def fetch_user_suggestions(self, member_id: str, authorization: str | None = None) -> list[dict[str, Any]]:
        """사용자의 추천 기록 목록을 조회합니다.

        타임아웃, 연결 오류, 429, 5xx 응답은 지수 백오프로 재시도합니다.

        Raises:
            SuggestionApiError: 최종 실패 또는 응답이 목록이 아닌 경우.
        """
        url = self.build_url(member_id)
        headers = {"Content-Type": "application/json"}
        if authorization:
            headers["Authorization"] = authorization
        request_timeout = to_requests_timeout(self._timeout_seconds)
        max_attempts = 1 + self._max_retries

        def _send() -> requests.Response:
            return requests.get(url, headers=headers, timeout=request_timeout)

        for attempt in range(1, max_attempts + 1):
            try:
                response = await asyncio.to_thread(_send)
                response.raise_for_status()
                payload = response.json()
                break
            except ValueError as exc:
                raise SuggestionApiError(f"추천 기록 응답을 해석할 수 없습니다: {exc}") from exc
            except requests.RequestException as exc:
                is_retryable = _is_retryable_request_error(exc)
                status_code = None
                if isinstance(exc, requests.HTTPError) and exc.response is not None:
                    status_code = exc.response.status_code

                if attempt >= max_attempts or not is_retryable:
                    logger.error(
                        "Suggestion fetch failed permanently: attempts=%d url=%s status_code=%s retryable=%s error=%s",
                        attempt,
                        url,
                        status_code,
                        is_retryable,
                        exc,
                    )
                    raise SuggestionApiError("추천 기록 조회에 실패했습니다.", status_code=status_code) from exc

                delay = min(self._backoff_max_seconds, self._backoff_base_seconds * (2 ** (attempt - 1)))
                logger.warning(
                    "Suggestion fetch failed, retrying: attempt=%d/%d delay=%.2fs url=%s status_code=%s error=%s",
                    attempt,
                    max_attempts,
                    delay,
                    url,
                    status_code,
                    exc,
                )
                await asyncio.sleep(delay)

        if not isinstance(payload, list):
            raise SuggestionApiError("추천 기록 응답 형식이 올바르지 않습니다.")

        if attempt > 1:
            logger.info("Suggestion fetch succeeded after retry: attempt=%d/%d url=%s", attempt, max_attempts, url)
        return [item for item in payload if isinstance(item, dict)]
