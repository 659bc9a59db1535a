"""애플리케이션 준비성(readiness) 체크 유틸."""

from __future__ import annotations

import asyncio
import socket
from urllib.parse import urlparse

from app.core.config import Settings, get_settings
from app.core.timeout_policy import TimeoutPolicy, get_timeout_policy

ReadinessCheck = dict[str, str | bool]

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _ok(detail: str, *, required: bool = True) -> ReadinessCheck:
    return {"status": "ok", "ok": True, "required": required, "detail": detail}


def _fail(detail: str, *, required: bool = True) -> ReadinessCheck:
    return {"status": "fail", "ok": False, "required": required, "detail": detail}


def _resolve_host_port(base_url: str) -> tuple[str, int] | None:
    parsed = urlparse(base_url)
    host = parsed.hostname
    if not host:
        return None
    try:
        port = parsed.port or _DEFAULT_PORTS.get(parsed.scheme.lower(), 80)
    except ValueError:
        return None
    return host, int(port)


async def _check_tcp_connectivity(host: str, port: int, timeout_seconds: int, label: str) -> ReadinessCheck:
    def _connect() -> None:
        with socket.create_connection((host, port), timeout=timeout_seconds):
            return None

    try:
        await asyncio.to_thread(_connect)
        return _ok(f"{label} 연결 가능 ({host}:{port})")
    except OSError as exc:
        return _fail(f"{label} 연결 실패 ({host}:{port}): {exc}")


def _check_secrets(settings: Settings) -> ReadinessCheck:
    missing = [name for name in ("SERVICE_SECRET", "JWT_ACCESS_SECRET") if not getattr(settings, name)]
    if missing:
        return _fail(f"필수 시크릿이 설정되지 않았습니다: {', '.join(missing)}")
    return _ok("필수 시크릿 설정 확인 완료")


async def _check_suggestion_api_readiness(settings: Settings, timeout_policy: TimeoutPolicy) -> ReadinessCheck:
    base_url = (settings.SUGGESTION_API_BASE_URL or "").strip()
    if not base_url:
        return _fail("SUGGESTION_API_BASE_URL이 설정되지 않았습니다.", required=False)

    host_port = _resolve_host_port(base_url)
    if host_port is None:
        return _fail("SUGGESTION_API_BASE_URL에서 호스트를 파싱할 수 없습니다.", required=False)

    host, port = host_port
    check = await _check_tcp_connectivity(
        host=host,
        port=port,
        timeout_seconds=timeout_policy.suggestion_api_timeout_seconds,
        label="추천 기록 API",
    )
    # 파싱 API는 백엔드 없이도 동작하므로 선택 항목으로 취급
    check["required"] = False
    return check


async def collect_readiness_status() -> dict[str, object]:
    """설정/외부 API 의존성 준비 상태를 점검합니다."""
    settings = get_settings()
    timeout_policy = get_timeout_policy(settings)

    checks: dict[str, ReadinessCheck] = {
        "secrets": _check_secrets(settings),
        "suggestion_api": await _check_suggestion_api_readiness(settings, timeout_policy),
    }
    required_checks_ok = all(bool(check["ok"]) for check in checks.values() if bool(check.get("required", True)))

    return {
        "status": "ready" if required_checks_ok else "not_ready",
        "checks": checks,
    }
