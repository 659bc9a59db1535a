"""시간 라벨과 본문에서 시작/종료 시각, 제목, 설명을 도출합니다.

생성기가 내보내는 시간 표기는 여러 형태가 섞여 있습니다.

- ``("09:00", "제목")``
- ``("09:00 10:30", "제목")``
- ``("", "~20:00 - 제목")``
- ``("18:00", "18:00 ~ 20:00 - 제목")``

규칙은 순서대로 적용되며, 본문 안의 명시적인 시간 범위나 굵은 글씨처럼
더 강한 근거가 있을 때만 앞선 추론을 덮어씁니다.
"""

from __future__ import annotations

import re

from app.itinerary.normalizer import normalize_line
from app.itinerary.patterns import TIME_TOKEN
from app.schemas.itinerary import TimeDisplay, TimeItem

_LEADING_DOLLAR = re.compile(r"^\$\s+")
_LEADING_TILDE_TIME = re.compile(r"^\s*~\s*(\d{1,2}:\d{2})")
_LEADING_TILDE_PREFIX = re.compile(r"^\s*~\s*\d{1,2}:\d{2}\s*-?\s*")
_INLINE_RANGE = re.compile(r"^\s*(\d{1,2}:\d{2})\s*~\s*(\d{1,2}:\d{2})\s*-?\s*(.*)$")
_BOLD = re.compile(r"\*\*(.*?)\*\*")


def _resolve_times(raw_time: str, content: str) -> tuple[str, str]:
    """라벨과 본문 앞부분의 `~HH:MM`에서 시작/종료 시각을 찾습니다."""
    # `~HH:MM` 라벨은 종료 시각만 있는 형태
    label_tilde = _LEADING_TILDE_TIME.match(raw_time)
    tokens = [] if label_tilde else TIME_TOKEN.findall(raw_time)
    if len(tokens) >= 2:
        return tokens[0], tokens[1]

    start_time = tokens[0] if tokens else ""
    content_tilde = _LEADING_TILDE_TIME.match(content)
    if content_tilde:
        return start_time, content_tilde.group(1)
    return start_time, label_tilde.group(1) if label_tilde else ""


def disambiguate(raw_time: str, raw_content: str) -> TimeDisplay:
    """시간 항목 하나의 표시용 값을 계산합니다."""
    raw_time = raw_time or ""
    raw_content = raw_content or ""
    content = _LEADING_DOLLAR.sub("", raw_content)

    start_time, end_time = _resolve_times(raw_time, content)
    derived = _LEADING_TILDE_PREFIX.sub("", content, count=1)

    inline = _INLINE_RANGE.match(derived)
    if inline:
        start_time = start_time or inline.group(1)
        end_time = end_time or inline.group(2)
        title = inline.group(3) or ""
    else:
        title = derived[2:] if derived.startswith("- ") else derived

    description = ""
    bold = _BOLD.search(raw_content)
    if bold:
        description = _BOLD.sub("", title, count=1).strip()
        title = bold.group(1)

    return TimeDisplay(
        start_time=normalize_line(start_time),
        end_time=normalize_line(end_time),
        title=normalize_line(title),
        description=normalize_line(description),
    )


def describe_time_item(item: TimeItem) -> TimeDisplay:
    """`TimeItem`에 대해 `disambiguate()`를 호출합니다."""
    return disambiguate(item.time, item.content)
