"""시간 항목의 세부 줄을 표시 분류로 나눕니다.

분류만 제공하고 아이콘이나 색상은 정하지 않습니다.
"""

import re

from app.itinerary.normalizer import normalize_line
from app.itinerary.patterns import CLOCK_EMOJIS
from app.schemas.itinerary import DetailClassification, DetailKind

_CLOCK_PREFIX = re.compile(
    "^(?:" + "|".join(re.escape(emoji) for emoji in CLOCK_EMOJIS) + r")\s*(\d{1,2}:\d{2})"
)
_TIME_PREFIX = re.compile(r"^(\d{1,2}:\d{2})")
_LEADING_SEPARATORS = re.compile(r"^[\s-]+")
# UTF-16 서로게이트 쌍으로 인코딩되는 BMP 밖 문자
_ASTRAL_CHAR = re.compile("[\U00010000-\U0010FFFF]")
_COST_MARKERS = ("원", "비용")


def classify_detail(detail: str) -> DetailClassification:
    """세부 항목 하나를 분류합니다."""
    text = normalize_line(detail or "")

    time_match = _CLOCK_PREFIX.match(text) or _TIME_PREFIX.match(text)
    if time_match:
        rest = _LEADING_SEPARATORS.sub("", text[time_match.end() :])
        return DetailClassification(kind=DetailKind.CLOCK, time=time_match.group(1), rest=rest)

    if any(marker in text for marker in _COST_MARKERS):
        return DetailClassification(kind=DetailKind.COST, rest=text)

    if _ASTRAL_CHAR.search(text):
        return DetailClassification(kind=DetailKind.EMOJI, rest=text)

    return DetailClassification(kind=DetailKind.PLAIN, rest=text)


def classify_details(details: list[str]) -> list[DetailClassification]:
    return [classify_detail(detail) for detail in details]
