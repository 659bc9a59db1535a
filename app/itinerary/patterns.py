"""정규화된 한 줄을 범주로 분류하는 규칙 모음.

규칙은 `LINE_RULES`에 선언된 순서대로 평가되며 처음 일치한 규칙이 선택됩니다.
어떤 규칙에도 맞지 않는 줄은 `UNCLASSIFIED`로 분류되고 줄 전체가 내용이 됩니다.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

CLOCK_EMOJIS: tuple[str, ...] = (
    "🕓",
    "🕙",
    "🕛",
    "🕑",
    "🕕",
    "🕔",
    "🕠",
    "🕞",
    "🕗",
    "🕘",
    "🕚",
    "🕖",
    "⏰",
)

TIME_TOKEN = re.compile(r"\d{1,2}:\d{2}")

_CLOCK_ALTERNATION = "|".join(re.escape(emoji) for emoji in CLOCK_EMOJIS)


class LineCategory(StrEnum):
    """줄 범주."""

    TIP = "TIP"
    SCHEDULE_HEADER = "SCHEDULE_HEADER"
    HOTEL = "HOTEL"
    DAY = "DAY"
    TIME_ENTRY = "TIME_ENTRY"
    SUB_ITEM = "SUB_ITEM"
    SEPARATOR = "SEPARATOR"
    UNCLASSIFIED = "UNCLASSIFIED"


@dataclass(frozen=True, slots=True)
class LineMatch:
    """분류 결과와 추출된 필드."""

    category: LineCategory
    line: str
    groups: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        return self.groups.get(key, "")


@dataclass(frozen=True, slots=True)
class LineRule:
    """범주 하나에 대한 인식 규칙."""

    category: LineCategory
    pattern: re.Pattern[str]
    extract: Callable[[re.Match[str], str], dict[str, str]]

    def apply(self, line: str) -> LineMatch | None:
        match = self.pattern.match(line)
        if match is None:
            return None
        return LineMatch(category=self.category, line=line, groups=self.extract(match, line))


def _no_groups(match: re.Match[str], line: str) -> dict[str, str]:
    return {}


def _content(match: re.Match[str], line: str) -> dict[str, str]:
    return {"content": (match.group(1) or "").strip()}


def _day(match: re.Match[str], line: str) -> dict[str, str]:
    return {
        "title": re.sub(r"^📅\s*", "", line),
        "description": (match.group(1) or "").strip(),
    }


def _time_entry(match: re.Match[str], line: str) -> dict[str, str]:
    return {
        "time": match.group(2).strip(),
        "content": (match.group(3) or "").strip(),
    }


LINE_RULES: tuple[LineRule, ...] = (
    LineRule(LineCategory.TIP, re.compile(r"^📌\s*Tip:(.*)$"), _content),
    LineRule(LineCategory.SCHEDULE_HEADER, re.compile(r"^⏰\s*일정표"), _no_groups),
    LineRule(LineCategory.HOTEL, re.compile(r"^🏨\s*숙소:(.*)$"), _content),
    LineRule(LineCategory.DAY, re.compile(r"^📅\s*Day\s*\d+\s*-\s*(.*)$", re.IGNORECASE), _day),
    LineRule(
        LineCategory.TIME_ENTRY,
        re.compile(rf"^({_CLOCK_ALTERNATION})?\s*(\d{{1,2}}:\d{{2}})\s*(.*)$"),
        _time_entry,
    ),
    LineRule(LineCategory.SUB_ITEM, re.compile(r"^(?!---$)-\s*(.*)$"), _content),
    LineRule(LineCategory.SEPARATOR, re.compile(r"^---$"), _no_groups),
)

# 팁 섹션의 이어지는 줄 수집을 끝내는 범주
TIP_TERMINATORS = frozenset({LineCategory.SCHEDULE_HEADER, LineCategory.HOTEL, LineCategory.DAY})


def classify_line(line: str) -> LineMatch:
    """정규화된 한 줄을 분류합니다."""
    for rule in LINE_RULES:
        matched = rule.apply(line)
        if matched is not None:
            return matched
    return LineMatch(category=LineCategory.UNCLASSIFIED, line=line, groups={"content": line})
