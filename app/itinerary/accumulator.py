"""분류된 줄 흐름으로 일정 트리를 만드는 상태 기계.

상태는 한 번의 파싱 호출 안에서만 쓰이는 `ItineraryCursor`에 모여 있고,
줄마다 범주에 맞는 전이 메서드를 호출합니다. 어떤 입력에서도 예외를 던지지 않으며
인식하지 못한 줄도 버리지 않습니다 (시간 항목 → 일자 설명 → 추가 정보 순으로 귀속).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from app.core.logger import get_logger
from app.itinerary.normalizer import normalize_line
from app.itinerary.patterns import TIP_TERMINATORS, LineCategory, LineMatch, classify_line
from app.schemas.itinerary import DaySchedule, HotelInfo, ParsedItinerary, TimeItem, TipSection

logger = get_logger(__name__)

SYNTHESIZED_DAY_TITLE = "일정표"


class AccumulatorState(StrEnum):
    """누적기 상태."""

    IDLE = "IDLE"
    IN_DAY = "IN_DAY"
    IN_TIME_ITEM = "IN_TIME_ITEM"


@dataclass(slots=True)
class _TimeItemDraft:
    time: str
    content: str
    details: list[str] = field(default_factory=list)

    def freeze(self) -> TimeItem:
        return TimeItem(time=self.time, content=self.content, details=list(self.details))


@dataclass(slots=True)
class _DayDraft:
    title: str
    description: str = ""
    time_items: list[_TimeItemDraft] = field(default_factory=list)

    def extend_description(self, text: str) -> None:
        self.description = f"{self.description} {text}" if self.description else text

    def freeze(self) -> DaySchedule:
        return DaySchedule(
            title=self.title,
            description=self.description,
            time_items=[item.freeze() for item in self.time_items],
        )


@dataclass(slots=True)
class ItineraryCursor:
    """파싱 한 번 동안 유지되는 누적 상태."""

    tip: str | None = None
    hotel: str | None = None
    days: list[_DayDraft] = field(default_factory=list)
    additional_infos: list[str] = field(default_factory=list)
    current_day: _DayDraft | None = None
    current_time_item: _TimeItemDraft | None = None

    @property
    def state(self) -> AccumulatorState:
        if self.current_time_item is not None:
            return AccumulatorState.IN_TIME_ITEM
        if self.current_day is not None:
            return AccumulatorState.IN_DAY
        return AccumulatorState.IDLE

    def set_tip(self, content: str) -> None:
        self.tip = content

    def set_hotel(self, content: str) -> None:
        self.hotel = content.split(" - ")[0] if " - " in content else content

    def open_day(self, title: str, description: str) -> None:
        self.current_time_item = None
        self.current_day = _DayDraft(title=title, description=description)
        self.days.append(self.current_day)

    def add_time_item(self, time: str, content: str) -> None:
        if self.current_day is None:
            self.open_day(SYNTHESIZED_DAY_TITLE, "")
        self.current_time_item = _TimeItemDraft(time=time, content=content)
        self.current_day.time_items.append(self.current_time_item)

    def attach_text(self, detail: str, fallback: str | None = None) -> None:
        """열린 시간 항목, 일자 설명, 추가 정보 순으로 텍스트를 붙입니다.

        `fallback`이 주어지면 시간 항목이 없을 때 `detail` 대신 사용합니다.
        """
        if self.current_time_item is not None:
            self.current_time_item.details.append(detail)
            return

        text = fallback if fallback is not None else detail
        if self.current_day is not None:
            self.current_day.extend_description(text)
        else:
            self.additional_infos.append(text)

    def build(self) -> ParsedItinerary:
        return ParsedItinerary(
            tip_section=TipSection(content=self.tip) if self.tip is not None else None,
            hotel_info=HotelInfo(description=self.hotel) if self.hotel is not None else None,
            days=[day.freeze() for day in self.days],
            additional_infos=list(self.additional_infos),
        )


def collect_tip(lines: list[str], start: int, first: str) -> tuple[str, int]:
    """팁 줄 이후의 이어지는 줄을 모읍니다.

    Args:
        lines: 정규화된 전체 줄 목록.
        start: 팁 줄 다음 인덱스.
        first: 팁 줄에서 추출한 본문.

    Returns:
        (팁 본문, 다음에 처리할 줄 인덱스). 종료 범주의 줄은 소비하지 않습니다.
    """
    parts = [first] if first else []
    index = start
    while index < len(lines):
        line = lines[index]
        if classify_line(line).category in TIP_TERMINATORS:
            break
        if line:
            parts.append(line)
        index += 1
    return " ".join(parts), index


def _dispatch(cursor: ItineraryCursor, matched: LineMatch) -> None:
    category = matched.category

    if category in (LineCategory.SCHEDULE_HEADER, LineCategory.SEPARATOR):
        return
    if category == LineCategory.HOTEL:
        cursor.set_hotel(matched.get("content"))
    elif category == LineCategory.DAY:
        cursor.open_day(matched.get("title"), matched.get("description"))
    elif category == LineCategory.TIME_ENTRY:
        cursor.add_time_item(matched.get("time"), matched.get("content"))
    elif category == LineCategory.SUB_ITEM:
        cursor.attach_text(matched.get("content"), fallback=matched.line)
    else:
        cursor.attach_text(matched.line)


def parse_itinerary(text: str) -> ParsedItinerary:
    """일정 원문을 `ParsedItinerary`로 변환합니다.

    빈 문자열이나 공백뿐인 입력은 빈 결과를 반환합니다.
    """
    cursor = ItineraryCursor()
    if not text or not text.strip():
        return cursor.build()

    lines = [normalize_line(raw) for raw in text.split("\n") if raw.strip()]

    index = 0
    while index < len(lines):
        line = lines[index]
        if not line:
            index += 1
            continue

        matched = classify_line(line)
        if matched.category == LineCategory.TIP:
            content, index = collect_tip(lines, index + 1, matched.get("content"))
            cursor.set_tip(content)
            continue

        _dispatch(cursor, matched)
        index += 1

    parsed = cursor.build()
    logger.debug(
        "Itinerary parsed: days=%d time_items=%d additional_infos=%d tip=%s hotel=%s",
        len(parsed.days),
        sum(len(day.time_items) for day in parsed.days),
        len(parsed.additional_infos),
        parsed.tip_section is not None,
        parsed.hotel_info is not None,
    )
    return parsed
