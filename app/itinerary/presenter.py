"""파싱 결과를 미리보기 모델로 조립합니다."""

from __future__ import annotations

from datetime import datetime

from app.itinerary.accumulator import parse_itinerary
from app.itinerary.details import classify_details
from app.itinerary.disambiguator import describe_time_item
from app.itinerary.normalizer import strip_dollar
from app.schemas.itinerary import (
    DaySchedule,
    DayView,
    ItineraryView,
    ParsedItinerary,
    TimeItem,
    TimeItemView,
    TripPeriod,
)

EMPTY_DAY_MESSAGE = "일정이 곧 생성될 예정입니다."
_DAY_MARKER = "Day"


def _tab_label(day: DaySchedule, index: int) -> str:
    if _DAY_MARKER in day.title:
        return day.title.split("-")[0].strip()
    return f"{_DAY_MARKER} {index + 1}"


def _build_time_item_view(item: TimeItem) -> TimeItemView:
    display = describe_time_item(item)
    return TimeItemView(
        start_time=display.start_time,
        end_time=display.end_time,
        title=display.title,
        description=display.description,
        details=classify_details(item.details),
    )


def _build_day_view(day: DaySchedule, index: int) -> DayView:
    return DayView(
        tab_label=_tab_label(day, index),
        has_header=_DAY_MARKER in day.title,
        title=day.title,
        description=day.description,
        items=[_build_time_item_view(item) for item in day.time_items],
        empty_message=None if day.time_items else EMPTY_DAY_MESSAGE,
    )


def build_itinerary_view(parsed: ParsedItinerary) -> ItineraryView:
    """시간 항목마다 시각/제목을, 세부 항목마다 분류를 계산해 붙입니다."""
    return ItineraryView(
        tip=parsed.tip_section.content if parsed.tip_section else None,
        hotel=parsed.hotel_info.description if parsed.hotel_info else None,
        days=[_build_day_view(day, index) for index, day in enumerate(parsed.days)],
        additional_infos=list(parsed.additional_infos),
    )


def preview_text(text: str) -> ItineraryView:
    """원문의 `$`를 먼저 걷어낸 뒤 파싱해 미리보기 모델을 만듭니다."""
    return build_itinerary_view(parse_itinerary(strip_dollar(text or "")))


def _parse_iso(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def format_korean_date(value: datetime) -> str:
    return f"{value.year}년 {value.month}월 {value.day}일"


def format_korean_time(value: datetime) -> str:
    """12시간제 한국어 시각 (예: 오후 3:05)."""
    meridiem = "오전" if value.hour < 12 else "오후"
    hour = value.hour % 12 or 12
    return f"{meridiem} {hour}:{value.minute:02d}"


def format_trip_period(start_time: str | None, finish_time: str | None) -> TripPeriod:
    """ISO 8601 시작/종료 시각을 표시 문자열로 바꿉니다. 해석할 수 없는 값은 빈 문자열입니다."""
    start = _parse_iso(start_time)
    finish = _parse_iso(finish_time)
    return TripPeriod(
        date=format_korean_date(start) if start else "",
        start_time=format_korean_time(start) if start else "",
        end_time=format_korean_time(finish) if finish else "",
    )
