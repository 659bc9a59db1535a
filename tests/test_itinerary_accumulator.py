"""일정 트리 누적기 테스트."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.itinerary.accumulator import (
    SYNTHESIZED_DAY_TITLE,
    AccumulatorState,
    ItineraryCursor,
    collect_tip,
    parse_itinerary,
)
from app.schemas.itinerary import ParsedItinerary

SAMPLE_TEXT = """$📌 Tip: 편한 신발을 준비하세요.
⏰ 일정표
🏨 숙소: 서울 시티 호텔 - 중구 세종대로 1
---
📅 Day 1 - 도심 산책
서울 도심을 걷는 일정
🕘 09:00 **경복궁** 관람
- 입장료 약 3,000원
- $🚶 광화문까지 도보 10분
추가 메모
🕛 12:00 ~13:00 - 점심 식사

📅 Day 2 - 근교
🕙 10:00 남산 타워
"""


def test_empty_input_yields_empty_itinerary() -> None:
    for text in ("", "   ", "\n\n  \t\n"):
        parsed = parse_itinerary(text)

        assert parsed.days == []
        assert parsed.additional_infos == []
        assert parsed.tip_section is None
        assert parsed.hotel_info is None


def test_sample_itinerary_structure() -> None:
    parsed = parse_itinerary(SAMPLE_TEXT)

    assert parsed.tip_section is not None
    assert parsed.tip_section.content == "편한 신발을 준비하세요."
    assert parsed.hotel_info is not None
    assert parsed.hotel_info.description == "서울 시티 호텔"
    assert [day.title for day in parsed.days] == ["Day 1 - 도심 산책", "Day 2 - 근교"]

    day_one = parsed.days[0]
    assert day_one.description == "도심 산책 서울 도심을 걷는 일정"
    assert [(item.time, item.content) for item in day_one.time_items] == [
        ("09:00", "**경복궁** 관람"),
        ("12:00", "~13:00 - 점심 식사"),
    ]
    assert day_one.time_items[0].details == ["입장료 약 3,000원", "🚶 광화문까지 도보 10분", "추가 메모"]
    assert day_one.time_items[1].details == []

    day_two = parsed.days[1]
    assert day_two.description == "근교"
    assert [(item.time, item.content) for item in day_two.time_items] == [("10:00", "남산 타워")]
    assert parsed.additional_infos == []


def test_tip_continuation_stops_at_day_header() -> None:
    parsed = parse_itinerary("📌 Tip:첫줄\n둘째줄\n📅 Day 1 - 설명")

    assert parsed.tip_section is not None
    assert parsed.tip_section.content == "첫줄 둘째줄"
    assert len(parsed.days) == 1
    assert "Day 1" in parsed.days[0].title
    assert parsed.days[0].description == "설명"


def test_tip_continuation_stops_at_hotel_line() -> None:
    parsed = parse_itinerary("📌 Tip: a\nb\n🏨 숙소: 호텔 - 주소\n📅 Day 1 - x")

    assert parsed.tip_section.content == "a b"
    assert parsed.hotel_info.description == "호텔"
    assert len(parsed.days) == 1


def test_tip_continuation_absorbs_time_entries() -> None:
    parsed = parse_itinerary("📌 Tip: a\n09:00 b")

    assert parsed.tip_section.content == "a 09:00 b"
    assert parsed.days == []


def test_collect_tip_does_not_consume_terminator() -> None:
    lines = ["b", "c", "📅 Day 1 - x", "d"]

    content, next_index = collect_tip(lines, 0, "a")

    assert content == "a b c"
    assert next_index == 2


def test_time_entry_without_day_synthesizes_day() -> None:
    parsed = parse_itinerary("09:00 아침 식사\n- 호텔 조식")

    assert len(parsed.days) == 1
    assert parsed.days[0].title == SYNTHESIZED_DAY_TITLE
    assert parsed.days[0].description == ""
    assert parsed.days[0].time_items[0].time == "09:00"
    assert parsed.days[0].time_items[0].details == ["호텔 조식"]


def test_lines_before_any_section_go_to_additional_infos() -> None:
    parsed = parse_itinerary("안녕하세요\n- 준비물: 여권\n📅 Day 1 - a")

    assert parsed.additional_infos == ["안녕하세요", "- 준비물: 여권"]
    assert parsed.days[0].description == "a"


def test_sub_item_without_time_item_extends_day_description() -> None:
    parsed = parse_itinerary("📅 Day 1 - a\n- 메모")

    assert parsed.days[0].description == "a - 메모"


def test_day_header_closes_open_time_item() -> None:
    parsed = parse_itinerary("09:00 a\n📅 Day 1 - b\n메모")

    assert parsed.days[0].time_items[0].details == []
    assert parsed.days[1].description == "b 메모"
    assert parsed.days[1].time_items == []


def test_second_hotel_and_tip_overwrite_previous() -> None:
    parsed = parse_itinerary("🏨 숙소: 첫 호텔\n📌 Tip: 첫 팁\n🏨 숙소: 둘째 호텔\n📌 Tip: 둘째 팁\n⏰ 일정표")

    assert parsed.hotel_info.description == "둘째 호텔"
    assert parsed.tip_section.content == "둘째 팁"


def test_separator_and_schedule_header_are_consumed() -> None:
    parsed = parse_itinerary("---\n⏰ 일정표\n---")

    assert parsed == ParsedItinerary()


def test_windows_line_endings() -> None:
    parsed = parse_itinerary("📅 Day 1 - a\r\n09:00 b\r\n")

    assert parsed.days[0].description == "a"
    assert parsed.days[0].time_items[0].content == "b"


def test_order_is_preserved() -> None:
    lines: list[str] = []
    for day in range(1, 4):
        lines.append(f"📅 Day {day} - d{day}")
        for hour in (9, 13, 8):
            lines.append(f"{hour:02d}:00 day{day}-{hour}")
            lines.extend(f"- detail {day}-{hour}-{n}" for n in range(3))

    parsed = parse_itinerary("\n".join(lines))

    assert [day.description for day in parsed.days] == ["d1", "d2", "d3"]
    for day_number, day in enumerate(parsed.days, start=1):
        assert [item.content for item in day.time_items] == [f"day{day_number}-{h}" for h in (9, 13, 8)]
        for item, hour in zip(day.time_items, (9, 13, 8)):
            assert item.details == [f"detail {day_number}-{hour}-{n}" for n in range(3)]


@pytest.mark.parametrize(
    "text",
    [
        "\x00\x01\x02",
        "$$$",
        "📅📅📅",
        "- \n---\n--\n-",
        "~~ 12:3 :: 99:99",
        "**",
        "🕓\n🕓 \n🕓 1:",
        "📌 Tip:",
        "🏨 숙소:",
        "\r\n\r\n",
        "a" * 5000,
        "📌 Tip: x\n" * 50,
        " ﻿​",
    ],
)
def test_parse_is_total_and_never_orphans_time_items(text: str) -> None:
    parsed = parse_itinerary(text)

    assert isinstance(parsed, ParsedItinerary)
    for day in parsed.days:
        assert isinstance(day.time_items, list)
    assert parse_itinerary(text) == parsed


def test_every_time_item_has_parent_day() -> None:
    parsed = parse_itinerary("노이즈\n10:00 a\n- b\n📅 Day 3 - c\n11:00 d\n12:00 e")

    assert sum(len(day.time_items) for day in parsed.days) == 3
    assert parsed.days[0].title == SYNTHESIZED_DAY_TITLE
    assert parsed.additional_infos == ["노이즈"]


def test_parsed_tree_is_frozen() -> None:
    parsed = parse_itinerary(SAMPLE_TEXT)

    with pytest.raises(ValidationError):
        parsed.days = []


def test_cursor_state_transitions() -> None:
    cursor = ItineraryCursor()
    assert cursor.state == AccumulatorState.IDLE

    cursor.attach_text("머리말")
    assert cursor.state == AccumulatorState.IDLE

    cursor.open_day("Day 1 - a", "a")
    assert cursor.state == AccumulatorState.IN_DAY

    cursor.add_time_item("09:00", "b")
    assert cursor.state == AccumulatorState.IN_TIME_ITEM

    cursor.attach_text("c")
    cursor.open_day("Day 2 - d", "d")
    assert cursor.state == AccumulatorState.IN_DAY

    parsed = cursor.build()
    assert parsed.additional_infos == ["머리말"]
    assert parsed.days[0].time_items[0].details == ["c"]
