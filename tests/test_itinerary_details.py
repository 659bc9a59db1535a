"""세부 항목 분류 테스트."""

import pytest

from app.itinerary.details import classify_detail, classify_details
from app.schemas.itinerary import DetailKind


def test_clock_emoji_with_time() -> None:
    result = classify_detail("🕔 18:00 이동")

    assert result.kind == DetailKind.CLOCK
    assert result.time == "18:00"
    assert result.rest == "이동"


def test_cost_detail() -> None:
    result = classify_detail("예상 비용 약 20,000원")

    assert result.kind == DetailKind.COST
    assert result.time is None
    assert result.rest == "예상 비용 약 20,000원"


@pytest.mark.parametrize(
    ("detail", "time", "rest"),
    [
        ("18:30 - 숙소 복귀", "18:30", "숙소 복귀"),
        ("⏰ 07:00 기상", "07:00", "기상"),
        ("🕓 9:15- 체크인", "9:15", "체크인"),
        ("21:00", "21:00", ""),
    ],
)
def test_time_prefixed_details(detail: str, time: str, rest: str) -> None:
    result = classify_detail(detail)

    assert result.kind == DetailKind.CLOCK
    assert result.time == time
    assert result.rest == rest


def test_cost_wins_over_emoji() -> None:
    assert classify_detail("🎫 입장권 5,000원").kind == DetailKind.COST


def test_astral_emoji_detail() -> None:
    result = classify_detail("🚶 도보 10분")

    assert result.kind == DetailKind.EMOJI
    assert result.rest == "🚶 도보 10분"


def test_bmp_symbol_is_plain() -> None:
    assert classify_detail("☕ 카페 휴식").kind == DetailKind.PLAIN


def test_plain_detail_is_cleaned() -> None:
    result = classify_detail("$ 택시 이동 ")

    assert result.kind == DetailKind.PLAIN
    assert result.rest == "택시 이동"


def test_classify_details_keeps_order() -> None:
    kinds = [result.kind for result in classify_details(["09:00 a", "비용 확인", "🚇 지하철", "메모"])]

    assert kinds == [DetailKind.CLOCK, DetailKind.COST, DetailKind.EMOJI, DetailKind.PLAIN]
