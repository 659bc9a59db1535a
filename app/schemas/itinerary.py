"""여행 일정 파싱 결과 스키마.

파서가 만드는 트리(`ParsedItinerary`)와 화면 표시 시점에 계산되는
파생 값(`TimeDisplay`, `DetailClassification`)을 정의합니다.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import get_settings


class TipSection(BaseModel):
    """여행 팁 섹션."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="팁 본문 (이어지는 줄은 공백 하나로 연결)")


class HotelInfo(BaseModel):
    """숙소 정보."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="' - ' 구분자 앞부분 (없으면 전체)")


class TimeItem(BaseModel):
    """시간대별 일정 항목.

    시작/종료 시각과 제목은 저장하지 않고 `disambiguate()`로 필요할 때 계산합니다.
    """

    model_config = ConfigDict(frozen=True)

    time: str = Field(..., description="원문에서 추출한 시간 라벨")
    content: str = Field(..., description="시간 라벨 뒤의 원문 텍스트")
    details: list[str] = Field(default_factory=list, description="세부 항목 원문 목록")


class DaySchedule(BaseModel):
    """일자별 일정."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="일자 헤더 (예: Day 1 - 도착)")
    description: str = Field("", description="첫 시간 항목 이전에 붙은 설명")
    time_items: list[TimeItem] = Field(default_factory=list, description="원문 순서의 시간 항목")


class ParsedItinerary(BaseModel):
    """파싱된 전체 일정."""

    model_config = ConfigDict(frozen=True)

    tip_section: TipSection | None = Field(default=None, description="팁 섹션")
    hotel_info: HotelInfo | None = Field(default=None, description="숙소 정보")
    days: list[DaySchedule] = Field(default_factory=list, description="원문 순서의 일자 목록")
    additional_infos: list[str] = Field(default_factory=list, description="어느 섹션에도 속하지 않은 줄")


class TimeDisplay(BaseModel):
    """시간 항목 하나에서 도출한 표시용 값."""

    model_config = ConfigDict(frozen=True)

    start_time: str = Field("", description="시작 시각 (HH:MM, 없으면 빈 문자열)")
    end_time: str = Field("", description="종료 시각 (HH:MM, 없으면 빈 문자열)")
    title: str = Field("", description="제목")
    description: str = Field("", description="굵은 글씨 제목을 제외한 나머지 설명")


class DetailKind(StrEnum):
    """세부 항목 분류."""

    CLOCK = "clock"
    COST = "cost"
    EMOJI = "emoji"
    PLAIN = "plain"


class DetailClassification(BaseModel):
    """세부 항목 분류 결과."""

    model_config = ConfigDict(frozen=True)

    kind: DetailKind = Field(..., description="분류")
    time: str | None = Field(default=None, description="clock 분류일 때의 시각")
    rest: str = Field(..., description="표시할 나머지 텍스트")


class TimeItemView(BaseModel):
    """미리보기용 시간 항목."""

    start_time: str = Field("", description="시작 시각")
    end_time: str = Field("", description="종료 시각")
    title: str = Field("", description="제목")
    description: str = Field("", description="부가 설명")
    details: list[DetailClassification] = Field(default_factory=list, description="분류된 세부 항목")


class DayView(BaseModel):
    """미리보기용 일자."""

    tab_label: str = Field(..., description="일자 탭 라벨 (예: Day 1)")
    has_header: bool = Field(..., description="원문에 Day 헤더가 있었는지 여부")
    title: str = Field(..., description="일자 헤더")
    description: str = Field("", description="일자 설명")
    items: list[TimeItemView] = Field(default_factory=list, description="시간 항목")
    empty_message: str | None = Field(default=None, description="시간 항목이 없을 때 보여줄 안내 문구")


class ItineraryView(BaseModel):
    """파싱 결과에 표시용 파생 값을 붙인 미리보기 모델."""

    tip: str | None = Field(default=None, description="팁 본문")
    hotel: str | None = Field(default=None, description="숙소 설명")
    days: list[DayView] = Field(default_factory=list, description="일자 목록")
    additional_infos: list[str] = Field(default_factory=list, description="추가 정보")


class TripPeriod(BaseModel):
    """여행 기간 표시 문자열."""

    date: str = Field("", description="시작 날짜 (예: 2025년 5월 20일)")
    start_time: str = Field("", description="시작 시각 (예: 오전 9:00)")
    end_time: str = Field("", description="종료 시각 (예: 오후 6:00)")


class ItineraryTextRequest(BaseModel):
    """일정 원문 파싱 요청."""

    text: str = Field(..., description="생성기가 반환한 일정 원문")

    @field_validator("text")
    @classmethod
    def validate_text_length(cls, value: str) -> str:
        max_length = get_settings().ITINERARY_MAX_TEXT_LENGTH
        if len(value) > max_length:
            raise ValueError(f"일정 원문은 {max_length}자를 넘을 수 없습니다.")
        return value


class DisambiguateRequest(BaseModel):
    """시간 라벨/본문 해석 요청."""

    time: str = Field("", description="시간 라벨")
    content: str = Field("", description="본문")


class ClassifyDetailsRequest(BaseModel):
    """세부 항목 분류 요청."""

    details: list[str] = Field(..., max_length=500, description="세부 항목 목록")
