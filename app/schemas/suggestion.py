"""여행 코스 추천 기록 스키마."""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.itinerary import ItineraryView, TripPeriod


class Suggestion(BaseModel):
    """백엔드에 저장된 추천 기록 한 건.

    Fields:
        `answer`: 생성기가 반환한 일정 원문
        `question_type`: 추천 요청 유형
        `start_time`: 여행 시작 시각 (ISO 8601)
        `finish_time`: 여행 종료 시각 (ISO 8601)
        `start_place`: 출발지
        `optional_request`: 추가 요청 사항
        `created_at`: 생성 시각 (ISO 8601)
    """

    model_config = ConfigDict(extra="ignore")

    answer: str | None = Field(default=None, description="일정 원문")
    question_type: int | None = Field(default=None, description="추천 요청 유형")
    start_time: str | None = Field(default=None, description="여행 시작 시각")
    finish_time: str | None = Field(default=None, description="여행 종료 시각")
    start_place: str | None = Field(default=None, description="출발지")
    optional_request: str | None = Field(default=None, description="추가 요청 사항")
    created_at: str | None = Field(default=None, description="생성 시각")


class SuggestionPreview(BaseModel):
    """추천 기록과 파싱된 미리보기."""

    start_place: str | None = Field(default=None, description="출발지")
    optional_request: str | None = Field(default=None, description="추가 요청 사항")
    period: TripPeriod = Field(..., description="여행 기간 표시 문자열")
    created: TripPeriod = Field(..., description="생성 시각 표시 문자열")
    itinerary: ItineraryView = Field(..., description="파싱된 일정 미리보기")
