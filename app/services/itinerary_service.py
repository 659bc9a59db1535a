"""일정 파싱/미리보기 처리 서비스."""

from __future__ import annotations

from pydantic import ValidationError

from app.core.logger import get_logger
from app.itinerary import parse_itinerary, preview_text
from app.itinerary.presenter import format_trip_period
from app.schemas.itinerary import ItineraryView, ParsedItinerary
from app.schemas.suggestion import Suggestion, SuggestionPreview
from app.services.suggestion_client import SuggestionClient

logger = get_logger(__name__)


def parse_text(text: str) -> ParsedItinerary:
    """원문을 파싱합니다."""
    parsed = parse_itinerary(text)
    logger.info("Itinerary parse completed: length=%d days=%d", len(text), len(parsed.days))
    return parsed


def preview(text: str) -> ItineraryView:
    """원문을 파싱하고 미리보기 모델을 만듭니다."""
    view = preview_text(text)
    logger.info("Itinerary preview completed: length=%d days=%d", len(text), len(view.days))
    return view


def build_suggestion_preview(suggestion: Suggestion) -> SuggestionPreview:
    """추천 기록 한 건을 미리보기로 변환합니다."""
    return SuggestionPreview(
        start_place=suggestion.start_place,
        optional_request=suggestion.optional_request,
        period=format_trip_period(suggestion.start_time, suggestion.finish_time),
        created=format_trip_period(suggestion.created_at, None),
        itinerary=preview_text(suggestion.answer or ""),
    )


class ItineraryService:
    """사용자 추천 기록 조회와 파싱을 묶는 서비스."""

    def __init__(self, client: SuggestionClient) -> None:
        self._client = client

    async def list_user_previews(self, member_id: str, authorization: str | None = None) -> list[SuggestionPreview]:
        """사용자의 추천 기록을 조회해 원본 순서대로 미리보기 목록을 반환합니다.

        기록의 메타데이터가 스키마에 맞지 않으면 해당 기록만 건너뜁니다.

        Raises:
            SuggestionApiError: 백엔드 조회 실패 시.
        """
        records = await self._client.fetch_user_suggestions(member_id, authorization)

        previews: list[SuggestionPreview] = []
        for index, record in enumerate(records):
            try:
                suggestion = Suggestion.model_validate(record)
            except ValidationError as exc:
                logger.warning("Skipping invalid suggestion record: member_id=%s index=%d error=%s", member_id, index, exc)
                continue
            previews.append(build_suggestion_preview(suggestion))

        logger.info("Suggestion previews built: member_id=%s count=%d", member_id, len(previews))
        return previews
