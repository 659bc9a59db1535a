"""일정 파싱 및 미리보기 API."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from app.api.dependencies import bearer_scheme, get_itinerary_service, require_service_secret, require_user_token
from app.core.logger import get_logger
from app.itinerary import classify_detail, disambiguate
from app.schemas.itinerary import (
    ClassifyDetailsRequest,
    DetailClassification,
    DisambiguateRequest,
    ItineraryTextRequest,
    ItineraryView,
    ParsedItinerary,
    TimeDisplay,
)
from app.schemas.jwt import UserTokenPayload
from app.schemas.suggestion import SuggestionPreview
from app.services import itinerary_service
from app.services.itinerary_service import ItineraryService
from app.services.suggestion_client import SuggestionApiError

router = APIRouter(prefix="/api/v1", tags=["itinerary"])
logger = get_logger(__name__)

SERVICE_SECRET_ERROR_EXAMPLES = {
    "missing_secret": {
        "summary": "서비스 시크릿 누락",
        "description": "x-service-secret 헤더가 누락된 경우",
        "value": {"detail": "서비스 시크릿 헤더가 누락되었습니다."},
    },
    "invalid_secret": {
        "summary": "서비스 시크릿 불일치",
        "description": "x-service-secret 값이 올바르지 않은 경우",
        "value": {"detail": "유효하지 않은 서비스 시크릿입니다."},
    },
}

PARSE_EXAMPLES = {
    "multi_day": {
        "summary": "Day 헤더와 시간 항목",
        "value": {
            "tip_section": {"content": "편한 신발을 준비하세요."},
            "hotel_info": {"description": "서울 시티 호텔"},
            "days": [
                {
                    "title": "Day 1 - 도심 산책",
                    "description": "도심 산책",
                    "time_items": [
                        {"time": "09:00", "content": "**경복궁** 관람", "details": ["예상 비용 약 3,000원"]},
                    ],
                }
            ],
            "additional_infos": [],
        },
    }
}

_SECRET_RESPONSES = {
    401: {
        "description": "인증 실패",
        "content": {"application/json": {"examples": SERVICE_SECRET_ERROR_EXAMPLES}},
    },
}


@router.post(
    "/itinerary/parse",
    response_model=ParsedItinerary,
    dependencies=[Depends(require_service_secret)],
    responses={
        200: {
            "description": "파싱 결과",
            "content": {"application/json": {"examples": PARSE_EXAMPLES}},
        },
        **_SECRET_RESPONSES,
    },
)
def parse_itinerary_text(request: ItineraryTextRequest) -> ParsedItinerary:
    """일정 원문을 일자/시간 항목 트리로 변환합니다."""
    return itinerary_service.parse_text(request.text)


@router.post(
    "/itinerary/preview",
    response_model=ItineraryView,
    dependencies=[Depends(require_service_secret)],
    responses=_SECRET_RESPONSES,
)
def preview_itinerary_text(request: ItineraryTextRequest) -> ItineraryView:
    """일정 원문을 파싱하고 시간/세부 항목 해석 결과를 함께 반환합니다."""
    return itinerary_service.preview(request.text)


@router.post(
    "/itinerary/disambiguate",
    response_model=TimeDisplay,
    dependencies=[Depends(require_service_secret)],
    responses=_SECRET_RESPONSES,
)
def disambiguate_time_item(request: DisambiguateRequest) -> TimeDisplay:
    """시간 라벨과 본문에서 시작/종료 시각과 제목을 도출합니다."""
    return disambiguate(request.time, request.content)


@router.post(
    "/itinerary/details/classify",
    response_model=list[DetailClassification],
    dependencies=[Depends(require_service_secret)],
    responses=_SECRET_RESPONSES,
)
def classify_item_details(request: ClassifyDetailsRequest) -> list[DetailClassification]:
    """세부 항목마다 시각/비용/이모지/일반 분류를 반환합니다."""
    return [classify_detail(detail) for detail in request.details]


@router.get("/suggestions/me", response_model=list[SuggestionPreview])
async def list_my_suggestions(
    user: UserTokenPayload = Depends(require_user_token),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    service: ItineraryService = Depends(get_itinerary_service),
) -> list[SuggestionPreview]:
    """로그인 사용자의 추천 기록을 조회해 일정 미리보기 목록으로 반환합니다."""
    logger.info("Suggestion preview request received: user_id=%s", user.user_id)
    authorization = f"Bearer {credentials.credentials}" if credentials else None

    try:
        return await service.list_user_previews(user.user_id, authorization)
    except SuggestionApiError as exc:
        logger.error("Suggestion preview failed: user_id=%s error=%s", user.user_id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="추천 기록을 불러오지 못했습니다.",
        ) from exc
