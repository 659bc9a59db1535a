"""여행 일정 원문 파서."""

from app.itinerary.accumulator import parse_itinerary
from app.itinerary.details import classify_detail
from app.itinerary.disambiguator import disambiguate
from app.itinerary.normalizer import normalize_line
from app.itinerary.presenter import build_itinerary_view, preview_text

__all__ = [
    "parse_itinerary",
    "classify_detail",
    "disambiguate",
    "normalize_line",
    "build_itinerary_view",
    "preview_text",
]
