# =============================================================================
# core/weather.py  —  Current weather for a coordinate (Open-Meteo)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   fetch_current_weather()  one GET to Open-Meteo's forecast endpoint for
#                            the four "current" fields, timezone=auto
#   get_weather()            the tool handler: maps the outcome to text
#
# OUTCOMES:
#   Failed                   → "날씨 정보를 가져오는 중 오류가 발생했습니다: {message}"
#   no usable "current"      → "위도 {lat}, 경도 {lon} 위치의 날씨 정보를 가져올 수 없습니다."
#   current conditions       → five lines: 위치 / 날씨 / 온도 / 습도 / 풍속
#
# The "unavailable" branch is a normal early return for a 2xx response
# without a usable "current" block.  It is deliberately kept apart from the
# error branch, which covers exceptions (network, non-2xx, bad JSON).
#
# WHY OPEN-METEO?
#   Free, keyless, and it reports WMO weather codes, which the table below
#   turns into Korean descriptions.
# =============================================================================

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from core.config import OPEN_METEO_CURRENT_FIELDS, OPEN_METEO_FORECAST_URL
from core.formatting import Number, format_number
from core.http import UPSTREAM_ERRORS, describe_failure, get_json
from core.models import Envelope, Failed, Fetched, FetchOutcome, WeatherArgs, WeatherResult

logger = logging.getLogger(__name__)


# =============================================================================
# WMO Weather Code Mapping
# =============================================================================
# Open-Meteo reports WMO (World Meteorological Organization) weather codes.
# Codes missing from the table are described as UNKNOWN_WEATHER.
# =============================================================================
WEATHER_DESCRIPTIONS: Mapping[int, str] = MappingProxyType({
    0: "맑음",
    1: "대체로 맑음",
    2: "부분적으로 흐림",
    3: "흐림",
    45: "안개",
    48: "침식 안개",
    51: "약한 이슬비",
    53: "보통 이슬비",
    55: "강한 이슬비",
    56: "약한 동결 이슬비",
    57: "강한 동결 이슬비",
    61: "약한 비",
    63: "보통 비",
    65: "강한 비",
    66: "약한 동결 비",
    67: "강한 동결 비",
    71: "약한 눈",
    73: "보통 눈",
    75: "강한 눈",
    77: "눈알갱이",
    80: "약한 소나기",
    81: "보통 소나기",
    82: "강한 소나기",
    85: "약한 눈 소나기",
    86: "강한 눈 소나기",
    95: "뇌우",
    96: "우박과 함께하는 뇌우",
    99: "강한 우박과 함께하는 뇌우",
})

UNKNOWN_WEATHER = "알 수 없음"


def describe_weather_code(code: Any) -> str:
    """Korean description of a WMO weather code; non-integral codes are unknown."""
    if not isinstance(code, int) or isinstance(code, bool):
        return UNKNOWN_WEATHER
    return WEATHER_DESCRIPTIONS.get(code, UNKNOWN_WEATHER)


# =============================================================================
# Upstream adapter
# =============================================================================
def build_forecast_url(latitude: Number, longitude: Number) -> str:
    return (
        f"{OPEN_METEO_FORECAST_URL}"
        f"?latitude={format_number(latitude)}&longitude={format_number(longitude)}"
        f"&current={','.join(OPEN_METEO_CURRENT_FIELDS)}"
        f"&timezone=auto"
    )


def _as_code(value: Any) -> Any:
    """Integral floats (3.0) become ints; anything else is kept as sent."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_current(data: Any) -> Optional[WeatherResult]:
    """Parse the "current" block of a forecast response.

    Returns None when the block is absent, empty, or lacks one of the four
    requested fields.
    """
    if not isinstance(data, Mapping):
        return None
    current = data.get("current")
    if not current or not isinstance(current, Mapping):
        return None
    if any(current.get(name) is None for name in OPEN_METEO_CURRENT_FIELDS):
        return None
    return WeatherResult(
        temperature_c=current["temperature_2m"],
        weather_code=_as_code(current["weather_code"]),
        humidity_pct=current["relative_humidity_2m"],
        wind_speed_kmh=current["wind_speed_10m"],
    )


def fetch_current_weather(latitude: float, longitude: float) -> FetchOutcome[WeatherResult]:
    """Current conditions at a coordinate.  Never raises for upstream trouble."""
    url = build_forecast_url(latitude, longitude)
    try:
        return Fetched(parse_current(get_json(url)))
    except UPSTREAM_ERRORS + (TypeError,) as e:
        message = describe_failure(e, "Weather")
        logger.warning(
            "Weather request for (%s, %s) failed: %s", latitude, longitude, message
        )
        return Failed(message)


# =============================================================================
# Message text
# =============================================================================
def weather_text(latitude: float, longitude: float, weather: WeatherResult) -> str:
    return (
        f"위치: 위도 {format_number(latitude)}, 경도 {format_number(longitude)}\n"
        f"날씨: {describe_weather_code(weather.weather_code)}\n"
        f"온도: {format_number(weather.temperature_c)}°C\n"
        f"습도: {format_number(weather.humidity_pct)}%\n"
        f"풍속: {format_number(weather.wind_speed_kmh)} km/h"
    )


def unavailable_text(latitude: float, longitude: float) -> str:
    return (
        f"위도 {format_number(latitude)}, 경도 {format_number(longitude)} "
        f"위치의 날씨 정보를 가져올 수 없습니다."
    )


def error_text(message: str) -> str:
    return f"날씨 정보를 가져오는 중 오류가 발생했습니다: {message}"


def get_weather(args: WeatherArgs) -> Envelope:
    """Tool handler for ``get-weather``."""
    outcome = fetch_current_weather(args.latitude, args.longitude)
    if isinstance(outcome, Failed):
        return Envelope(error_text(outcome.message))
    if outcome.value is None:
        return Envelope(unavailable_text(args.latitude, args.longitude))
    return Envelope(weather_text(args.latitude, args.longitude, outcome.value))
