# =============================================================================
# core/geocoding.py  —  Address → coordinates (OpenStreetMap Nominatim)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   search_address()  one GET to Nominatim's search endpoint, limit=1,
#                     parsed into a LocationResult (or None, or Failed)
#   geocode()         the tool handler: maps the outcome to message text
#
# OUTCOMES:
#   Failed            → "지오코딩 중 오류가 발생했습니다: {message}"
#   no match          → '주소 "{address}"에 대한 위치를 찾을 수 없습니다.'
#   first match       → three lines: 주소 / 위도 / 경도
#
# A single attempt decides the outcome.  Only the first match is read.
# =============================================================================

import logging
from typing import Optional
from urllib.parse import quote

from core.config import GEOCODE_USER_AGENT, NOMINATIM_SEARCH_URL
from core.formatting import format_number
from core.http import UPSTREAM_ERRORS, describe_failure, get_json
from core.models import Envelope, Failed, Fetched, FetchOutcome, GeocodeArgs, LocationResult

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_search_url(address: str) -> str:
    """Nominatim search URL for ``address``, asking for at most one result."""
    query = quote(address, safe=_URI_COMPONENT_SAFE)
    return f"{NOMINATIM_SEARCH_URL}?q={query}&format=json&limit=1"


def parse_first_location(data) -> Optional[LocationResult]:
    """Parse the first element of a Nominatim search response.

    Returns None for an empty (or null) result list.  Raises ValueError,
    KeyError or TypeError when the body is not shaped like a result list.
    """
    if data is None:
        return None
    if not isinstance(data, list):
        raise ValueError(f"Unexpected geocoding response: {type(data).__name__}")
    if not data:
        return None
    first = data[0]
    return LocationResult(
        display_name=str(first["display_name"]),
        latitude=float(first["lat"]),
        longitude=float(first["lon"]),
    )


def search_address(address: str) -> FetchOutcome[LocationResult]:
    """Look up ``address`` upstream.  Never raises for upstream trouble."""
    url = build_search_url(address)
    try:
        data = get_json(url, headers={"User-Agent": GEOCODE_USER_AGENT})
        return Fetched(parse_first_location(data))
    except UPSTREAM_ERRORS + (KeyError, TypeError) as e:
        message = describe_failure(e, "Geocoding")
        logger.warning("Geocoding request for %r failed: %s", address, message)
        return Failed(message)


def location_text(location: LocationResult) -> str:
    return (
        f"주소: {location.display_name}\n"
        f"위도: {format_number(location.latitude)}\n"
        f"경도: {format_number(location.longitude)}"
    )


def not_found_text(address: str) -> str:
    return f'주소 "{address}"에 대한 위치를 찾을 수 없습니다.'


def error_text(message: str) -> str:
    return f"지오코딩 중 오류가 발생했습니다: {message}"


def geocode(args: GeocodeArgs) -> Envelope:
    """Tool handler for ``geocode``."""
    outcome = search_address(args.address)
    if isinstance(outcome, Failed):
        return Envelope(error_text(outcome.message))
    if outcome.value is None:
        return Envelope(not_found_text(args.address))
    return Envelope(location_text(outcome.value))
