# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Every value here is request-scoped: it is built for one tool call and
# discarded afterwards.  Nothing is persisted between calls.
#
#   - Argument records (GreetArgs, GeocodeArgs, WeatherArgs) are pydantic
#     models.  FastMCP validates tool input with pydantic too, so the same
#     field constraints back both the advertised JSON schema and our own
#     validator (core/validation.py).
#   - Upstream records (LocationResult, WeatherResult) and the Envelope
#     are plain dataclasses.  They carry no behaviour beyond serialization.
# =============================================================================

from dataclasses import dataclass
from typing import Annotated, Any, Generic, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field


# -----------------------------------------------------------------------------
# Reusable field types
# -----------------------------------------------------------------------------
# Declared once and used both in the argument models below and in the
# FastMCP tool signatures (tools/mcp_server.py).
# -----------------------------------------------------------------------------
Language = Literal["ko", "en"]

Name = Annotated[str, Field(min_length=1, description="인사할 사람의 이름")]
LanguageField = Annotated[Language, Field(description="인사 언어 (기본값: en)")]
Address = Annotated[
    str,
    Field(
        min_length=1,
        description='주소나 장소 이름 (예: "서울시 강남구", "New York City")',
    ),
]
Latitude = Annotated[
    float, Field(ge=-90, le=90, strict=True, description="위도 (latitude)")
]
Longitude = Annotated[
    float, Field(ge=-180, le=180, strict=True, description="경도 (longitude)")
]


# -----------------------------------------------------------------------------
# Tool arguments
# -----------------------------------------------------------------------------
class ToolArgs(BaseModel):
    """Base for tool argument records: immutable, extra keys ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class GreetArgs(ToolArgs):
    name: Name
    language: LanguageField = "en"


class GeocodeArgs(ToolArgs):
    address: Address


class WeatherArgs(ToolArgs):
    latitude: Latitude
    longitude: Longitude


# -----------------------------------------------------------------------------
# Upstream records
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class LocationResult:
    """First match of an address search."""

    display_name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherResult:
    """The "current conditions" block of a forecast response."""

    temperature_c: float               # temperature_2m
    weather_code: Any                  # WMO code as sent (int when integral)
    humidity_pct: float                # relative_humidity_2m
    wind_speed_kmh: float              # wind_speed_10m


# -----------------------------------------------------------------------------
# Upstream outcome
# -----------------------------------------------------------------------------
# Adapters never raise on upstream trouble.  They return one of these two
# and the handler picks the message template.
#
#   Fetched(value)   the call went through; value is None when the upstream
#                    answered with nothing usable (no match, no "current")
#   Failed(message)  transport error, non-2xx status or unparsable body
# -----------------------------------------------------------------------------
T = TypeVar("T")


@dataclass(frozen=True)
class Fetched(Generic[T]):
    value: Optional[T]


@dataclass(frozen=True)
class Failed:
    message: str


FetchOutcome = Union[Fetched[T], Failed]


# -----------------------------------------------------------------------------
# Envelope — the one output shape of every tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Envelope:
    """A single text item, mirrored into ``structuredContent``.

    ``content`` and ``structuredContent["content"]`` are always equal and
    always hold exactly one item, whatever the outcome of the call.
    """

    text: str

    def content(self) -> list[dict[str, Any]]:
        return [{"type": "text", "text": self.text}]

    def structured_content(self) -> dict[str, Any]:
        return {"content": self.content()}

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content(),
            "structuredContent": self.structured_content(),
        }
