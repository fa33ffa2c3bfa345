# =============================================================================
# core/registry.py  —  Tool registry (name → schema + handler)
# =============================================================================
#
# This is the unit the transport binds to.  Building it is pure (no I/O),
# so it can be inspected and invoked directly in tests without any MCP
# machinery.  tools/mcp_server.py hands each entry to FastMCP.
#
# invoke() is the whole per-call flow:
#   validate arguments → run handler → Envelope
# Validation failures raise ToolArgumentError before the handler runs.
# Handlers themselves never raise for upstream failures.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from core.geocoding import geocode
from core.greeting import greet
from core.models import Envelope, GeocodeArgs, GreetArgs, ToolArgs, WeatherArgs
from core.validation import Invalid, ToolArgumentError, validate
from core.weather import get_weather


class UnknownToolError(LookupError):
    """No tool is registered under the requested name."""


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    args_model: type[ToolArgs]
    output_schema: dict[str, Any]
    handler: Callable[[Any], Envelope]

    def input_schema(self) -> dict[str, Any]:
        return self.args_model.model_json_schema()


def text_output_schema(description: str) -> dict[str, Any]:
    """Output schema shared by every tool: a ``content`` list of text items."""
    return {
        "type": "object",
        "properties": {
            "content": {
                "type": "array",
                "description": description,
                "items": {
                    "type": "object",
                    "properties": {
                        "type": {"type": "string", "const": "text"},
                        "text": {"type": "string", "description": description},
                    },
                    "required": ["type", "text"],
                },
            },
        },
        "required": ["content"],
    }


def build_registry() -> dict[str, ToolSpec]:
    """Every tool this server exposes, keyed by tool name."""
    specs = [
        ToolSpec(
            name="greet",
            description="이름과 언어를 입력하면 인사말을 반환합니다.",
            args_model=GreetArgs,
            output_schema=text_output_schema("인사말"),
            handler=greet,
        ),
        ToolSpec(
            name="geocode",
            description="주소나 장소 이름을 입력하면 위도와 경도를 반환합니다.",
            args_model=GeocodeArgs,
            output_schema=text_output_schema("지오코딩 결과"),
            handler=geocode,
        ),
        ToolSpec(
            name="get-weather",
            description="위도와 경도를 입력하면 해당 위치의 날씨 정보를 반환합니다.",
            args_model=WeatherArgs,
            output_schema=text_output_schema("날씨 정보"),
            handler=get_weather,
        ),
    ]
    return {spec.name: spec for spec in specs}


def invoke(
    registry: Mapping[str, ToolSpec],
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
) -> Envelope:
    """Validate ``arguments`` for tool ``name`` and run its handler."""
    spec = registry.get(name)
    if spec is None:
        raise UnknownToolError(f"Unknown tool: {name}")

    result = validate(spec.args_model, arguments)
    if isinstance(result, Invalid):
        raise ToolArgumentError(name, result.field, result.constraint, result.message)
    return spec.handler(result.args)
