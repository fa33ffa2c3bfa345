# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Binds the tool registry (core/registry.py) to a FastMCP server.  Each
#   tool here is a thin wrapper: it logs the call, hands the arguments to
#   core.registry.invoke(), and turns the resulting Envelope into a FastMCP
#   ToolResult.
#
# HOW IT WORKS (the flow):
#   1. A client calls a tool by name via MCP (e.g., "get-weather")
#   2. FastMCP validates the arguments against the tool signature
#   3. The wrapper below calls invoke() → core handler → Envelope
#   4. The Envelope goes back as one TextContent item, mirrored into
#      structured_content
#
# ERRORS:
#   - Bad arguments never reach a handler.  FastMCP rejects them first; if
#     one slips through, ToolArgumentError is re-raised as ToolError.
#     Either way the client gets a protocol-level error, not an Envelope.
#   - Upstream failures are already text inside the Envelope, so the call
#     itself succeeds.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python main.py   (or python -m tools.mcp_server)
#     b) Embedded:    a hosting framework imports create_server() or the
#                     module-level ``mcp`` instance
# =============================================================================

import json
import logging
import os
import sys
from typing import Any, Mapping, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from core.config import SERVER_NAME, SERVER_VERSION
from core.models import Address, Envelope, LanguageField, Latitude, Longitude, Name
from core.registry import ToolSpec, build_registry, invoke
from core.validation import ToolArgumentError

logger = logging.getLogger(__name__)

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout is the MCP transport.  Anything printed
# to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status messages
_RESET = "\033[0m"     # Reset to default terminal color


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    body = json.dumps(result, ensure_ascii=False, separators=(",", ":"))
    logger.info(f"{_GREEN}  ← {tool_name} response: {body}{_RESET}")
    return result


# =============================================================================
# Envelope → FastMCP result
# =============================================================================
def to_tool_result(envelope: Envelope) -> ToolResult:
    return ToolResult(
        content=[TextContent(type="text", text=envelope.text)],
        structured_content=envelope.structured_content(),
    )


def _call(registry: Mapping[str, ToolSpec], tool_name: str, **arguments: Any) -> ToolResult:
    _log_request(tool_name, **arguments)
    try:
        envelope = invoke(registry, tool_name, arguments)
    except ToolArgumentError as e:
        _log_status(f"Rejected arguments: {e}")
        raise ToolError(str(e)) from e
    _log_response(tool_name, envelope.to_dict())
    return to_tool_result(envelope)


# =============================================================================
# Server factory
# =============================================================================
def create_server(config: Optional[Mapping[str, Any]] = None) -> FastMCP:
    """Build a FastMCP server exposing greet, geocode and get-weather.

    ``config`` is accepted for hosting frameworks that construct the server
    themselves and pass their session config in.  No tool reads it.
    """
    if config:
        logger.debug("create_server config keys: %s", sorted(config))

    registry = build_registry()
    server = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    def _register(fn, spec: ToolSpec) -> None:
        server.tool(
            fn,
            name=spec.name,
            description=spec.description,
            output_schema=spec.output_schema,
        )

    # -------------------------------------------------------------------------
    # TOOL 1: greet
    # -------------------------------------------------------------------------
    def greet(name: Name, language: LanguageField = "en") -> ToolResult:
        return _call(registry, "greet", name=name, language=language)

    # -------------------------------------------------------------------------
    # TOOL 2: geocode  (OpenStreetMap Nominatim)
    # -------------------------------------------------------------------------
    def geocode(address: Address) -> ToolResult:
        return _call(registry, "geocode", address=address)

    # -------------------------------------------------------------------------
    # TOOL 3: get-weather  (Open-Meteo)
    # -------------------------------------------------------------------------
    def get_weather(latitude: Latitude, longitude: Longitude) -> ToolResult:
        return _call(registry, "get-weather", latitude=latitude, longitude=longitude)

    _register(greet, registry["greet"])
    _register(geocode, registry["geocode"])
    _register(get_weather, registry["get-weather"])
    return server


mcp = create_server()


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Serve the tools over stdio until the client disconnects."""
    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
    logger.info("MCP server started")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
