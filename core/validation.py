# =============================================================================
# core/validation.py  —  Tool Argument Validation
# =============================================================================
#
# validate() turns a raw argument mapping into a typed argument record.  It
# never raises for bad input: it returns Valid(args) or Invalid(...), and
# the caller decides what to do.  The registry turns Invalid into a
# ToolArgumentError, which travels to the transport as a protocol error
# (it is never wrapped in an Envelope).
# =============================================================================

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

import pydantic

from core.models import ToolArgs

A = TypeVar("A", bound=ToolArgs)


@dataclass(frozen=True)
class Valid(Generic[A]):
    args: A


@dataclass(frozen=True)
class Invalid:
    field: str                         # dotted path of the offending field
    constraint: str                    # pydantic error type, e.g. "less_than_equal"
    message: str


ValidationResult = Union[Valid[A], Invalid]


class ToolArgumentError(ValueError):
    """Raised when a tool call's arguments fail their schema."""

    def __init__(self, tool_name: str, field: str, constraint: str, message: str):
        self.tool_name = tool_name
        self.field = field
        self.constraint = constraint
        super().__init__(f"Invalid argument '{field}' for tool '{tool_name}': {message}")


def validate(model: type[A], raw: Optional[Mapping[str, Any]]) -> ValidationResult:
    """Validate ``raw`` against ``model``.

    Only the first reported error is surfaced; it names the field and the
    constraint that failed.
    """
    try:
        return Valid(model.model_validate(dict(raw or {})))
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "<root>"
        return Invalid(field=field, constraint=error["type"], message=error["msg"])
