# =============================================================================
# core/http.py  —  One GET, one JSON body
# =============================================================================
#
# Both adapters issue exactly one GET and parse the body as JSON.  This is
# that single call and nothing more: no retries, no caching, no timeout of
# our own (the socket default applies).
#
# Errors are NOT caught here.  urllib raises HTTPError for non-2xx
# responses and URLError for network failures; the adapters decide how to
# describe them.
# =============================================================================

import http.client
import json
import urllib.error
import urllib.request
from typing import Any, Mapping, Optional

# Used when an exception carries no message of its own.
UNKNOWN_ERROR_MESSAGE = "알 수 없는 오류가 발생했습니다."

# Everything a single GET + json.loads (and parsing its numbers) can raise
# for upstream reasons.  HTTPError and URLError are OSError subclasses;
# IncompleteRead and BadStatusLine are HTTPException but not OSError;
# JSONDecodeError and UnicodeDecodeError are ValueError subclasses;
# OverflowError (an infinite number in the body) is an ArithmeticError.
UPSTREAM_ERRORS = (OSError, http.client.HTTPException, ValueError, ArithmeticError)


def get_json(url: str, headers: Optional[Mapping[str, str]] = None) -> Any:
    """GET ``url`` and return the decoded JSON body."""
    req = urllib.request.Request(url, headers=dict(headers or {}), method="GET")
    with urllib.request.urlopen(req) as response:
        return json.loads(response.read().decode("utf-8"))


def describe_failure(exc: BaseException, api_label: str) -> str:
    """Turn an upstream exception into the message shown to the caller.

    Non-2xx statuses read "<api_label> API error: <status>".
    """
    if isinstance(exc, urllib.error.HTTPError):
        return f"{api_label} API error: {exc.code}"
    if isinstance(exc, urllib.error.URLError):
        return str(exc.reason) or UNKNOWN_ERROR_MESSAGE
    return str(exc) or UNKNOWN_ERROR_MESSAGE
