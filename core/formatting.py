# =============================================================================
# core/formatting.py  —  Number rendering for message text
# =============================================================================
#
# Numbers in tool messages print the way JavaScript's String(number) renders
# them.  Clients match on that text:
#
#     20.0      → "20"
#     126.9780  → "126.978"
#     0.00001   → "0.00001"
#     1e-07     → "1e-7"
#     1.5e+21   → "1.5e+21"
# =============================================================================

import math
from decimal import Decimal
from typing import Union

Number = Union[int, float]


def format_number(value: Number) -> str:
    """Render ``value`` the way JavaScript's ``String(number)`` would."""
    if isinstance(value, bool):
        return str(value).lower()
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() gives the shortest digit string that round-trips, same as JS.
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)

    k = len(digits)
    n = k + exponent                   # position of the decimal point

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + body
