"""Hour Conversions — fixed-point storage values <-> native floats.

Invariants:
    - to_fixed_point always returns a Decimal with exactly one fractional digit
    - parse_hours never returns NaN or infinity; malformed input raises ValueError
    - parse_hours(parse_hours(x)) == parse_hours(x)

Design Decisions:
    - Raise ValueError (not a domain error): callers are Pydantic validators,
      which turn ValueError into a field-level error
"""

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from batcave.core.domain_types import HOURS_QUANTUM


def to_fixed_point(value: float | int | str | Decimal) -> Decimal:
    """Quantize an hour value to the storage scale (one decimal place)."""
    try:
        # str() first: Decimal(0.1) would carry the binary float error
        dec = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"not a decimal number: {value!r}")
    if not dec.is_finite():
        raise ValueError(f"hours must be finite, got {value!r}")
    return dec.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


def parse_hours(value: object) -> float:
    """Coerce a persisted hour value (text, Decimal or number) to float.

    Fails closed: empty text, non-numeric text, NaN and infinity all raise.
    """
    if isinstance(value, bool):
        raise ValueError("hours must be a number, not a boolean")
    if isinstance(value, (int, float, Decimal)):
        result = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("hours text is empty")
        try:
            result = float(Decimal(text))
        except InvalidOperation:
            raise ValueError(f"malformed hours text: {value!r}")
    else:
        raise ValueError(f"unsupported hours type: {type(value).__name__}")
    if not math.isfinite(result):
        raise ValueError(f"hours must be finite, got {value!r}")
    return result


def parse_optional_hours(value: object) -> float | None:
    """Like parse_hours, but None and empty text mean "not recorded"."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return parse_hours(value)
