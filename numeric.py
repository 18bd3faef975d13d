"""Numeric coercion helpers shared by the allocation, forecast and codec code.

None of these functions raise: bad input always collapses to a usable number.
"""

import math
import re
from typing import Any

# Leading decimal literal, the way a form field is read while the user types
# ("12.5%" -> 12.5, "1e3x" -> 1000.0).
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# A whole decimal literal and nothing else.
_NUMBER_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(raw: Any) -> float:
    """Parse interactive input into a finite float, or 0.0.

    Numbers are taken as-is, strings are read up to the first character that
    can't continue a decimal literal. Empty, non-numeric and non-finite
    values (NaN, Infinity) all give 0.0.
    """
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
    elif isinstance(raw, str):
        match = _LEADING_NUMBER.match(raw)
        if not match:
            return 0.0
        value = float(match.group(0))
    else:
        return 0.0
    return value if math.isfinite(value) else 0.0


def coerce_number(value: Any, default: float) -> float:
    """Coerce a stored value to a finite float, falling back to ``default``.

    Stricter than parse_number: a string must be a complete ASCII decimal
    literal (surrounding whitespace allowed, digit separators are not).
    Booleans are not numbers here.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
    elif isinstance(value, str):
        literal = value.strip()
        if not _NUMBER_LITERAL.fullmatch(literal):
            return default
        number = float(literal)
    else:
        return default
    return number if math.isfinite(number) else default


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value into [minimum, maximum]."""
    return min(max(value, minimum), maximum)


def round2(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    scaled = abs(value) * 100
    if not math.isfinite(scaled):
        # Already far beyond cent precision.
        return value
    rounded = math.floor(scaled + 0.5) / 100
    return math.copysign(rounded, value) if rounded else 0.0
