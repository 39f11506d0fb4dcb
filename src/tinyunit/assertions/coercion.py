"""Value coercion rules used by the loose assertions.

Python compares values strictly, so the harness defines its own loose
rules: numbers and numeric strings compare numerically, booleans count
as 0/1, and ``None`` only equals ``None``. Nothing here raises: values
that cannot be converted or compared count as NaN, unequal or falsy.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NUMBER_TYPES = (int, float)

# Numeric string literals: signed decimals with optional exponent,
# signed Infinity, and unsigned 0x/0o/0b integers. No underscores.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_RE = re.compile(r"([+-]?)Infinity")
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _is_number(value: Any) -> bool:
    return isinstance(value, _NUMBER_TYPES) and not isinstance(value, bool)


def _as_float(value: int | float) -> float:
    """float() for ints too large for a double maps to +/-Infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _parse_numeric_string(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    match = _INFINITY_RE.fullmatch(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    if _PREFIXED_RE.fullmatch(text):
        return _as_float(int(text, 0))
    return math.nan


def to_number(value: Any) -> float:
    """Coerce ``value`` to a float; anything non-numeric becomes NaN."""
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if _is_number(value):
        return _as_float(value)
    if isinstance(value, str):
        return _parse_numeric_string(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return 0.0
        if len(value) == 1:
            return to_number(value[0])
        return math.nan
    try:
        return float(value)
    except Exception:
        return math.nan


def is_nan(value: Any) -> bool:
    return math.isnan(to_number(value))


def truthy(value: Any) -> bool:
    try:
        return bool(value)
    except Exception:
        # e.g. multi-element numpy arrays
        return False


def _safe_eq(a: Any, b: Any) -> bool:
    try:
        return bool(a == b)
    except Exception:
        return False


def _number_equals_string(number: int | float, text: str) -> bool:
    parsed = to_number(text)
    if isinstance(number, int) and parsed.is_integer():
        # compare exactly so huge ints are not rounded
        return number == int(parsed)
    return parsed == _as_float(number)


def loose_equals(a: Any, b: Any) -> bool:
    """Equality with numeric coercion between numbers, strings and booleans."""
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, bool) and not isinstance(b, bool):
        return loose_equals(int(a), b)
    if isinstance(b, bool) and not isinstance(a, bool):
        return loose_equals(a, int(b))
    if _is_number(a) and isinstance(b, str):
        return _number_equals_string(a, b)
    if isinstance(a, str) and _is_number(b):
        return _number_equals_string(b, a)
    return _safe_eq(a, b)


def _kind(value: Any) -> type:
    if _is_number(value):
        return float
    return type(value)


def strict_equals(a: Any, b: Any) -> bool:
    """Equality without coercion: same kind of value and ``==``."""
    if _kind(a) is not _kind(b):
        return False
    return _safe_eq(a, b)


def format_value(value: Any) -> str:
    """Display form of a recorded value."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, str):
        return repr(value)
    return str(value)
