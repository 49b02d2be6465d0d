"""Conversion of raw form strings to field kinds.

Integers are plain base-10 literals: ASCII digits with an optional leading
sign for signed kinds. Whitespace, underscores and grouping separators are
rejected, unlike ``int()``. Booleans accept exactly ``"on"`` and ``"off"``.
"""

import re
from typing import Any

from form_scan.scanning.destinations import INTEGER_BOUNDS, FieldKind
from form_scan.scanning.errors import (
    BoolLiteralError,
    IntegerRangeError,
    IntegerSyntaxError,
)

BOOL_TRUE = "on"
BOOL_FALSE = "off"

# Decimal digits in 2**64 - 1, the widest supported value
MAX_DIGITS = 20

_SIGNED_LITERAL = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_LITERAL = re.compile(r"[0-9]+")


def parse_integer(raw: str, kind: FieldKind) -> int:
    """Parse a base-10 literal and check it fits the kind's bit width.

    Args:
        raw: The raw form value.
        kind: An integer kind.

    Returns:
        The parsed integer.

    Raises:
        IntegerSyntaxError: If ``raw`` is not a valid literal for the kind.
        IntegerRangeError: If the value does not fit the kind.
    """
    pattern = _SIGNED_LITERAL if kind.is_signed else _UNSIGNED_LITERAL
    if pattern.fullmatch(raw) is None:
        raise IntegerSyntaxError(raw, kind)

    # Every supported width fits in MAX_DIGITS; longer bodies never reach int()
    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > MAX_DIGITS:
        raise IntegerRangeError(raw, kind)

    value = int(digits or "0")
    if raw.startswith("-"):
        value = -value
    low, high = INTEGER_BOUNDS[kind]
    if not (low <= value <= high):
        raise IntegerRangeError(raw, kind)

    return value


def parse_bool(raw: str) -> bool:
    """Parse an ``"on"``/``"off"`` checkbox literal (case-sensitive)."""
    if raw == BOOL_TRUE:
        return True
    if raw == BOOL_FALSE:
        return False
    raise BoolLiteralError(raw)


def convert(raw: str, kind: FieldKind) -> Any:
    """Convert a raw form value to ``kind``.

    ``kind`` must be a supported kind; the scanner rejects the rest before
    any value is looked up.

    Raises:
        ConversionError: If the value cannot be represented as ``kind``.
    """
    if kind.is_integer:
        return parse_integer(raw, kind)
    if kind is FieldKind.BOOL:
        return parse_bool(raw)
    if kind is FieldKind.STRING:
        return raw
    raise ValueError(f"Unsupported field kind: {kind.value}")
