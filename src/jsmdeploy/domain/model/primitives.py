"""Conversions between JSON primitive values."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TypeGuard

from .elements import PrimitiveType

_JS_EXPONENT_ABOVE = 1e21
_JS_FIXED_FROM_POWER = -6


def is_number(value: object) -> TypeGuard[int | float]:
    return isinstance(value, int | float) and not isinstance(value, bool)


def canonical_number_string(value: float) -> str:
    """Render a number the way the service prints identifiers (``42.0`` -> ``"42"``).

    Floats follow JavaScript's ``Number#toString``: ``Infinity`` and ``NaN``
    for non-finite values, exponent notation from ``1e21`` up and below ``1e-6``.
    """

    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _JS_EXPONENT_ABOVE:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if _JS_FIXED_FROM_POWER <= power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def convert_primitive(value: object, target: PrimitiveType) -> object:
    """Convert ``value`` to ``target`` where that is lossless, otherwise return it as is."""

    if target is PrimitiveType.STRING and is_number(value):
        return canonical_number_string(value)
    if target is PrimitiveType.NUMBER and isinstance(value, str):
        stripped = value.strip()
        try:
            return int(stripped)
        except ValueError:
            pass
        try:
            return float(stripped)
        except ValueError:
            return value
    if target is PrimitiveType.BOOLEAN and isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
    return value
