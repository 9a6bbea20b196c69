import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from .config import PLACEHOLDER


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def _number_text(value: float) -> str:
    """Render a float the way the report has always printed numbers."""
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    mantissa, sep, exponent = repr(value).partition("e")
    if not sep:
        return mantissa
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(repr(value)), "f")
    return f"{mantissa}e{'+' if power > 0 else ''}{power}"


def resolve(value: Any, fallback: str = PLACEHOLDER) -> str:
    """
    Display string for a scalar, or the fallback when it is None or NaN.
    Integral floats drop the trailing ".0" so 5.0 renders as "5"; booleans
    print lowercase; very large or small floats use a short exponent (1e+21).
    """
    if is_missing(value):
        return fallback
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _number_text(value)
    return str(value)


def percent(value: Any) -> str:
    """Value already in percent units: suffix "%" unless it is missing."""
    text = resolve(value)
    if text == PLACEHOLDER:
        return PLACEHOLDER
    return f"{text}%"


def fraction_percent(value: Any) -> str:
    """Value as a 0-1 fraction: scale by 100, one decimal, then "%"."""
    if is_missing(value):
        return PLACEHOLDER
    try:
        scaled = float(value) * 100
    except (TypeError, ValueError, OverflowError):
        return PLACEHOLDER
    if math.isnan(scaled) or math.isinf(scaled):
        return PLACEHOLDER
    try:
        rounded = Decimal(scaled).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return PLACEHOLDER
    return f"{rounded}%"


def pdf_safe_text(text: Any) -> str:
    if text is None:
        return ""
    return str(text).encode("latin-1", "replace").decode("latin-1")
