"""
Result Reader - defensive field access on decision service payloads.

Rule outputs have no fixed schema. Amounts may arrive under more than one
name, as strings, or not at all; anything unusable reads as zero / False.
"""
import math
from typing import Any, Optional


def coerce_number(value: Any) -> float:
    """Coerce a loosely-typed value to a finite number, defaulting to 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return 0
        return number if math.isfinite(number) else 0
    return 0


def first_present(result: Any, *keys: str) -> Optional[Any]:
    """Return the first non-None value among `keys` when `result` is a record."""
    if not isinstance(result, dict):
        return None
    for key in keys:
        value = result.get(key)
        if value is not None:
            return value
    return None


def read_markup_amount(result: Any) -> float:
    return coerce_number(first_present(result, "markupAmount", "markup"))


def read_discount_amount(result: Any) -> float:
    return coerce_number(first_present(result, "discountValue", "discount"))


def read_feasible(result: Any) -> bool:
    return bool(first_present(result, "isFeasible"))
