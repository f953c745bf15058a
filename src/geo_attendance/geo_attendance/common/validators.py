from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def finite_number(value: Any) -> Optional[float]:
    """Return value as float when it is a real, finite JSON number; else None.

    Booleans and numeric strings are rejected rather than coerced.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number):
        return None
    return number


def require_number(value: Any, field_name: str) -> float:
    """Settings-side counterpart of finite_number that raises on bad input."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise ValidationError(f"{field_name} must be a number") from None
    number = finite_number(value)
    if number is None:
        raise ValidationError(f"{field_name} must be a number")
    return number


def require_non_negative(value: Any, field_name: str) -> float:
    number = require_number(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number
