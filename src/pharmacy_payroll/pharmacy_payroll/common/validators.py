from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_number(value: Any, field_name: str) -> float:
    """Reject missing, non-numeric and NaN values. No range checks."""
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be numeric, got {value!r}") from None
    if math.isnan(number):
        raise ValidationError(f"{field_name} must be numeric, got NaN")
    return number
