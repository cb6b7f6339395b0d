from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..core.exceptions import BusinessRuleError


def require_non_empty(value: Optional[str], message: str) -> str:
    if not value or not value.strip():
        raise BusinessRuleError(message)
    return value.strip()


def require_in_range(value: Optional[int], low: int, high: int, message: str) -> int:
    if value is None or not low <= value <= high:
        raise BusinessRuleError(message)
    return value


def require_digits(value: Optional[int], digits: int, message: str) -> int:
    if value is None or len(str(value)) != digits:
        raise BusinessRuleError(message)
    return value


def require_positive(value: Optional[Decimal], message: str) -> Decimal:
    if value is None or (isinstance(value, Decimal) and not value.is_finite()) or value <= 0:
        raise BusinessRuleError(message)
    return value


def require_present(value, message: str):
    if value is None:
        raise BusinessRuleError(message)
    return value
