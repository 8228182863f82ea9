"""Input checks shared by the services.

All checks run before anything is written, so a rejected call leaves the
stored records untouched.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional

from mefirst.domain.errors import (
    ValidationError,
    amount_not_positive,
    name_required,
    unknown_category,
)


def to_decimal(value: Any, field_name: str = "Amount") -> Decimal:
    """Coerce a number or numeric string to Decimal."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number, got '{value}'")
    if not result.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    return result


def require_positive(value: Any, field_name: str = "Amount") -> Decimal:
    amount = to_decimal(value, field_name)
    if amount <= 0:
        raise ValidationError(amount_not_positive(field_name))
    return amount


def require_non_negative(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return amount


def require_name(name: Optional[str], what: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(name_required(what))
    return cleaned


def require_known_category(category: str, categories: Iterable[str]) -> str:
    if category not in set(categories):
        raise ValidationError(unknown_category(category))
    return category

