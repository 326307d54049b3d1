"""Validation helpers gating entry into the ledger."""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Mapping

from .categories import CATEGORIES, is_registered_category
from .exceptions import ValidationError
from .models import parse_datetime, to_utc

__all__ = [
    "is_valid_expense",
    "parse_amount",
    "validate_category",
    "validate_datetime",
    "validate_expense",
]


def validate_category(value: object, field: str = "category") -> str:
    if value is None or value == "":
        raise ValidationError(f"{field} is required")
    if not is_registered_category(value):
        raise ValidationError(f"{field} must be one of: {', '.join(CATEGORIES)}")
    return value  # type: ignore[return-value]


def parse_amount(raw: object, field: str = "amount") -> Decimal:
    """Convert raw input to a finite, strictly positive Decimal."""
    if raw is None or raw == "":
        raise ValidationError(f"{field} is required")
    if isinstance(raw, bool):
        raise ValidationError(f"{field} must be a numeric value")
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be a numeric value") from exc

    # Amounts must fit a double so totals stay summable and serialisable.
    if not amount.is_finite() or not math.isfinite(float(amount)):
        raise ValidationError(f"{field} must be a finite number")
    if amount <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    return amount


def validate_datetime(value: object, field: str = "date") -> datetime:
    if value is None or value == "":
        raise ValidationError(f"{field} is required")
    if not isinstance(value, (str, date)):
        raise ValidationError(f"{field} must be a date or a date string")
    try:
        if isinstance(value, date):
            return to_utc(value)
        return parse_datetime(value)
    except (OverflowError, ValueError) as exc:
        raise ValidationError(f"{field} is not a valid date: {value!r}") from exc


def validate_expense(payload: Mapping[str, object]) -> Dict[str, object]:
    """Return normalised ``category``, ``amount`` and ``date`` fields.

    Raises ``ValidationError`` on the first failing rule; nothing is kept from
    a rejected payload.
    """
    return {
        "category": validate_category(payload.get("category")),
        "amount": parse_amount(payload.get("amount")),
        "date": validate_datetime(payload.get("date")),
    }


def is_valid_expense(payload: Mapping[str, object]) -> bool:
    try:
        validate_expense(payload)
    except ValidationError:
        return False
    return True
