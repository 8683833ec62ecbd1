"""Field checks shared by the entity dataclasses."""

from __future__ import annotations

from datetime import date, datetime

from stockroom.domain.exceptions import InvalidFieldError


def require_int(value: object, field: str) -> int:
    # bool is an int subclass but never a valid id or count
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidFieldError(
            f"{field} must be an integer, got {type(value).__name__}",
            field=field,
        )
    return value


def require_non_negative(value: object, field: str) -> int:
    number = require_int(value, field)
    if number < 0:
        raise InvalidFieldError(f"{field} cannot be negative, got {number}", field=field)
    return number


def require_text(value: object, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidFieldError(f"{field} is required", field=field)
    return value


def require_date(value: object, field: str) -> date:
    # datetime is a date subclass but would persist with a time component
    if not isinstance(value, date) or isinstance(value, datetime):
        raise InvalidFieldError(f"{field} must be a date", field=field)
    return value
