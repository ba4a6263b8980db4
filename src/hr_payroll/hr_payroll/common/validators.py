from __future__ import annotations

from datetime import date
from typing import Iterable

from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, InvalidDateRangeError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative_int(value, field_name: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_int(value, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    return value


def require_date_range(start: date, end: date) -> None:
    if start is None or end is None:
        raise ValidationError("Start date and end date are required")
    if start > end:
        raise InvalidDateRangeError(f"Start date {start.isoformat()} is after end date {end.isoformat()}")


def require_role(current_role: Role, allowed: Iterable[Role]) -> None:
    allowed = tuple(allowed)
    if current_role not in allowed:
        names = ", ".join(r.value for r in allowed)
        raise AuthorizationError(f"Role {getattr(current_role, 'value', current_role)} is not allowed (requires {names})")


def require_status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status {value!r}")
