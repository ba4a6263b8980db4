from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Caller role used for permission checks."""

    ADMIN = "ADMIN"
    HR = "HR"
    USER = "USER"


class AttendanceStatus(str, Enum):
    """Classification of a single employee-day, stored as-is in the database."""

    PRESENT = "PRESENT"
    HALF_DAY = "HALF_DAY"
    LEAVE = "LEAVE"
    NO_PAY = "NO_PAY"


# Statuses that never carry overtime.
NON_WORKING_STATUSES = frozenset({AttendanceStatus.LEAVE, AttendanceStatus.NO_PAY, AttendanceStatus.HALF_DAY})
