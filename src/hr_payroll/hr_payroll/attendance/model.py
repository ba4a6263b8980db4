from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee-day of attendance."""

    attendance_id: int
    employee_id: str
    work_date: date
    status: AttendanceStatus
    overtime_hours: float = 0.0

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "overtime_hours": self.overtime_hours,
        }
