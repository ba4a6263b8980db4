from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
        overtime_hours: float,
    ) -> int:
        """Insert a record and return its id.

        Raises ``AttendanceAlreadyExistsError`` when the employee already has a
        record for ``work_date``.
        """

        raise NotImplementedError

    def update(self, *, attendance_id: int, status: AttendanceStatus, overtime_hours: float) -> bool:
        raise NotImplementedError

    def list_for_date(self, work_date: date, *, status: Optional[AttendanceStatus] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date_and_department(self, work_date: date, dept_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records for one employee with ``start_date <= work_date <= end_date``.

        When ``status`` is given only records with that status are returned.
        """

        raise NotImplementedError
