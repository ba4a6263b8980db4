from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_date_range, require_role, require_status
from ..core.enums import NON_WORKING_STATUSES, AttendanceStatus, Role
from ..core.exceptions import (
    AttendanceAlreadyExistsError,
    AttendanceNotFoundError,
    DepartmentNotFoundError,
    EmployeeNotFoundError,
    ValidationError,
)
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

log = logging.getLogger(__name__)

WRITE_ROLES = (Role.ADMIN, Role.HR)


def effective_overtime(status: AttendanceStatus, overtime_hours: Optional[float]) -> float:
    """Overtime stored for a record.

    LEAVE, NO_PAY and HALF_DAY never carry overtime; a missing value means 0.
    """
    if status in NON_WORKING_STATUSES or overtime_hours is None:
        return 0.0
    try:
        hours = float(overtime_hours)
    except (TypeError, ValueError):
        raise ValidationError("Overtime hours must be a number")
    if hours < 0:
        raise ValidationError("Overtime hours must not be negative")
    return hours


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        departments: DepartmentRepository | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._departments = departments

    def _require_employee(self, employee_id: str) -> None:
        if not self._employees.exists(employee_id):
            raise EmployeeNotFoundError(f"Employee not found with id: {employee_id}")

    def create_attendance(
        self,
        *,
        current_role: Role,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
        overtime_hours: Optional[float] = None,
    ) -> AttendanceRecord:
        require_role(current_role, WRITE_ROLES)
        if work_date is None:
            raise ValidationError("Date is required")
        status = require_status(status)
        self._require_employee(employee_id)

        if self._attendance.get_for_employee_and_date(employee_id, work_date):
            log.warning("Duplicate attendance for %s on %s rejected", employee_id, work_date)
            raise AttendanceAlreadyExistsError(
                f"Attendance already exists for employee id: {employee_id} on date: {work_date.isoformat()}"
            )

        hours = effective_overtime(status, overtime_hours)
        attendance_id = self._attendance.create(
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            overtime_hours=hours,
        )
        log.info("Recorded %s for %s on %s (overtime %.2fh)", status.value, employee_id, work_date, hours)
        return AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            overtime_hours=hours,
        )

    def update_attendance(
        self,
        *,
        current_role: Role,
        attendance_id: int,
        status: Optional[AttendanceStatus] = None,
        overtime_hours: Optional[float] = None,
    ) -> AttendanceRecord:
        require_role(current_role, WRITE_ROLES)
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise AttendanceNotFoundError(f"Attendance not found with id: {attendance_id}")

        new_status = require_status(status) if status is not None else record.status
        if new_status in NON_WORKING_STATUSES:
            hours = 0.0
        elif overtime_hours is not None:
            hours = effective_overtime(new_status, overtime_hours)
        else:
            hours = record.overtime_hours

        self._attendance.update(attendance_id=record.attendance_id, status=new_status, overtime_hours=hours)
        return AttendanceRecord(
            attendance_id=record.attendance_id,
            employee_id=record.employee_id,
            work_date=record.work_date,
            status=new_status,
            overtime_hours=hours,
        )

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> AttendanceRecord:
        self._require_employee(employee_id)
        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record:
            raise AttendanceNotFoundError(
                f"Attendance not found for employee id: {employee_id} on date: {work_date.isoformat()}"
            )
        return record

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return list(self._attendance.list_for_date(work_date))

    def list_for_date_and_status(self, work_date: date, status: AttendanceStatus) -> Sequence[AttendanceRecord]:
        if work_date is None or status is None:
            raise ValidationError("Date and status are required")
        return list(self._attendance.list_for_date(work_date, status=require_status(status)))

    def list_for_date_and_department(self, work_date: date, dept_id: str) -> Sequence[AttendanceRecord]:
        if work_date is None or not dept_id:
            raise ValidationError("Date and department id are required")
        if self._departments is not None and not self._departments.get_by_id(dept_id):
            raise DepartmentNotFoundError(f"Department with id {dept_id} does not exist")
        return list(self._attendance.list_for_date_and_department(work_date, dept_id))

    def list_for_employee_range(self, employee_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        self._require_employee(employee_id)
        require_date_range(start, end)
        return list(self._attendance.list_range(employee_id=employee_id, start_date=start, end_date=end))
