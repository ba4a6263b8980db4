from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_date_range, require_int
from ..core.enums import AttendanceStatus
from ..core.exceptions import DepartmentNotFoundError, EmployeeNotFoundError, SalaryNotFoundError
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from .calculator.base import AttendanceTally, PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import SalaryRecord
from .repository import SalaryRepository

log = logging.getLogger(__name__)


class SalaryService:
    """Payroll engine: turns attendance over a date range into a salary snapshot.

    Each ``compute_salary`` call reads attendance and the department's pay
    parameters, then inserts one new snapshot. Earlier snapshots for the same
    employee or an overlapping range are left untouched, and concurrent calls
    are not serialized, so overlapping snapshots can exist.
    """

    def __init__(
        self,
        salaries: SalaryRepository,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._salaries = salaries
        self._attendance = attendance
        self._employees = employees
        self._departments = departments
        self._calculator = calculator or StandardPayrollCalculator()

    def tally_attendance(self, *, employee_id: str, start_date: date, end_date: date) -> AttendanceTally:
        counts = {
            status: len(
                self._attendance.list_range(
                    employee_id=employee_id,
                    start_date=start_date,
                    end_date=end_date,
                    status=status,
                )
            )
            for status in AttendanceStatus
        }
        # Overtime counts on every record in range, whatever its status.
        overtime_hours = sum(
            float(r.overtime_hours or 0.0)
            for r in self._attendance.list_range(employee_id=employee_id, start_date=start_date, end_date=end_date)
        )
        return AttendanceTally(
            days_present=counts[AttendanceStatus.PRESENT],
            days_leave=counts[AttendanceStatus.LEAVE],
            days_half_day=counts[AttendanceStatus.HALF_DAY],
            days_no_pay=counts[AttendanceStatus.NO_PAY],
            overtime_hours=overtime_hours,
        )

    def compute_salary(
        self,
        *,
        employee_id: str,
        dept_id: str,
        start_date: date,
        end_date: date,
        bonus: int = 0,
    ) -> SalaryRecord:
        if not self._employees.exists(employee_id):
            raise EmployeeNotFoundError(f"Employee not found with id: {employee_id}")
        department = self._departments.get_by_id(dept_id)
        if not department:
            raise DepartmentNotFoundError(f"Department not found with id: {dept_id}")
        require_date_range(start_date, end_date)
        bonus = require_int(bonus, "Bonus")

        tally = self.tally_attendance(employee_id=employee_id, start_date=start_date, end_date=end_date)
        figures = self._calculator.figures(
            tally,
            base_salary=department.base_salary,
            overtime_rate=department.overtime_rate,
            bonus=bonus,
        )

        record = SalaryRecord(
            employee_id=employee_id,
            dept_id=department.dept_id,
            start_date=start_date,
            end_date=end_date,
            base_salary=department.base_salary,
            days_present=tally.days_present,
            days_leave=tally.days_leave,
            days_half_day=tally.days_half_day,
            days_no_pay=tally.days_no_pay,
            overtime_hours=tally.overtime_hours,
            overtime_rate=department.overtime_rate,
            overtime_pay=figures.overtime_pay,
            deduction=figures.deduction,
            bonus=bonus,
            total_salary=figures.total_salary,
        )
        salary_id = self._salaries.create(record)
        log.info(
            "Salary %s computed for %s (%s..%s): total=%d deduction=%d overtime_pay=%d",
            salary_id,
            employee_id,
            start_date,
            end_date,
            record.total_salary,
            record.deduction,
            record.overtime_pay,
        )
        return replace(record, salary_id=salary_id)

    def get_salary(self, salary_id: int) -> SalaryRecord:
        record = self._salaries.get_by_id(salary_id)
        if not record:
            raise SalaryNotFoundError(f"Salary not found with id: {salary_id}")
        return record

    def list_salaries_for_employee(self, employee_id: str) -> Sequence[SalaryRecord]:
        """All snapshots for an employee, oldest first; empty when none were computed."""
        if not self._employees.exists(employee_id):
            raise EmployeeNotFoundError(f"Employee not found with id: {employee_id}")
        return list(self._salaries.list_for_employee(employee_id))
