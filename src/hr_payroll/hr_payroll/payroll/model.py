from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class SalaryRecord:
    """Salary snapshot for one employee over an inclusive date range.

    ``base_salary`` and ``overtime_rate`` are copied from the department at
    computation time. ``salary_id`` is None until the snapshot is stored.
    """

    employee_id: str
    dept_id: str
    start_date: date
    end_date: date
    base_salary: int
    days_present: int
    days_leave: int
    days_half_day: int
    days_no_pay: int
    overtime_hours: float
    overtime_rate: int
    overtime_pay: int
    deduction: int
    bonus: int
    total_salary: int
    salary_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "salary_id": self.salary_id,
            "employee_id": self.employee_id,
            "dept_id": self.dept_id,
            "start_date": self.start_date.strftime("%Y-%m-%d"),
            "end_date": self.end_date.strftime("%Y-%m-%d"),
            "base_salary": self.base_salary,
            "days_present": self.days_present,
            "days_leave": self.days_leave,
            "days_half_day": self.days_half_day,
            "days_no_pay": self.days_no_pay,
            "overtime_hours": self.overtime_hours,
            "overtime_rate": self.overtime_rate,
            "overtime_pay": self.overtime_pay,
            "deduction": self.deduction,
            "bonus": self.bonus,
            "total_salary": self.total_salary,
        }
