from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceTally:
    """Per-status day counts and total overtime for one employee and range."""

    days_present: int = 0
    days_leave: int = 0
    days_half_day: int = 0
    days_no_pay: int = 0
    overtime_hours: float = 0.0

    @property
    def total_days(self) -> int:
        return self.days_present + self.days_leave + self.days_half_day + self.days_no_pay


@dataclass(frozen=True)
class SalaryFigures:
    overtime_pay: int
    deduction: int
    total_salary: int


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def overtime_pay(self, overtime_hours: float, overtime_rate: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def deduction(self, tally: AttendanceTally) -> int:
        raise NotImplementedError

    def figures(self, tally: AttendanceTally, *, base_salary: int, overtime_rate: int, bonus: int) -> SalaryFigures:
        overtime_pay = self.overtime_pay(tally.overtime_hours, overtime_rate)
        deduction = self.deduction(tally)
        return SalaryFigures(
            overtime_pay=overtime_pay,
            deduction=deduction,
            total_salary=base_salary - deduction + overtime_pay + bonus,
        )
