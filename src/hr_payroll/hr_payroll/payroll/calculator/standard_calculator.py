from __future__ import annotations

from .base import AttendanceTally, PayrollCalculator
from ...core.constants import HALF_DAY_PENALTY, NO_PAY_PENALTY


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: fixed penalty per NO_PAY / HALF_DAY day, overtime truncated to whole units."""

    def __init__(self, *, no_pay_penalty: int = NO_PAY_PENALTY, half_day_penalty: int = HALF_DAY_PENALTY):
        self._no_pay_penalty = int(no_pay_penalty)
        self._half_day_penalty = int(half_day_penalty)

    def overtime_pay(self, overtime_hours: float, overtime_rate: int) -> int:
        return int(float(overtime_hours) * int(overtime_rate))

    def deduction(self, tally: AttendanceTally) -> int:
        return tally.days_no_pay * self._no_pay_penalty + tally.days_half_day * self._half_day_penalty
