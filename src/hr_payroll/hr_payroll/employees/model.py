from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, no database access. Age is not stored; use
    ``age_on`` with the date of interest.
    """

    employee_id: str
    first_name: str
    last_name: str
    nic: str
    gender: str
    phone: str
    email: str
    birthday: date
    dept_id: str
    role: Role = Role.USER

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self, *, today: Optional[date] = None) -> dict:
        return {
            "employee_id": self.employee_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "nic": self.nic,
            "gender": self.gender,
            "phone": self.phone,
            "email": self.email,
            "birthday": self.birthday.strftime("%Y-%m-%d"),
            "age": age_on(self.birthday, today),
            "dept_id": self.dept_id,
            "role": self.role.value,
        }


def age_on(birthday: date, today: Optional[date] = None) -> int:
    """Whole years between ``birthday`` and ``today`` (defaults to the local date)."""
    today = today or today_local()
    years = today.year - birthday.year
    if (today.month, today.day) < (birthday.month, birthday.day):
        years -= 1
    return years


def next_employee_id(dept_id: str, max_number: Optional[int]) -> str:
    """Employee ids are the department id followed by a running number."""
    return f"{dept_id}{(max_number or 0) + 1}"
