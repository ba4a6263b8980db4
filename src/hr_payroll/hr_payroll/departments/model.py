from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEPARTMENT_ID_LENGTH


@dataclass(frozen=True)
class Department:
    """Domain entity: a department and its pay configuration.

    ``base_salary`` and ``overtime_rate`` are whole currency units; the rate
    is paid per overtime hour.
    """

    dept_id: str
    name: str
    base_salary: int
    overtime_rate: int

    def to_dict(self) -> dict:
        return {
            "dept_id": self.dept_id,
            "name": self.name,
            "base_salary": self.base_salary,
            "overtime_rate": self.overtime_rate,
        }


def department_id_for(name: str) -> str:
    """Department ids are the first four letters of the upper-cased name."""
    return name.strip().upper()[:DEPARTMENT_ID_LENGTH]
