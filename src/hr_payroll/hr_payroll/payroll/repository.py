from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SalaryRecord


class SalaryRepository(Protocol):
    def create(self, record: SalaryRecord) -> int:
        """Insert a new snapshot and return its salary_id.

        Never updates an existing row; every call stores a new snapshot.
        """

        raise NotImplementedError

    def get_by_id(self, salary_id: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[SalaryRecord]:
        """Snapshots for an employee in insertion order."""

        raise NotImplementedError

    def exists_for_department(self, dept_id: str) -> bool:
        raise NotImplementedError
