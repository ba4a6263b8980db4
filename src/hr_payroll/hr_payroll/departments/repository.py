from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, dept_id: str) -> Optional[Department]:
        raise NotImplementedError

    def create(self, department: Department) -> None:
        """Raises ``DepartmentAlreadyExistsError`` when ``dept_id`` is taken."""

        raise NotImplementedError

    def update_pay(self, *, dept_id: str, base_salary: int, overtime_rate: int) -> bool:
        raise NotImplementedError

    def delete_by_id(self, dept_id: str) -> bool:
        """Raises ``DepartmentInUseError`` while rows still reference the department."""

        raise NotImplementedError
