from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this protocol, never on a concrete database.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def exists(self, employee_id: str) -> bool:
        raise NotImplementedError

    def exists_by_email(self, email: str) -> bool:
        raise NotImplementedError

    def exists_by_nic(self, nic: str) -> bool:
        raise NotImplementedError

    def max_number_in_department(self, dept_id: str) -> Optional[int]:
        """Highest running number among ids issued for ``dept_id``."""

        raise NotImplementedError

    def create(self, employee: Employee) -> None:
        """Raises ``EmployeeAlreadyExistsError`` on a duplicate id, email or NIC."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_by_department(self, dept_id: str) -> Sequence[Employee]:
        raise NotImplementedError

    def update_contact(self, *, employee_id: str, phone: str, email: str) -> bool:
        raise NotImplementedError

    def delete_with_history(self, employee_id: str) -> tuple[int, int]:
        """Delete the employee with their salary snapshots and attendance in one transaction.

        Returns (salary snapshots removed, attendance records removed).
        """

        raise NotImplementedError
