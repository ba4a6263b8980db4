from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_non_negative_int, require_role
from ..core.enums import Role
from ..core.exceptions import DepartmentAlreadyExistsError, DepartmentInUseError, DepartmentNotFoundError
from ..employees.repository import EmployeeRepository
from ..payroll.repository import SalaryRepository
from .model import Department, department_id_for
from .repository import DepartmentRepository

log = logging.getLogger(__name__)


class DepartmentService:
    """Use case: manage departments and their pay configuration."""

    def __init__(
        self,
        departments: DepartmentRepository,
        employees: EmployeeRepository,
        salaries: SalaryRepository,
    ):
        self._departments = departments
        self._employees = employees
        self._salaries = salaries

    def add_department(self, *, current_role: Role, name: str, base_salary: int, overtime_rate: int) -> Department:
        require_role(current_role, (Role.ADMIN,))
        name = require_non_empty(name, "Department name")
        require_non_negative_int(base_salary, "Base salary")
        require_non_negative_int(overtime_rate, "Overtime rate")

        dept_id = department_id_for(name)
        if self._departments.get_by_id(dept_id):
            raise DepartmentAlreadyExistsError(f"Department with id {dept_id} already exists")

        department = Department(dept_id=dept_id, name=name, base_salary=base_salary, overtime_rate=overtime_rate)
        self._departments.create(department)
        log.info("Created department %s (%s)", dept_id, name)
        return department

    def list_departments(self) -> Sequence[Department]:
        return list(self._departments.list_all())

    def get_department(self, dept_id: str) -> Department:
        department = self._departments.get_by_id(dept_id)
        if not department:
            raise DepartmentNotFoundError(f"Department with id {dept_id} does not exist")
        return department

    def update_department(
        self,
        *,
        current_role: Role,
        dept_id: str,
        base_salary: Optional[int] = None,
        overtime_rate: Optional[int] = None,
    ) -> Department:
        """Replace pay parameters; only positive values overwrite stored ones."""
        require_role(current_role, (Role.ADMIN, Role.HR))
        existing = self.get_department(dept_id)

        new_salary = base_salary if base_salary is not None and base_salary > 0 else existing.base_salary
        new_rate = overtime_rate if overtime_rate is not None and overtime_rate > 0 else existing.overtime_rate

        self._departments.update_pay(dept_id=dept_id, base_salary=new_salary, overtime_rate=new_rate)
        return Department(dept_id=existing.dept_id, name=existing.name, base_salary=new_salary, overtime_rate=new_rate)

    def delete_department(self, *, current_role: Role, dept_id: str) -> None:
        require_role(current_role, (Role.ADMIN,))
        self.get_department(dept_id)
        if self._employees.list_by_department(dept_id):
            raise DepartmentInUseError(f"Department {dept_id} still has employees")
        if self._salaries.exists_for_department(dept_id):
            raise DepartmentInUseError(f"Department {dept_id} is referenced by salary snapshots")
        self._departments.delete_by_id(dept_id)
        log.info("Deleted department %s", dept_id)
