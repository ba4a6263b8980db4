from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_role
from ..core.enums import Role
from ..core.exceptions import (
    AuthorizationError,
    DepartmentNotFoundError,
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    ValidationError,
)
from ..departments.repository import DepartmentRepository
from .model import Employee, next_employee_id
from .repository import EmployeeRepository

log = logging.getLogger(__name__)


def check_role_creation(current_role: Role, target_role: Role) -> None:
    """ADMIN may create any role, HR only USER accounts, USER nothing."""
    if current_role == Role.ADMIN:
        return
    if current_role == Role.HR:
        if target_role != Role.USER:
            raise AuthorizationError(f"HR can only create employees with USER role, not {target_role.value}")
        return
    raise AuthorizationError("Only ADMIN and HR can create employees")


class EmployeeService:
    """Use case: manage employees (admin/HR)."""

    def __init__(
        self,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
    ):
        self._employees = employees
        self._departments = departments

    def add_employee(
        self,
        *,
        current_role: Role,
        first_name: str,
        last_name: str,
        nic: str,
        gender: str,
        phone: str,
        email: str,
        birthday: date,
        dept_id: str,
        role: Role = Role.USER,
    ) -> Employee:
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        nic = require_non_empty(nic, "NIC")
        email = require_non_empty(email, "Email")
        phone = require_non_empty(phone, "Phone")
        gender = require_non_empty(gender, "Gender")
        if birthday is None:
            raise ValidationError("Birthday is required")
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError(f"Unknown role {role!r}")

        check_role_creation(current_role, role)

        if self._employees.exists_by_email(email):
            raise EmployeeAlreadyExistsError(f"Employee with email {email} already exists")
        if self._employees.exists_by_nic(nic):
            raise EmployeeAlreadyExistsError(f"Employee with NIC {nic} already exists")

        department = self._departments.get_by_id(dept_id)
        if not department:
            raise DepartmentNotFoundError(f"Department not found with id {dept_id}")

        employee = Employee(
            employee_id=next_employee_id(department.dept_id, self._employees.max_number_in_department(department.dept_id)),
            first_name=first_name,
            last_name=last_name,
            nic=nic,
            gender=gender,
            phone=phone,
            email=email,
            birthday=birthday,
            dept_id=department.dept_id,
            role=role,
        )
        self._employees.create(employee)
        log.info("Created employee %s in %s with role %s", employee.employee_id, department.dept_id, role.value)
        return employee

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError(f"Employee not found with id: {employee_id}")
        return employee

    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees.list_all())

    def list_employees_in_department(self, dept_id: str) -> Sequence[Employee]:
        if not self._departments.get_by_id(dept_id):
            raise DepartmentNotFoundError(f"Department not found with id: {dept_id}")
        return list(self._employees.list_by_department(dept_id))

    def update_contact(self, *, employee_id: str, phone: Optional[str] = None, email: Optional[str] = None) -> Employee:
        employee = self.get_employee(employee_id)
        new_phone = phone.strip() if phone and phone.strip() else employee.phone
        new_email = email.strip() if email and email.strip() else employee.email
        if new_email != employee.email and self._employees.exists_by_email(new_email):
            raise EmployeeAlreadyExistsError(f"Employee with email {new_email} already exists")

        self._employees.update_contact(employee_id=employee_id, phone=new_phone, email=new_email)
        return Employee(
            employee_id=employee.employee_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            nic=employee.nic,
            gender=employee.gender,
            phone=new_phone,
            email=new_email,
            birthday=employee.birthday,
            dept_id=employee.dept_id,
            role=employee.role,
        )

    def delete_employee(self, *, current_role: Role, employee_id: str) -> None:
        """Remove an employee together with their salary snapshots and attendance."""
        require_role(current_role, (Role.ADMIN,))
        self.get_employee(employee_id)

        salaries, days = self._employees.delete_with_history(employee_id)
        log.info("Deleted employee %s (%d salary snapshots, %d attendance records)", employee_id, salaries, days)
