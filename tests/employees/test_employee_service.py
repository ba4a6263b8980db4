from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.hr_payroll.hr_payroll.core.enums import Role
from src.hr_payroll.hr_payroll.core.exceptions import (
    AuthorizationError,
    DepartmentNotFoundError,
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    ValidationError,
)
from src.hr_payroll.hr_payroll.departments.model import Department
from src.hr_payroll.hr_payroll.employees.model import age_on, next_employee_id
from src.hr_payroll.hr_payroll.employees.service import EmployeeService, check_role_creation


class InMemoryEmployees:
    """Employees plus the rows that hang off them (salary snapshots, attendance)."""

    def __init__(self):
        self._by_id = {}
        self.salaries = {}
        self.attendance = {}
        self.fail_delete = False

    def get_by_id(self, employee_id):
        return self._by_id.get(employee_id)

    def exists(self, employee_id):
        return employee_id in self._by_id

    def exists_by_email(self, email):
        return any(e.email == email for e in self._by_id.values())

    def exists_by_nic(self, nic):
        return any(e.nic == nic for e in self._by_id.values())

    def max_number_in_department(self, dept_id):
        numbers = [int(e.employee_id[len(dept_id):]) for e in self._by_id.values() if e.dept_id == dept_id]
        return max(numbers) if numbers else None

    def create(self, employee):
        self._by_id[employee.employee_id] = employee

    def list_all(self):
        return list(self._by_id.values())

    def list_by_department(self, dept_id):
        return [e for e in self._by_id.values() if e.dept_id == dept_id]

    def update_contact(self, *, employee_id, phone, email):
        self._by_id[employee_id] = replace(self._by_id[employee_id], phone=phone, email=email)
        return True

    def delete_with_history(self, employee_id):
        if self.fail_delete:
            raise RuntimeError("connection lost")
        salaries = self.salaries.pop(employee_id, [])
        days = self.attendance.pop(employee_id, [])
        del self._by_id[employee_id]
        return len(salaries), len(days)


class InMemoryDepartments:
    def __init__(self, *departments):
        self._by_id = {d.dept_id: d for d in departments}

    def get_by_id(self, dept_id):
        return self._by_id.get(dept_id)


@pytest.fixture
def env():
    employees = InMemoryEmployees()
    svc = EmployeeService(employees, InMemoryDepartments(Department("SALE", "Sales", 30000, 200)))
    return svc, employees


def hire(svc, *, current_role=Role.ADMIN, email="a@example.com", nic="900000001V", role=Role.USER, dept_id="SALE"):
    return svc.add_employee(
        current_role=current_role,
        first_name="Ann",
        last_name="Perera",
        nic=nic,
        gender="F",
        phone="0771234567",
        email=email,
        birthday=date(1990, 6, 15),
        dept_id=dept_id,
        role=role,
    )


def test_age_on_counts_whole_years():
    assert age_on(date(1990, 6, 15), date(2025, 6, 14)) == 34
    assert age_on(date(1990, 6, 15), date(2025, 6, 15)) == 35


def test_next_employee_id_starts_at_one():
    assert next_employee_id("SALE", None) == "SALE1"
    assert next_employee_id("SALE", 9) == "SALE10"


def test_role_creation_rules():
    check_role_creation(Role.ADMIN, Role.ADMIN)
    check_role_creation(Role.HR, Role.USER)
    with pytest.raises(AuthorizationError):
        check_role_creation(Role.HR, Role.HR)
    with pytest.raises(AuthorizationError):
        check_role_creation(Role.USER, Role.USER)


def test_ids_follow_department_sequence(env):
    svc, *_ = env

    first = hire(svc)
    second = hire(svc, email="b@example.com", nic="900000002V")

    assert first.employee_id == "SALE1"
    assert second.employee_id == "SALE2"
    assert first.full_name == "Ann Perera"
    assert [e.employee_id for e in svc.list_employees()] == ["SALE1", "SALE2"]
    assert len(svc.list_employees_in_department("SALE")) == 2


def test_hr_cannot_create_admin(env):
    svc, employees, *_ = env

    with pytest.raises(AuthorizationError):
        hire(svc, current_role=Role.HR, role=Role.ADMIN)
    assert employees.list_all() == []


def test_duplicate_email_and_nic_are_rejected(env):
    svc, *_ = env
    hire(svc)

    with pytest.raises(EmployeeAlreadyExistsError):
        hire(svc, nic="900000002V")
    with pytest.raises(EmployeeAlreadyExistsError):
        hire(svc, email="b@example.com")


def test_unknown_department(env):
    svc, *_ = env

    with pytest.raises(DepartmentNotFoundError):
        hire(svc, dept_id="NOPE")


def test_blank_name_is_rejected(env):
    svc, *_ = env

    with pytest.raises(ValidationError):
        svc.add_employee(
            current_role=Role.ADMIN,
            first_name=" ",
            last_name="Perera",
            nic="1",
            gender="F",
            phone="1",
            email="x@example.com",
            birthday=date(1990, 1, 1),
            dept_id="SALE",
        )


def test_update_contact_keeps_blank_fields(env):
    svc, employees, *_ = env
    hire(svc)

    updated = svc.update_contact(employee_id="SALE1", phone="0719999999", email="  ")

    assert updated.phone == "0719999999"
    assert updated.email == "a@example.com"
    assert employees.get_by_id("SALE1") == updated


def test_update_contact_to_taken_email(env):
    svc, *_ = env
    hire(svc)
    hire(svc, email="b@example.com", nic="900000002V")

    with pytest.raises(EmployeeAlreadyExistsError):
        svc.update_contact(employee_id="SALE2", email="a@example.com")


def test_list_in_unknown_department(env):
    svc, *_ = env

    with pytest.raises(DepartmentNotFoundError):
        svc.list_employees_in_department("NOPE")


def test_delete_removes_snapshots_and_attendance(env):
    svc, employees = env
    hire(svc)
    employees.salaries["SALE1"] = ["s1", "s2"]
    employees.attendance["SALE1"] = ["a1"]

    svc.delete_employee(current_role=Role.ADMIN, employee_id="SALE1")

    assert "SALE1" not in employees.salaries
    assert "SALE1" not in employees.attendance
    with pytest.raises(EmployeeNotFoundError):
        svc.get_employee("SALE1")


def test_failed_delete_keeps_snapshots(env):
    svc, employees = env
    hire(svc)
    employees.salaries["SALE1"] = ["s1", "s2"]
    employees.fail_delete = True

    with pytest.raises(RuntimeError):
        svc.delete_employee(current_role=Role.ADMIN, employee_id="SALE1")

    assert employees.salaries["SALE1"] == ["s1", "s2"]
    assert employees.exists("SALE1")


def test_only_admin_deletes(env):
    svc, employees = env
    hire(svc)
    employees.salaries["SALE1"] = ["s1"]

    with pytest.raises(AuthorizationError):
        svc.delete_employee(current_role=Role.HR, employee_id="SALE1")
    assert employees.salaries["SALE1"] == ["s1"]
    assert employees.exists("SALE1")


def test_role_is_checked_before_uniqueness(env):
    svc, _ = env
    hire(svc)

    # A USER caller must not learn whether the email is already taken.
    with pytest.raises(AuthorizationError):
        hire(svc, current_role=Role.USER)


def test_to_dict_includes_age(env):
    svc, _ = env
    employee = hire(svc)

    payload = employee.to_dict(today=date(2025, 6, 15))

    assert payload["age"] == 35
    assert payload["birthday"] == "1990-06-15"
    assert payload["role"] == "USER"
