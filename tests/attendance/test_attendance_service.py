from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

import pytest

from src.hr_payroll.hr_payroll.attendance.model import AttendanceRecord
from src.hr_payroll.hr_payroll.attendance.service import AttendanceService, effective_overtime
from src.hr_payroll.hr_payroll.core.enums import AttendanceStatus, Role
from src.hr_payroll.hr_payroll.core.exceptions import (
    AttendanceAlreadyExistsError,
    AttendanceNotFoundError,
    AuthorizationError,
    DepartmentNotFoundError,
    EmployeeNotFoundError,
    InvalidDateRangeError,
    ValidationError,
)
from src.hr_payroll.hr_payroll.departments.model import Department


class InMemoryAttendance:
    def __init__(self):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0
        self.dept_of: dict[str, str] = {}

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._by_id.get(int(attendance_id))

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._by_id.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def create(self, *, employee_id, work_date, status, overtime_hours) -> int:
        self._id += 1
        self._by_id[self._id] = AttendanceRecord(self._id, employee_id, work_date, status, overtime_hours)
        return self._id

    def update(self, *, attendance_id, status, overtime_hours) -> bool:
        r = self._by_id.get(attendance_id)
        if not r:
            return False
        self._by_id[attendance_id] = replace(r, status=status, overtime_hours=overtime_hours)
        return True

    def list_for_date(self, work_date, *, status=None):
        return [r for r in self._by_id.values() if r.work_date == work_date and (status is None or r.status == status)]

    def list_for_date_and_department(self, work_date, dept_id):
        return [r for r in self._by_id.values() if r.work_date == work_date and self.dept_of.get(r.employee_id) == dept_id]

    def list_range(self, *, employee_id, start_date, end_date, status=None):
        return [
            r
            for r in self._by_id.values()
            if r.employee_id == employee_id and start_date <= r.work_date <= end_date
        ]


@dataclass
class InMemoryEmployees:
    ids: set

    def exists(self, employee_id: str) -> bool:
        return employee_id in self.ids


@dataclass
class InMemoryDepartments:
    departments: dict

    def get_by_id(self, dept_id: str):
        return self.departments.get(dept_id)


def make_service():
    attendance = InMemoryAttendance()
    attendance.dept_of = {"FINA1": "FINA", "FINA2": "FINA", "OPER1": "OPER"}
    departments = InMemoryDepartments(
        {
            "FINA": Department("FINA", "Finance", 35000, 150),
            "OPER": Department("OPER", "Operations", 30000, 120),
        }
    )
    svc = AttendanceService(attendance, InMemoryEmployees({"FINA1", "FINA2", "OPER1"}), departments)
    return svc, attendance


def test_hr_can_record_present_day_with_overtime():
    svc, repo = make_service()

    record = svc.create_attendance(
        current_role=Role.HR,
        employee_id="FINA1",
        work_date=date(2025, 1, 6),
        status=AttendanceStatus.PRESENT,
        overtime_hours=2.5,
    )

    assert record.attendance_id == 1
    assert repo.get_by_id(1).overtime_hours == 2.5


@pytest.mark.parametrize("status", [AttendanceStatus.LEAVE, AttendanceStatus.NO_PAY, AttendanceStatus.HALF_DAY])
def test_overtime_is_zeroed_for_non_working_statuses(status):
    svc, repo = make_service()

    record = svc.create_attendance(
        current_role=Role.ADMIN,
        employee_id="FINA1",
        work_date=date(2025, 1, 6),
        status=status,
        overtime_hours=3.0,
    )

    assert record.overtime_hours == 0.0
    assert repo.get_by_id(record.attendance_id).overtime_hours == 0.0


def test_missing_overtime_defaults_to_zero():
    assert effective_overtime(AttendanceStatus.PRESENT, None) == 0.0


def test_negative_overtime_is_rejected():
    svc, _ = make_service()

    with pytest.raises(ValidationError):
        svc.create_attendance(
            current_role=Role.HR,
            employee_id="FINA1",
            work_date=date(2025, 1, 6),
            status=AttendanceStatus.PRESENT,
            overtime_hours=-1,
        )


def test_status_may_be_given_as_string():
    svc, _ = make_service()

    record = svc.create_attendance(
        current_role=Role.HR, employee_id="FINA1", work_date=date(2025, 1, 6), status="HALF_DAY"
    )

    assert record.status is AttendanceStatus.HALF_DAY


def test_unknown_status_is_rejected():
    svc, _ = make_service()

    with pytest.raises(ValidationError):
        svc.create_attendance(current_role=Role.HR, employee_id="FINA1", work_date=date(2025, 1, 6), status="SICK")


def test_second_record_for_same_day_is_rejected():
    svc, _ = make_service()
    svc.create_attendance(
        current_role=Role.HR, employee_id="FINA1", work_date=date(2025, 1, 6), status=AttendanceStatus.PRESENT
    )

    with pytest.raises(AttendanceAlreadyExistsError):
        svc.create_attendance(
            current_role=Role.HR, employee_id="FINA1", work_date=date(2025, 1, 6), status=AttendanceStatus.LEAVE
        )


def test_plain_user_cannot_record_attendance():
    svc, _ = make_service()

    with pytest.raises(AuthorizationError):
        svc.create_attendance(
            current_role=Role.USER, employee_id="FINA1", work_date=date(2025, 1, 6), status=AttendanceStatus.PRESENT
        )


def test_unknown_employee_cannot_get_attendance():
    svc, _ = make_service()

    with pytest.raises(EmployeeNotFoundError):
        svc.create_attendance(
            current_role=Role.HR, employee_id="GHOST", work_date=date(2025, 1, 6), status=AttendanceStatus.PRESENT
        )


def test_update_to_leave_clears_overtime():
    svc, repo = make_service()
    created = svc.create_attendance(
        current_role=Role.HR,
        employee_id="FINA1",
        work_date=date(2025, 1, 6),
        status=AttendanceStatus.PRESENT,
        overtime_hours=4.0,
    )

    updated = svc.update_attendance(
        current_role=Role.HR, attendance_id=created.attendance_id, status=AttendanceStatus.LEAVE, overtime_hours=2.0
    )

    assert updated.status is AttendanceStatus.LEAVE
    assert repo.get_by_id(created.attendance_id).overtime_hours == 0.0


def test_update_keeps_overtime_when_not_given():
    svc, repo = make_service()
    created = svc.create_attendance(
        current_role=Role.HR,
        employee_id="FINA1",
        work_date=date(2025, 1, 6),
        status=AttendanceStatus.PRESENT,
        overtime_hours=1.5,
    )

    svc.update_attendance(current_role=Role.ADMIN, attendance_id=created.attendance_id)

    assert repo.get_by_id(created.attendance_id).overtime_hours == 1.5


def test_update_unknown_record():
    svc, _ = make_service()

    with pytest.raises(AttendanceNotFoundError):
        svc.update_attendance(current_role=Role.HR, attendance_id=77, status=AttendanceStatus.PRESENT)


def test_lookup_for_day_without_record():
    svc, _ = make_service()

    with pytest.raises(AttendanceNotFoundError):
        svc.get_for_employee_and_date("FINA1", date(2025, 1, 6))


def test_listing_by_date_status_and_department():
    svc, _ = make_service()
    day = date(2025, 1, 6)
    svc.create_attendance(current_role=Role.HR, employee_id="FINA1", work_date=day, status=AttendanceStatus.PRESENT)
    svc.create_attendance(current_role=Role.HR, employee_id="FINA2", work_date=day, status=AttendanceStatus.NO_PAY)
    svc.create_attendance(current_role=Role.HR, employee_id="OPER1", work_date=day, status=AttendanceStatus.PRESENT)

    assert len(svc.list_for_date(day)) == 3
    assert [r.employee_id for r in svc.list_for_date_and_status(day, AttendanceStatus.NO_PAY)] == ["FINA2"]
    assert {r.employee_id for r in svc.list_for_date_and_department(day, "FINA")} == {"FINA1", "FINA2"}
    assert svc.list_for_date(date(2025, 1, 7)) == []


def test_listing_for_unknown_department():
    svc, _ = make_service()

    with pytest.raises(DepartmentNotFoundError):
        svc.list_for_date_and_department(date(2025, 1, 6), "NOPE")


def test_range_listing_validates_order():
    svc, _ = make_service()
    svc.create_attendance(
        current_role=Role.HR, employee_id="FINA1", work_date=date(2025, 1, 6), status=AttendanceStatus.PRESENT
    )

    assert len(svc.list_for_employee_range("FINA1", date(2025, 1, 1), date(2025, 1, 31))) == 1
    with pytest.raises(InvalidDateRangeError):
        svc.list_for_employee_range("FINA1", date(2025, 1, 31), date(2025, 1, 1))
