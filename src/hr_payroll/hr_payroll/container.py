from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.mysql_salary_repository import MySQLSalaryRepository
from .payroll.repository import SalaryRepository
from .payroll.service import SalaryService


@dataclass(frozen=True)
class Container:
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    salaries_repo: SalaryRepository

    department_service: DepartmentService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    salary_service: SalaryService


def wire(
    *,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    salaries_repo: SalaryRepository,
) -> Container:
    return Container(
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        salaries_repo=salaries_repo,
        department_service=DepartmentService(departments_repo, employees_repo, salaries_repo),
        employee_service=EmployeeService(employees_repo, departments_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo, departments_repo),
        salary_service=SalaryService(salaries_repo, attendance_repo, employees_repo, departments_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        departments_repo=MySQLDepartmentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        salaries_repo=MySQLSalaryRepository(conn),
    )
