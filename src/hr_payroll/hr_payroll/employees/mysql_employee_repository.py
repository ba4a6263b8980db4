from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import Role
from ..core.exceptions import EmployeeAlreadyExistsError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, first_name, last_name, nic, gender, phone, email, birthday, dept_id, role"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=r["employee_id"],
        first_name=r["first_name"],
        last_name=r["last_name"],
        nic=r["nic"],
        gender=r["gender"],
        phone=r["phone"],
        email=r["email"],
        birthday=as_date(r["birthday"]),
        dept_id=r["dept_id"],
        role=Role(r.get("role") or Role.USER.value),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def exists(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee_id,))
            return fetchone(cur) is not None

    def exists_by_email(self, email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE email=%s", (email,))
            return fetchone(cur) is not None

    def exists_by_nic(self, nic: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE nic=%s", (nic,))
            return fetchone(cur) is not None

    def max_number_in_department(self, dept_id: str) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT MAX(CAST(SUBSTRING(employee_id, CHAR_LENGTH(%s) + 1) AS UNSIGNED)) AS max_number
                FROM employees
                WHERE dept_id=%s
                """,
                (dept_id, dept_id),
            )
            r = fetchone(cur)
            if not r or r.get("max_number") is None:
                return None
            return int(r["max_number"])

    def create(self, employee: Employee) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO employees({_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee.employee_id,
                        employee.first_name,
                        employee.last_name,
                        employee.nic,
                        employee.gender,
                        employee.phone,
                        employee.email,
                        employee.birthday,
                        employee.dept_id,
                        employee.role.value,
                    ),
                )
        except mysql.connector.IntegrityError as e:
            # A concurrent insert took the same id, email or NIC.
            if e.errno != errorcode.ER_DUP_ENTRY:
                raise
            raise EmployeeAlreadyExistsError(
                f"Employee {employee.employee_id} ({employee.email}, NIC {employee.nic}) already exists"
            ) from e

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_by_department(self, dept_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE dept_id=%s ORDER BY employee_id", (dept_id,))
            return [_to_employee(r) for r in fetchall(cur)]

    def update_contact(self, *, employee_id: str, phone: str, email: str) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "UPDATE employees SET phone=%s, email=%s WHERE employee_id=%s",
                    (phone, email, employee_id),
                )
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            if e.errno != errorcode.ER_DUP_ENTRY:
                raise
            raise EmployeeAlreadyExistsError(f"Employee with email {email} already exists") from e

    def delete_with_history(self, employee_id: str) -> tuple[int, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_records WHERE employee_id=%s", (employee_id,))
            salaries = int(cur.rowcount)
            cur.execute("DELETE FROM attendance_records WHERE employee_id=%s", (employee_id,))
            days = int(cur.rowcount)
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return salaries, days
