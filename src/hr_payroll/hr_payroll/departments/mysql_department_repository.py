from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DepartmentAlreadyExistsError, DepartmentInUseError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Department
from .repository import DepartmentRepository


def _to_department(r: dict) -> Department:
    return Department(
        dept_id=r["dept_id"],
        name=r["name"],
        base_salary=int(r["base_salary"]),
        overtime_rate=int(r["overtime_rate"]),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT dept_id, name, base_salary, overtime_rate FROM departments ORDER BY name")
            return [_to_department(r) for r in fetchall(cur)]

    def get_by_id(self, dept_id: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT dept_id, name, base_salary, overtime_rate FROM departments WHERE dept_id=%s",
                (dept_id,),
            )
            r = fetchone(cur)
            return _to_department(r) if r else None

    def create(self, department: Department) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO departments(dept_id, name, base_salary, overtime_rate)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (department.dept_id, department.name, department.base_salary, department.overtime_rate),
                )
        except mysql.connector.IntegrityError as e:
            if e.errno != errorcode.ER_DUP_ENTRY:
                raise
            raise DepartmentAlreadyExistsError(f"Department with id {department.dept_id} already exists") from e

    def update_pay(self, *, dept_id: str, base_salary: int, overtime_rate: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE departments SET base_salary=%s, overtime_rate=%s WHERE dept_id=%s",
                (base_salary, overtime_rate, dept_id),
            )
            return cur.rowcount > 0

    def delete_by_id(self, dept_id: str) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM departments WHERE dept_id=%s", (dept_id,))
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            if e.errno != errorcode.ER_ROW_IS_REFERENCED_2:
                raise
            raise DepartmentInUseError(f"Department {dept_id} is still referenced by employees or salaries") from e
