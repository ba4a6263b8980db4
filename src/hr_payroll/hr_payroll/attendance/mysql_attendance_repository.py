from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import AttendanceStatus
from ..core.exceptions import AttendanceAlreadyExistsError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_hours, db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=r["employee_id"],
        work_date=as_date(r["work_date"]),
        status=AttendanceStatus(r["status"]),
        overtime_hours=as_hours(r.get("overtime_hours")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date, status, overtime_hours
                FROM attendance_records
                WHERE attendance_id=%s
                """,
                (int(attendance_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date, status, overtime_hours
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
        overtime_hours: float,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(employee_id, work_date, status, overtime_hours)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (employee_id, work_date, status.value, float(overtime_hours)),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if e.errno != errorcode.ER_DUP_ENTRY:
                raise
            raise AttendanceAlreadyExistsError(
                f"Attendance already exists for employee id: {employee_id} on date: {work_date.isoformat()}"
            ) from e

    def update(self, *, attendance_id: int, status: AttendanceStatus, overtime_hours: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET status=%s, overtime_hours=%s
                WHERE attendance_id=%s
                """,
                (status.value, float(overtime_hours), int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_for_date(self, work_date: date, *, status: Optional[AttendanceStatus] = None) -> Sequence[AttendanceRecord]:
        clauses = ["work_date=%s"]
        params: list[object] = [work_date]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, employee_id, work_date, status, overtime_hours
                FROM attendance_records
                WHERE {where}
                ORDER BY employee_id
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_date_and_department(self, work_date: date, dept_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ar.attendance_id, ar.employee_id, ar.work_date, ar.status, ar.overtime_hours
                FROM attendance_records ar
                JOIN employees e ON e.employee_id = ar.employee_id
                WHERE ar.work_date=%s AND e.dept_id=%s
                ORDER BY ar.employee_id
                """,
                (work_date, dept_id),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_range(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["employee_id=%s", "work_date BETWEEN %s AND %s"]
        params: list[object] = [employee_id, start_date, end_date]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, employee_id, work_date, status, overtime_hours
                FROM attendance_records
                WHERE {where}
                ORDER BY work_date
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
