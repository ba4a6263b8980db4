from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_hours, db_cursor, fetchall, fetchone
from .model import SalaryRecord
from .repository import SalaryRepository

_COLUMNS = (
    "employee_id, dept_id, start_date, end_date, base_salary, "
    "days_present, days_leave, days_half_day, days_no_pay, "
    "overtime_hours, overtime_rate, overtime_pay, deduction, bonus, total_salary"
)


def _to_salary(r: dict) -> SalaryRecord:
    return SalaryRecord(
        salary_id=int(r["salary_id"]),
        employee_id=r["employee_id"],
        dept_id=r["dept_id"],
        start_date=as_date(r["start_date"]),
        end_date=as_date(r["end_date"]),
        base_salary=int(r["base_salary"]),
        days_present=int(r["days_present"]),
        days_leave=int(r["days_leave"]),
        days_half_day=int(r["days_half_day"]),
        days_no_pay=int(r["days_no_pay"]),
        overtime_hours=as_hours(r["overtime_hours"]),
        overtime_rate=int(r["overtime_rate"]),
        overtime_pay=int(r["overtime_pay"]),
        deduction=int(r["deduction"]),
        bonus=int(r["bonus"]),
        total_salary=int(r["total_salary"]),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: SalaryRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO salary_records({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.employee_id,
                    record.dept_id,
                    record.start_date,
                    record.end_date,
                    record.base_salary,
                    record.days_present,
                    record.days_leave,
                    record.days_half_day,
                    record.days_no_pay,
                    record.overtime_hours,
                    record.overtime_rate,
                    record.overtime_pay,
                    record.deduction,
                    record.bonus,
                    record.total_salary,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, salary_id: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT salary_id, {_COLUMNS} FROM salary_records WHERE salary_id=%s", (int(salary_id),))
            r = fetchone(cur)
            return _to_salary(r) if r else None

    def list_for_employee(self, employee_id: str) -> Sequence[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT salary_id, {_COLUMNS} FROM salary_records WHERE employee_id=%s ORDER BY salary_id",
                (employee_id,),
            )
            return [_to_salary(r) for r in fetchall(cur)]

    def exists_for_department(self, dept_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM salary_records WHERE dept_id=%s LIMIT 1", (dept_id,))
            return fetchone(cur) is not None
