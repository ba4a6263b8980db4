from __future__ import annotations

from typing import Optional

import click
from flask import Flask

from ..common.cli import STATUS_CHOICE, caller_role_option, domain_errors, echo_json, to_status
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.enums import AttendanceStatus, Role


def register(app: Flask, container: Container) -> None:
    @app.cli.group("attendance")
    def attendance():
        """Record and query daily attendance."""

    @attendance.command("record")
    @click.argument("employee_id")
    @click.argument("work_date")
    @click.argument("status", type=STATUS_CHOICE, callback=to_status)
    @click.option("--overtime", type=float, default=None, help="Overtime hours (ignored unless PRESENT).")
    @caller_role_option
    def record(employee_id: str, work_date: str, status: AttendanceStatus, overtime: Optional[float], current_role: Role):
        """Record STATUS for EMPLOYEE_ID on WORK_DATE (YYYY-MM-DD)."""
        with domain_errors():
            created = container.attendance_service.create_attendance(
                current_role=current_role,
                employee_id=employee_id,
                work_date=parse_iso_date(work_date),
                status=status,
                overtime_hours=overtime,
            )
        echo_json(created.to_dict())

    @attendance.command("update")
    @click.argument("attendance_id", type=int)
    @click.option("--status", type=STATUS_CHOICE, callback=to_status, default=None)
    @click.option("--overtime", type=float, default=None)
    @caller_role_option
    def update(attendance_id: int, status: Optional[AttendanceStatus], overtime: Optional[float], current_role: Role):
        with domain_errors():
            updated = container.attendance_service.update_attendance(
                current_role=current_role,
                attendance_id=attendance_id,
                status=status,
                overtime_hours=overtime,
            )
        echo_json(updated.to_dict())

    @attendance.command("day")
    @click.argument("work_date")
    @click.option("--status", type=STATUS_CHOICE, callback=to_status, default=None)
    @click.option("--dept-id", default=None)
    def day(work_date: str, status: Optional[AttendanceStatus], dept_id: Optional[str]):
        """List records for WORK_DATE, optionally by status or department."""
        service = container.attendance_service
        with domain_errors():
            when = parse_iso_date(work_date)
            if dept_id:
                records = service.list_for_date_and_department(when, dept_id)
            elif status is not None:
                records = service.list_for_date_and_status(when, status)
            else:
                records = service.list_for_date(when)
        echo_json([r.to_dict() for r in records])

    @attendance.command("range")
    @click.argument("employee_id")
    @click.argument("start")
    @click.argument("end")
    def range_(employee_id: str, start: str, end: str):
        """List an employee's records for START..END (inclusive)."""
        with domain_errors():
            records = container.attendance_service.list_for_employee_range(
                employee_id, parse_iso_date(start), parse_iso_date(end)
            )
        echo_json([r.to_dict() for r in records])
