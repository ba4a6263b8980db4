from __future__ import annotations

import click
from flask import Flask

from ..common.cli import domain_errors, echo_json
from ..common.datetime_utils import parse_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.cli.group("payroll")
    def payroll():
        """Compute and inspect salary snapshots."""

    @payroll.command("compute")
    @click.argument("employee_id")
    @click.argument("dept_id")
    @click.argument("start")
    @click.argument("end")
    @click.option("--bonus", type=int, default=0, show_default=True, help="Bonus in whole currency units.")
    def compute(employee_id: str, dept_id: str, start: str, end: str, bonus: int):
        """Compute a new salary snapshot for START..END (YYYY-MM-DD, inclusive)."""
        with domain_errors():
            record = container.salary_service.compute_salary(
                employee_id=employee_id,
                dept_id=dept_id,
                start_date=parse_iso_date(start),
                end_date=parse_iso_date(end),
                bonus=bonus,
            )
        echo_json(record.to_dict())

    @payroll.command("show")
    @click.argument("salary_id", type=int)
    def show(salary_id: int):
        """Print one salary snapshot."""
        with domain_errors():
            record = container.salary_service.get_salary(salary_id)
        echo_json(record.to_dict())

    @payroll.command("history")
    @click.argument("employee_id")
    def history(employee_id: str):
        """Print every salary snapshot of an employee, oldest first."""
        with domain_errors():
            records = container.salary_service.list_salaries_for_employee(employee_id)
        echo_json([r.to_dict() for r in records])
