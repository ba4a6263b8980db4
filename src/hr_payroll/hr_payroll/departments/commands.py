from __future__ import annotations

from typing import Optional

import click
from flask import Flask

from ..common.cli import caller_role_option, domain_errors, echo_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.cli.group("departments")
    def departments():
        """Manage departments and their pay configuration."""

    @departments.command("add")
    @click.argument("name")
    @click.option("--base-salary", type=int, required=True)
    @click.option("--overtime-rate", type=int, required=True, help="Pay per overtime hour.")
    @caller_role_option
    def add(name: str, base_salary: int, overtime_rate: int, current_role):
        with domain_errors():
            department = container.department_service.add_department(
                current_role=current_role,
                name=name,
                base_salary=base_salary,
                overtime_rate=overtime_rate,
            )
        echo_json(department.to_dict())

    @departments.command("list")
    def list_():
        echo_json([d.to_dict() for d in container.department_service.list_departments()])

    @departments.command("show")
    @click.argument("dept_id")
    def show(dept_id: str):
        with domain_errors():
            department = container.department_service.get_department(dept_id)
        echo_json(department.to_dict())

    @departments.command("update")
    @click.argument("dept_id")
    @click.option("--base-salary", type=int, default=None)
    @click.option("--overtime-rate", type=int, default=None)
    @caller_role_option
    def update(dept_id: str, base_salary: Optional[int], overtime_rate: Optional[int], current_role):
        """Change pay parameters; values <= 0 leave the stored ones unchanged."""
        with domain_errors():
            department = container.department_service.update_department(
                current_role=current_role,
                dept_id=dept_id,
                base_salary=base_salary,
                overtime_rate=overtime_rate,
            )
        echo_json(department.to_dict())

    @departments.command("delete")
    @click.argument("dept_id")
    @caller_role_option
    def delete(dept_id: str, current_role):
        with domain_errors():
            container.department_service.delete_department(current_role=current_role, dept_id=dept_id)
        click.echo(f"Deleted department {dept_id}")
