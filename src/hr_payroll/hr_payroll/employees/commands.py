from __future__ import annotations

from typing import Optional

import click
from flask import Flask

from ..common.cli import ROLE_CHOICE, caller_role_option, domain_errors, echo_json, to_role
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.cli.group("employees")
    def employees():
        """Manage employees."""

    @employees.command("add")
    @click.option("--first-name", required=True)
    @click.option("--last-name", required=True)
    @click.option("--nic", required=True)
    @click.option("--gender", required=True)
    @click.option("--phone", required=True)
    @click.option("--email", required=True)
    @click.option("--birthday", required=True, help="YYYY-MM-DD")
    @click.option("--dept-id", required=True)
    @click.option(
        "--employee-role",
        type=ROLE_CHOICE,
        callback=to_role,
        default=Role.USER.value,
        show_default=True,
        help="Role given to the new employee.",
    )
    @caller_role_option
    def add(
        first_name: str,
        last_name: str,
        nic: str,
        gender: str,
        phone: str,
        email: str,
        birthday: str,
        dept_id: str,
        employee_role: Role,
        current_role: Role,
    ):
        """Hire an employee; the id is derived from the department."""
        with domain_errors():
            employee = container.employee_service.add_employee(
                current_role=current_role,
                first_name=first_name,
                last_name=last_name,
                nic=nic,
                gender=gender,
                phone=phone,
                email=email,
                birthday=parse_iso_date(birthday),
                dept_id=dept_id,
                role=employee_role,
            )
        echo_json(employee.to_dict())

    @employees.command("list")
    @click.option("--dept-id", default=None, help="Only employees of this department.")
    def list_(dept_id: Optional[str]):
        with domain_errors():
            if dept_id:
                found = container.employee_service.list_employees_in_department(dept_id)
            else:
                found = container.employee_service.list_employees()
        echo_json([e.to_dict() for e in found])

    @employees.command("show")
    @click.argument("employee_id")
    def show(employee_id: str):
        with domain_errors():
            employee = container.employee_service.get_employee(employee_id)
        echo_json(employee.to_dict())

    @employees.command("update-contact")
    @click.argument("employee_id")
    @click.option("--phone", default=None)
    @click.option("--email", default=None)
    def update_contact(employee_id: str, phone: Optional[str], email: Optional[str]):
        with domain_errors():
            employee = container.employee_service.update_contact(employee_id=employee_id, phone=phone, email=email)
        echo_json(employee.to_dict())

    @employees.command("delete")
    @click.argument("employee_id")
    @caller_role_option
    def delete(employee_id: str, current_role: Role):
        """Delete an employee with their salary snapshots and attendance."""
        with domain_errors():
            container.employee_service.delete_employee(current_role=current_role, employee_id=employee_id)
        click.echo(f"Deleted employee {employee_id}")
