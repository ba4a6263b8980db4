from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Optional

import click

from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import DomainError

ROLE_CHOICE = click.Choice([r.value for r in Role], case_sensitive=False)
STATUS_CHOICE = click.Choice([s.value for s in AttendanceStatus], case_sensitive=False)


def echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@contextmanager
def domain_errors():
    """Report a DomainError as a click error (message on stderr, exit code 1)."""
    try:
        yield
    except DomainError as e:
        raise click.ClickException(str(e))


def to_role(ctx, param, value: Optional[str]) -> Optional[Role]:
    return Role(value) if value is not None else None


def to_status(ctx, param, value: Optional[str]) -> Optional[AttendanceStatus]:
    return AttendanceStatus(value) if value is not None else None


def caller_role_option(func):
    """``--role``: the role the operator acts as; passed on as ``current_role``."""
    return click.option(
        "--role",
        "current_role",
        type=ROLE_CHOICE,
        callback=to_role,
        required=True,
        help="Role of the caller (ADMIN, HR or USER).",
    )(func)
