from __future__ import annotations

from pathlib import Path

import click
from flask import Flask

from .bootstrap import apply_schema, list_tables


def register(app: Flask, db_config: dict, *, schema_path: Path) -> None:
    @app.cli.group("db")
    def db():
        """Database maintenance."""

    @db.command("init")
    def init():
        """Apply database/schema.sql (idempotent)."""
        apply_schema(db_config, schema_path=schema_path)
        tables = list_tables(db_config)
        click.echo(
            "OK: Applied schema.sql -> "
            f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
            f"(tables={len(tables)})"
        )
