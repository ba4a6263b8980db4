"""Entry point for the Flask CLI: ``flask --app app payroll compute ...``."""

from src.hr_payroll.hr_payroll.main import create_app

app = create_app()
