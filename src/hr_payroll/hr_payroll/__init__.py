"""HR Payroll package.

Feature modules (departments, employees, attendance, payroll) each keep a
domain model, a repository protocol with its MySQL implementation and a
service layer. ``container`` wires them together and ``main`` builds the
Flask application that hosts the operator CLI.
"""
