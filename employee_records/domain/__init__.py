"""
Domain package for the employee records registry.

Exports the core domain models used by the database and the CLI.
Keep this package focused on data definitions and record-level behavior.
"""

from employee_records.domain.models import UNASSIGNED_EMPLOYEE_NUMBER, Employee

__all__ = [
    "Employee",
    "UNASSIGNED_EMPLOYEE_NUMBER",
]
