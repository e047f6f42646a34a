"""
Employee Records - an in-memory employee registry.

This package provides:

- `Employee`, a mutable record holding names, salary, hire state and an
  immutable employee number
- `Database`, which hands out employee numbers, looks employees up and lists
  them by employment status
- An interactive text menu built on Typer (`employee-records menu`)
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from employee_records.config import Settings, get_settings
from employee_records.database import Database
from employee_records.domain.models import Employee
from employee_records.errors import EmployeeNotFoundError, RecordsError
from employee_records.reporter import build_table, print_employees
from employee_records.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Core
    "Database",
    "Employee",
    # Errors
    "EmployeeNotFoundError",
    "RecordsError",
    # Reporting
    "build_table",
    "print_employees",
    # Logging
    "configure_logging",
    "get_logger",
]
