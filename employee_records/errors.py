"""
Exception types raised by the employee records core.
"""

from __future__ import annotations

from typing import Optional


class RecordsError(Exception):
    """Base class for errors raised by this package."""


class EmployeeNotFoundError(RecordsError, LookupError):
    """
    Raised when a lookup by employee number or by name matches no record.

    The query that failed is kept on the instance so callers can report it.
    """

    message = "No employee found."

    def __init__(
        self,
        employee_number: Optional[int] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> None:
        super().__init__(self.message)
        self.employee_number = employee_number
        self.first_name = first_name
        self.last_name = last_name


__all__ = ["EmployeeNotFoundError", "RecordsError"]
