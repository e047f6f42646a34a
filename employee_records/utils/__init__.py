"""
Utilities package for the employee records registry.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from employee_records.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
