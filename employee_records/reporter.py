from __future__ import annotations

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from employee_records.domain.models import Employee


def build_table(employees: Iterable[Employee], title: str = "Employees") -> Table:
    """
    Build a rich table with one row per employee, in the order given.
    """
    table = Table(title=title, box=box.ROUNDED)

    table.add_column("Number", justify="right", style="magenta", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Salary", justify="right", style="bold green")

    for employee in employees:
        table.add_row(
            str(employee.employee_number),
            Text(f"{employee.last_name}, {employee.first_name}"),
            employee.status,
            f"${employee.salary:,}",
        )
    return table


def print_employees(
    employees: Iterable[Employee],
    title: str = "Employees",
    console: Optional[Console] = None,
) -> None:
    """
    Render employees as a rich table.

    Prints a short notice instead of an empty table when there is nobody to list.
    """
    console = console or Console()
    employees = list(employees)

    if not employees:
        console.print("[yellow]No employees to display.[/yellow]")
        return

    console.print(build_table(employees, title=title))


__all__ = ["build_table", "print_employees"]
