from __future__ import annotations

import sys
from typing import Callable, Dict

import typer
from rich.console import Console

from employee_records.config import get_settings
from employee_records.database import Database
from employee_records.errors import EmployeeNotFoundError
from employee_records.reporter import print_employees
from employee_records.utils.logging import configure_logging

app = typer.Typer(help="Employee records CLI.")

MENU_TEXT = """
Employee Database
-------------
1) Hire a new employee
2) Fire an employee
3) Promote an employee
4) List all employees
5) List all current employees
6) List all former employees
7) Demote an employee
0) Quit
"""


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | first_employee_number={settings.first_employee_number} "
        f"starting_salary={settings.default_starting_salary} "
        f"adjustment={settings.default_adjustment} | log_level={settings.log_level}"
    )


@app.command()
def demo() -> None:
    """
    Populate a database with three employees and list them.
    """
    _setup_logging()
    console = Console()
    db = Database()

    emp1 = db.add_employee("Greg", "Wallis")
    emp1.fire()

    emp2 = db.add_employee("Marc", "White")
    emp2.hire()
    emp2.salary = 100000

    emp3 = db.add_employee("John", "Doe")
    emp3.hire()
    emp3.salary = 10000
    db.promote(emp3.employee_number)

    typer.echo("all employees:\n")
    db.display_all(console)

    typer.echo("current employees:\n")
    db.display_current(console)

    typer.echo("former employees:\n")
    db.display_former(console)


class _Menu:
    """State shared by the interactive menu actions."""

    def __init__(self, db: Database, console: Console, table: bool) -> None:
        self.db = db
        self.console = console
        self.table = table

    def hire(self) -> None:
        first_name = typer.prompt("First name?")
        last_name = typer.prompt("Last name?")
        employee = self.db.add_employee(first_name, last_name)
        employee.hire()
        typer.echo(f"Employee {employee.employee_number} hired.")

    def fire(self) -> None:
        employee_number = typer.prompt("Employee number?", type=int)
        try:
            self.db.fire(employee_number)
        except EmployeeNotFoundError as exc:
            typer.echo(f"Unable to terminate employee: {exc}", err=True)
            return
        typer.echo(f"Employee {employee_number} terminated.")

    def promote(self) -> None:
        employee_number = typer.prompt("Employee number?", type=int)
        amount = typer.prompt("How much of a raise?", type=int)
        try:
            self.db.promote(employee_number, amount)
        except EmployeeNotFoundError as exc:
            typer.echo(f"Unable to promote employee: {exc}", err=True)

    def demote(self) -> None:
        employee_number = typer.prompt("Employee number?", type=int)
        amount = typer.prompt("How much of a cut?", type=int)
        try:
            self.db.demote(employee_number, amount)
        except EmployeeNotFoundError as exc:
            typer.echo(f"Unable to demote employee: {exc}", err=True)

    def list_all(self) -> None:
        if self.table:
            print_employees(self.db.all_employees(), "All employees", self.console)
        else:
            self.db.display_all(self.console)

    def list_current(self) -> None:
        if self.table:
            print_employees(self.db.current_employees(), "Current employees", self.console)
        else:
            self.db.display_current(self.console)

    def list_former(self) -> None:
        if self.table:
            print_employees(self.db.former_employees(), "Former employees", self.console)
        else:
            self.db.display_former(self.console)

    def actions(self) -> Dict[int, Callable[[], None]]:
        return {
            1: self.hire,
            2: self.fire,
            3: self.promote,
            4: self.list_all,
            5: self.list_current,
            6: self.list_former,
            7: self.demote,
        }


@app.command()
def menu(
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Render employee listings as a table instead of text blocks.",
    ),
) -> None:
    """
    Run the interactive employee database menu.
    """
    _setup_logging()
    session = _Menu(Database(), Console(), table)
    actions = session.actions()

    while True:
        typer.echo(MENU_TEXT)
        selection = typer.prompt("--->", type=int, prompt_suffix="")
        if selection == 0:
            break
        action = actions.get(selection)
        if action is None:
            typer.echo("Unknown command.", err=True)
            continue
        action()


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
