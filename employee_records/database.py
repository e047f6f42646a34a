"""
In-memory employee database.

Usage:
    from employee_records.database import Database

    db = Database()
    emp = db.add_employee("Greg", "Wallis")
    emp.hire()
    db.promote(emp.employee_number, 500)
    db.display_current()

Records are kept in a dict keyed by employee number. Dict order is insertion
order, so every enumeration below walks employees in the order they were
added. Records are never removed; firing only clears the `hired` flag.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional

from rich.console import Console

from employee_records.config import get_settings
from employee_records.domain.models import Employee
from employee_records.errors import EmployeeNotFoundError
from employee_records.utils.logging import get_logger

log = get_logger(__name__)


class Database:
    """
    Owns employee records and hands out employee numbers.

    Parameters
    ----------
    first_employee_number : int | None
        Number given to the first employee added. Defaults to
        `settings.first_employee_number`.
    starting_salary : int | None
        Salary of newly added employees. Defaults to
        `settings.default_starting_salary`.
    default_adjustment : int | None
        Amount used by `promote`/`demote` when none is passed. Defaults to
        `settings.default_adjustment`.
    """

    def __init__(
        self,
        first_employee_number: Optional[int] = None,
        starting_salary: Optional[int] = None,
        default_adjustment: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self._employees: Dict[int, Employee] = {}
        self._next_employee_number = (
            first_employee_number
            if first_employee_number is not None
            else settings.first_employee_number
        )
        self._starting_salary = (
            starting_salary if starting_salary is not None else settings.default_starting_salary
        )
        self._default_adjustment = (
            default_adjustment if default_adjustment is not None else settings.default_adjustment
        )

    @property
    def next_employee_number(self) -> int:
        return self._next_employee_number

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees.values()))

    def __contains__(self, employee_number: object) -> bool:
        return employee_number in self._employees

    def add_employee(self, first_name: str, last_name: str) -> Employee:
        """
        Create an employee with the next free number and store it.

        The returned object is the stored record, not a copy. The employee
        starts out not hired; callers hire explicitly.
        """
        employee = Employee(
            first_name=first_name,
            last_name=last_name,
            employee_number=self._next_employee_number,
            salary=self._starting_salary,
        )
        self._next_employee_number += 1
        self._employees[employee.employee_number] = employee
        log.debug(
            "Employee added",
            extra={
                "employee_number": employee.employee_number,
                "first_name": first_name,
                "last_name": last_name,
            },
        )
        return employee

    def get_employee(self, employee_number: int) -> Employee:
        """
        Return the employee with `employee_number`.

        Raises
        ------
        EmployeeNotFoundError
            If no employee has that number.
        """
        try:
            return self._employees[employee_number]
        except KeyError:
            log.debug("Employee lookup missed", extra={"employee_number": employee_number})
            raise EmployeeNotFoundError(employee_number=employee_number) from None

    def get_employee_by_name(self, first_name: str, last_name: str) -> Employee:
        """
        Return the earliest added employee with both names.

        Raises
        ------
        EmployeeNotFoundError
            If no employee matches.
        """
        for employee in self._employees.values():
            if employee.first_name == first_name and employee.last_name == last_name:
                return employee
        log.debug(
            "Employee lookup missed",
            extra={"first_name": first_name, "last_name": last_name},
        )
        raise EmployeeNotFoundError(first_name=first_name, last_name=last_name)

    # Mutations addressed by employee number

    def hire(self, employee_number: int) -> Employee:
        employee = self.get_employee(employee_number)
        employee.hire()
        log.debug("Employee hired", extra={"employee_number": employee_number})
        return employee

    def fire(self, employee_number: int) -> Employee:
        employee = self.get_employee(employee_number)
        employee.fire()
        log.debug("Employee fired", extra={"employee_number": employee_number})
        return employee

    def promote(self, employee_number: int, amount: Optional[int] = None) -> Employee:
        employee = self.get_employee(employee_number)
        employee.promote(self._default_adjustment if amount is None else amount)
        return employee

    def demote(self, employee_number: int, amount: Optional[int] = None) -> Employee:
        employee = self.get_employee(employee_number)
        employee.demote(self._default_adjustment if amount is None else amount)
        return employee

    # Views

    def _select(self, predicate: Callable[[Employee], bool]) -> List[Employee]:
        return [employee for employee in self._employees.values() if predicate(employee)]

    def all_employees(self) -> List[Employee]:
        return list(self._employees.values())

    def current_employees(self) -> List[Employee]:
        return self._select(lambda employee: employee.is_hired())

    def former_employees(self) -> List[Employee]:
        return self._select(lambda employee: not employee.is_hired())

    def display_all(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        for employee in self.all_employees():
            employee.display(console)

    def display_current(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        for employee in self.current_employees():
            employee.display(console)

    def display_former(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        for employee in self.former_employees():
            employee.display(console)


__all__ = ["Database"]
