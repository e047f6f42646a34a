"""
Domain models for the employee records registry.

`Employee` is a mutable pydantic model: names and salary are plain attributes
that callers read and assign freely, while the employee number is frozen once
the record is built. The registry is the only place numbers are handed out;
a standalone record keeps the unassigned marker unless one is passed in.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from rich.console import Console
from rich.text import Text

from employee_records.config import DEFAULT_ADJUSTMENT, DEFAULT_STARTING_SALARY

UNASSIGNED_EMPLOYEE_NUMBER = -1


class Employee(BaseModel):
    """
    State of a single employee.
    """

    first_name: str = Field("", description="Given name.")
    last_name: str = Field("", description="Family name.")
    employee_number: int = Field(
        UNASSIGNED_EMPLOYEE_NUMBER,
        frozen=True,
        description="Identifier assigned by the database; immutable.",
    )
    salary: int = Field(DEFAULT_STARTING_SALARY, description="Current salary.")
    hired: bool = Field(False, description="Whether the employee is currently employed.")

    def promote(self, raise_amount: int = DEFAULT_ADJUSTMENT) -> None:
        """
        Raise the salary by `raise_amount`. No bounds are enforced.

        The default is the module constant, not `settings.default_adjustment`;
        use `Database.promote` for the configured amount.
        """
        self.salary = self.salary + raise_amount

    def demote(self, demerit_amount: int = DEFAULT_ADJUSTMENT) -> None:
        """
        Lower the salary by `demerit_amount`; the result may be negative.

        Like `promote`, the default ignores settings.
        """
        self.salary = self.salary - demerit_amount

    def hire(self) -> None:
        """Hire, or rehire, the employee."""
        self.hired = True

    def fire(self) -> None:
        """Dismiss the employee. The record itself is kept."""
        self.hired = False

    def is_hired(self) -> bool:
        return self.hired

    @property
    def status(self) -> str:
        return "Current Employee" if self.hired else "Former Employee"

    def summary(self) -> str:
        """
        Human-readable block describing the employee.

        The block ends with a newline so consecutive summaries are separated
        by a blank line once printed.
        """
        return (
            f"Employee: {self.last_name}, {self.first_name}\n"
            "-------\n"
            f"{self.status}\n"
            f"Employee Number: {self.employee_number}\n"
            f"Salary: ${self.salary}\n"
        )

    def display(self, console: Optional[Console] = None) -> None:
        """
        Write the summary block to `console` (stdout when omitted).

        Names are printed verbatim; rich markup and emoji codes are not expanded.
        """
        console = console or Console()
        console.print(Text(self.summary()), soft_wrap=True)


__all__ = ["Employee", "UNASSIGNED_EMPLOYEE_NUMBER"]
