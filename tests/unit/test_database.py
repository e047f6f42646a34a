from __future__ import annotations

import pytest

from employee_records.database import Database
from employee_records.errors import EmployeeNotFoundError


def _numbers(employees):
    return [emp.employee_number for emp in employees]


def test_numbers_increase_from_base(database):
    names = [("A", "B"), ("A", "B"), ("", ""), ("Zed", "Last")]
    assigned = [database.add_employee(first, last).employee_number for first, last in names]
    assert assigned == [1000, 1001, 1002, 1003]
    assert database.next_employee_number == 1004
    assert len(database) == 4


def test_add_employee_returns_stored_record_not_hired(database):
    emp = database.add_employee("Greg", "Wallis")
    assert emp.salary == 30000
    assert not emp.is_hired()

    emp.hire()
    assert database.get_employee(1000) is emp
    assert database.get_employee(1000).is_hired()


def test_get_employee_by_number(seeded_database):
    for number in (1000, 1001, 1002):
        assert seeded_database.get_employee(number).employee_number == number
    assert 1001 in seeded_database
    assert 9999 not in seeded_database


def test_get_employee_unknown_number_raises(seeded_database):
    with pytest.raises(EmployeeNotFoundError) as exc_info:
        seeded_database.get_employee(9999)
    assert exc_info.value.employee_number == 9999
    assert str(exc_info.value) == "No employee found."
    assert isinstance(exc_info.value, LookupError)


def test_get_employee_by_name_returns_earliest_match(database):
    first = database.add_employee("Jane", "Smith")
    database.add_employee("Jane", "Doe")
    database.add_employee("Jane", "Smith")

    assert database.get_employee_by_name("Jane", "Smith") is first
    assert database.get_employee_by_name("Jane", "Doe").employee_number == 1001


def test_get_employee_by_name_missing(seeded_database):
    with pytest.raises(EmployeeNotFoundError) as exc_info:
        seeded_database.get_employee_by_name("Greg", "White")
    assert (exc_info.value.first_name, exc_info.value.last_name) == ("Greg", "White")


def test_scenario_salaries_and_partition(seeded_database):
    assert seeded_database.get_employee(1000).salary == 30000
    assert seeded_database.get_employee(1001).salary == 100000
    assert seeded_database.get_employee(1002).salary == 11000

    assert _numbers(seeded_database.all_employees()) == [1000, 1001, 1002]
    assert _numbers(seeded_database.current_employees()) == [1001, 1002]
    assert _numbers(seeded_database.former_employees()) == [1000]


def test_current_and_former_partition_all(database):
    for index in range(6):
        emp = database.add_employee(f"First{index}", f"Last{index}")
        if index % 2:
            emp.hire()
    database.fire(1003)

    current = set(_numbers(database.current_employees()))
    former = set(_numbers(database.former_employees()))
    assert current.isdisjoint(former)
    assert current | former == set(_numbers(database.all_employees()))
    assert current == {1001, 1005}


def test_registry_mutations(database):
    emp = database.add_employee("Greg", "Wallis")

    assert database.hire(1000) is emp and emp.is_hired()
    database.promote(1000)
    assert emp.salary == 31000
    database.demote(1000, 5000)
    assert emp.salary == 26000
    database.fire(1000)
    database.fire(1000)
    assert not emp.is_hired()


@pytest.mark.parametrize("operation", ["hire", "fire", "promote", "demote"])
def test_registry_mutations_unknown_number(database, operation):
    with pytest.raises(EmployeeNotFoundError):
        getattr(database, operation)(4242)


def test_databases_have_independent_counters():
    first = Database(first_employee_number=1000)
    second = Database(first_employee_number=1000)

    first.add_employee("A", "A")
    first.add_employee("B", "B")
    assert second.add_employee("C", "C").employee_number == 1000
    assert first.next_employee_number == 1002


def test_fired_employee_keeps_number(database):
    emp = database.add_employee("Greg", "Wallis")
    emp.fire()
    assert database.add_employee("Marc", "White").employee_number == 1001
    assert database.get_employee(1000) is emp


def test_iteration_is_snapshot_in_insertion_order(seeded_database):
    seen = []
    for emp in seeded_database:
        seen.append(emp.employee_number)
        if len(seen) == 1:
            seeded_database.add_employee("Late", "Comer")
    assert seen == [1000, 1001, 1002]


def test_display_views(seeded_database, console):
    seeded_database.display_former(console)
    former = console.file.getvalue()
    assert "Employee: Wallis, Greg" in former
    assert "White" not in former and "Doe" not in former

    console.file.truncate(0)
    console.file.seek(0)
    seeded_database.display_current(console)
    current = console.file.getvalue()
    assert "Wallis" not in current
    assert current.index("White, Marc") < current.index("Doe, John")
    assert "Salary: $11000" in current

    console.file.truncate(0)
    console.file.seek(0)
    seeded_database.display_all(console)
    assert console.file.getvalue().count("Employee Number:") == 3


def test_display_on_empty_database(database, console):
    database.display_all(console)
    assert console.file.getvalue() == ""
