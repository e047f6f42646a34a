"""
Pytest configuration for the employee records registry.

Provides fixtures for:
- Settings with test-specific overrides and a fresh settings cache per test
- Empty and pre-populated databases
- A rich console that writes into a string buffer
"""

from __future__ import annotations

import io
from typing import Generator

import pytest
from rich.console import Console

from employee_records.config import Settings, get_settings
from employee_records.database import Database


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """
    Clear the cached settings around each test so env overrides don't leak.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        first_employee_number=1000,
        default_starting_salary=30000,
        default_adjustment=1000,
        log_level="DEBUG",
    )


@pytest.fixture
def database(test_settings: Settings) -> Database:
    """
    Empty database numbered from 1000 regardless of the environment.
    """
    return Database(
        first_employee_number=test_settings.first_employee_number,
        starting_salary=test_settings.default_starting_salary,
        default_adjustment=test_settings.default_adjustment,
    )


@pytest.fixture
def seeded_database(database: Database) -> Database:
    """
    Database holding three employees:

    - 1000 Greg Wallis, fired
    - 1001 Marc White, hired, salary 100000
    - 1002 John Doe, hired, salary 10000 then promoted by the default amount
    """
    greg = database.add_employee("Greg", "Wallis")
    greg.fire()

    marc = database.add_employee("Marc", "White")
    marc.hire()
    marc.salary = 100000

    john = database.add_employee("John", "Doe")
    john.hire()
    john.salary = 10000
    john.promote()
    return database


@pytest.fixture
def console() -> Console:
    """
    Console writing to an in-memory buffer; read it with `console.file.getvalue()`.
    """
    return Console(file=io.StringIO(), width=120, color_system=None)
