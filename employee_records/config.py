"""
Configuration settings for the employee records registry.

Uses Pydantic Settings to load environment variables for the identifier base,
salary defaults, and logging. Class-level defaults on the domain model mirror
these values so an `Employee` can be built without touching the environment.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FIRST_EMPLOYEE_NUMBER = 1000
DEFAULT_STARTING_SALARY = 30000
DEFAULT_ADJUSTMENT = 1000


class Settings(BaseSettings):
    # Registry
    first_employee_number: int = Field(
        FIRST_EMPLOYEE_NUMBER, alias="RECORDS_FIRST_EMPLOYEE_NUMBER"
    )
    default_starting_salary: int = Field(
        DEFAULT_STARTING_SALARY, alias="RECORDS_STARTING_SALARY"
    )
    default_adjustment: int = Field(DEFAULT_ADJUSTMENT, alias="RECORDS_DEFAULT_ADJUSTMENT")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = [
    "DEFAULT_ADJUSTMENT",
    "DEFAULT_STARTING_SALARY",
    "FIRST_EMPLOYEE_NUMBER",
    "Settings",
    "get_settings",
]
