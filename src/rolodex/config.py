"""Configuration utilities for ROLODEX.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from importlib.resources import files
from pathlib import Path

PHONE_FIXTURE_ENV_VAR = "ROLODEX_PHONE_FIXTURE"  # pragma: no mutate
PHONE_FIXTURE_RESOURCE = "phone_numbers.csv"  # pragma: no mutate


class PhoneFixtureNotFoundError(Exception):
    """Raised when the configured phone fixture file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Phone fixture not found: {path}")
        self.path = path


def default_phone_fixture_path() -> Path:
    """Return the path of the phone fixture shipped with the package."""
    return Path(str(files("rolodex.data").joinpath(PHONE_FIXTURE_RESOURCE)))


def get_phone_fixture_path() -> Path:
    """Resolve the phone fixture to use.

    Returns:
        The value of `ROLODEX_PHONE_FIXTURE` when set, otherwise the packaged
        default fixture.

    Raises:
        PhoneFixtureNotFoundError: If the resolved path does not exist.
    """
    if value := os.environ.get(PHONE_FIXTURE_ENV_VAR):
        path = Path(value)
    else:
        path = default_phone_fixture_path()
    if not path.is_file():
        raise PhoneFixtureNotFoundError(path)
    return path


def describe_phone_fixture() -> str:
    """Return a short description of where the phone fixture comes from.

    Unlike `get_phone_fixture_path`, this never raises: it is used for startup
    diagnostics before any command has touched the fixture.
    """
    if value := os.environ.get(PHONE_FIXTURE_ENV_VAR):
        return f"{value} (from {PHONE_FIXTURE_ENV_VAR})"
    return f"{default_phone_fixture_path()} (packaged default)"
