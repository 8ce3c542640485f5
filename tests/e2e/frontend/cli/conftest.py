"""Fixtures for end-to-end tests of the ``rolodex`` command.

Besides the real ``contacts load`` command, these tests register a test-only
``add-one`` command. It adds a single contact to the configured registry
backend and logs a WARNING when the registry rejects it, which is what makes
the flight recorder write its buffer. It also logs on a ``vendor.phonelib``
logger so per-logger overrides can be checked against a non-rolodex name.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from rolodex.adapters.contact_registry import make_registry
from rolodex.domain import InvalidContactError
from rolodex.entrypoints.cli.main import rolodex

# pylint: disable=redefined-outer-name, unused-argument

E2E_ROOT = Path(__file__).parents[2].resolve()
MARKER_NAME = "e2e"

ADD_ONE = "add-one"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    for item in items:
        path = item.path.resolve()
        if E2E_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo per-logger levels set by `-L` overrides, which outlive a run."""
    manager = logging.Logger.manager
    saved = {
        name: logger.level
        for name, logger in manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    root_level = logging.getLogger().level
    yield
    for name, logger in list(manager.loggerDict.items()):
        if isinstance(logger, logging.Logger):
            logger.setLevel(saved.get(name, logging.NOTSET))
    logging.getLogger().setLevel(root_level)


@click.command(ADD_ONE)
@click.option("--phone", default=None)
@click.pass_obj
def add_one(obj: dict, phone: str | None) -> None:
    """Add "Jane Roe" with --phone; a missing phone is rejected by the registry."""
    logger = logging.getLogger("rolodex.tests.add_one")
    vendor = logging.getLogger("vendor.phonelib")
    vendor.debug("vendor: normalizing %r", phone)
    vendor.info("vendor: lookup done")

    registry = make_registry(obj["registry_backend"])
    logger.debug("adding Jane Roe, phone=%r", phone)
    try:
        registry.add_contact("Jane", "Roe", phone)
    except InvalidContactError as e:
        logger.warning("rejected contact: %s", e)
    logger.debug("registry holds %d contacts", len(registry.get_all_contacts()))


@pytest.fixture
def with_add_one():
    """Attach `add-one` to the `rolodex` group for the duration of a test."""
    rolodex.add_command(add_one)
    try:
        yield
    finally:
        rolodex.commands.pop(ADD_ONE, None)
        # click-extra groups also keep commands in help sections
        for section in getattr(rolodex, "_sections", []):
            getattr(section, "commands", {}).pop(ADD_ONE, None)
        default = getattr(rolodex, "_default_section", None)
        if default is not None:
            default.commands.pop(ADD_ONE, None)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner, monkeypatch):
    """Run inside an isolated directory with the packaged fixture selected."""
    monkeypatch.delenv("ROLODEX_PHONE_FIXTURE", raising=False)
    monkeypatch.delenv("ROLODEX_REGISTRY_BACKEND", raising=False)
    with runner.isolated_filesystem():
        yield
