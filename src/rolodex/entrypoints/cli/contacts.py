"""ROLODEX contacts CLI.

Drives a fresh in-memory registry from a phone number fixture. Nothing is
persisted: every invocation starts from an empty registry.

Behavior
- The contact table goes to **stdout**; status lines go to **stderr**.
- The fixture is taken from ``--fixture``, else ``ROLODEX_PHONE_FIXTURE``,
  else the fixture packaged with ROLODEX.

Failure modes
- Fixture path does not exist → ``ClickException`` with guidance.
- Fixture is not UTF-8 or not valid delimited text → ``ClickException``.
- ``--delimiter`` is not a single character → usage error.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from rolodex import config
from rolodex.adapters.contact_registry import DEFAULT_BACKEND, make_registry
from rolodex.adapters.phone_fixture import InvalidPhoneFixtureError, load_phone_numbers
from rolodex.interfaces.contact_registry import ContactRegistry

from .helpers import success, warn

logger = logging.getLogger(__name__)

MISSING_FIXTURE_MSG = (
    "Phone fixture not found: {path}\n\n"
    "Pass --fixture PATH, or point ROLODEX_PHONE_FIXTURE at a file, e.g.:\n"
    "  export ROLODEX_PHONE_FIXTURE=./phone_numbers.csv"
)

EMPTY_FIXTURE_MSG = "Phone fixture {path} is empty; no contacts registered."

UNREADABLE_FIXTURE_MSG = (
    "Phone fixture {path} could not be read: {reason}\n\n"
    "Fixtures are UTF-8 text with one phone number per line; only the first\n"
    "column is used. Check --delimiter if the file is not comma separated."
)

# the csv module cannot use these as a delimiter
_RESERVED_DELIMITERS = frozenset("\"\r\n")


def _resolve_fixture(fixture: Path | None) -> Path:
    if fixture is not None:
        return fixture
    try:
        return config.get_phone_fixture_path()
    except config.PhoneFixtureNotFoundError as e:
        raise click.ClickException(MISSING_FIXTURE_MSG.format(path=e.path)) from e


def _single_character(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str,
) -> str:
    if len(value) != 1:
        raise click.BadParameter(f"must be a single character, got {value!r}")
    if value in _RESERVED_DELIMITERS:
        raise click.BadParameter(f"{value!r} cannot be used as a delimiter")
    return value


def _render(registry: ContactRegistry) -> Table:
    table = Table(title="Contacts")
    table.add_column("#", justify="right")
    table.add_column("First Name")
    table.add_column("Last Name")
    table.add_column("Phone Number")
    for i, contact in enumerate(registry.get_all_contacts(), start=1):
        table.add_row(
            str(i), contact.first_name, contact.last_name, contact.phone_number
        )
    return table


@click.group(cls=clickx.ExtraGroup)
def contacts() -> None:
    """Contact registry commands."""


@contacts.command()
@click.option(
    "--fixture",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Phone number fixture to load (one value per line).",
)
@click.option("--first-name", default="John", show_default=True)
@click.option("--last-name", default="Doe", show_default=True)
@click.option(
    "--delimiter",
    default=",",
    show_default=True,
    callback=_single_character,
    help="Single-character column delimiter; only the first column is read.",
)
@click.option(
    "--skip-header/--no-skip-header",
    default=False,
    show_default=True,
    help="Treat the first line of the fixture as a header.",
)
@click.pass_context
def load(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    fixture: Path | None,
    first_name: str,
    last_name: str,
    delimiter: str,
    skip_header: bool,
) -> None:
    """Register one contact per fixture phone number and list the registry."""
    path = _resolve_fixture(fixture)
    try:
        phone_numbers = load_phone_numbers(
            path, delimiter=delimiter, skip_header=skip_header
        )
    except FileNotFoundError as e:
        raise click.ClickException(MISSING_FIXTURE_MSG.format(path=path)) from e
    except InvalidPhoneFixtureError as e:
        raise click.ClickException(
            UNREADABLE_FIXTURE_MSG.format(path=path, reason=e.reason)
        ) from e

    if not phone_numbers:
        warn(EMPTY_FIXTURE_MSG.format(path=path))
        return

    backend = (ctx.find_object(dict) or {}).get("registry_backend", DEFAULT_BACKEND)
    registry = make_registry(backend)
    for phone_number in phone_numbers:
        registry.add_contact(first_name, last_name, phone_number)
    logger.info("Registered %d contacts from %s", len(phone_numbers), path)

    Console().print(_render(registry))
    success(f"Registered {len(registry.get_all_contacts())} contacts.")
