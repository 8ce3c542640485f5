"""ROLODEX CLI entry point.

Defines the top-level ``rolodex`` command (via Click-Extra): it picks the
registry backend, sets up logging from its options, and registers the
subcommands.

Currently available groups
- ``rolodex contacts``: load a phone fixture into a fresh registry.

Examples
    $ rolodex --version
    $ rolodex -v contacts load --fixture phone_numbers.csv
    $ ROLODEX_PHONE_FIXTURE=numbers.csv rolodex contacts load
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from rolodex import __version__
from rolodex.adapters.contact_registry import BACKENDS, DEFAULT_BACKEND
from rolodex.config import describe_phone_fixture
from rolodex.logging import (
    LoggingSettings,
    configure_logging,
    log_startup,
    verbosity_to_level,
)

from .contacts import contacts as contacts_group
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """ROLODEX command-line interface.

    ROLODEX keeps an in-memory registry of contacts. Every contact needs a first
    name, a last name and a phone number; the registry keeps them in the order
    they were added and allows duplicates. Nothing is saved between runs.
    """


def _default_log_path() -> Path:
    return Path(user_log_dir("rolodex", appauthor=False, ensure_exists=True)) / (
        "latest.log"
    )


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--registry-backend",
    type=click.Choice(sorted(BACKENDS)),
    default=DEFAULT_BACKEND,
    envvar="ROLODEX_REGISTRY_BACKEND",
    show_default=True,
    show_envvar=True,
    help="Contact registry implementation used by the subcommands.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Log one level more than WARNING per repetition (-v INFO, -vv DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Log one level less than WARNING per repetition (-q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console, with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=_default_log_path,
    envvar="ROLODEX_LOG_PATH",
    show_default="<user log dir>/rolodex/latest.log",
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="ROLODEX_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory and write them to --log-path "
        "once a WARNING is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="ROLODEX_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder to --log-path on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="ROLODEX_LOGGER_LEVELS",
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL "
        "(e.g. -L rolodex.adapters=DEBUG). Repeatable."
    ),
)
@clickx.pass_context
def rolodex(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    registry_backend: str,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """ROLODEX command-line interface."""
    ctx.ensure_object(dict)["registry_backend"] = registry_backend

    settings = LoggingSettings(
        level=verbosity_to_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    ctx.call_on_close(logging.shutdown)

    log_startup(
        logger,
        settings,
        handlers=handlers,
        fixture_source=describe_phone_fixture(),
        backend=registry_backend,
    )


rolodex.add_command(contacts_group)
