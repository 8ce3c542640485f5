"""Logging setup for the ROLODEX CLI.

The `rolodex` command turns its options into a `LoggingSettings` value and
hands it to `configure_logging`, which installs two handlers on the root
logger:

- a Rich console handler on stderr, at the verbosity chosen with -v/-q;
- optionally a "flight recorder": a `MemoryHandler` that keeps recent records
  at DEBUG granularity and writes them to a file once a WARNING shows up
  (or on exit, when forced).

Library modules only call `logging.getLogger(__name__)`; nothing outside this
module attaches handlers.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from rolodex import __version__

PROJECT_PREFIX = "rolodex"
DEFAULT_LEVEL = logging.WARNING
FLIGHT_RECORDER_CAPACITY = 500  # records
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LoggingSettings:
    """Logging configuration collected from the top-level CLI options.

    Attributes:
        level: Console level derived from -v/-q.
        debug: Debug formatting; forces the console to DEBUG.
        color: Allow ANSI colors on the console.
        log_path: Flight recorder file, or None when the recorder is off.
        force_flush: Write the flight recorder buffer on exit even without a WARNING.
        logger_levels: Per-logger minimum levels from -L NAME=LEVEL.
    """

    level: int = DEFAULT_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.log_path is not None

    @property
    def console_level(self) -> int:
        return logging.DEBUG if self.debug else self.level


def verbosity_to_level(verbose: int, quiet: int) -> int:
    """Move one level per -v (down) or -q (up) from WARNING, clamped to DEBUG..CRITICAL."""
    level = DEFAULT_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Set `record.prefix` to "[package]" for records from outside rolodex.

    Rolodex records get an empty prefix. Records are never dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def console_handler(settings: LoggingSettings) -> RichHandler:
    """Build the stderr console handler for `settings`."""
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def flight_recorder(
    path: Path, *, flush_on_close: bool, capacity: int = FLIGHT_RECORDER_CAPACITY
) -> MemoryHandler:
    """Build a memory buffer that writes to `path` on WARNING (or on close if asked).

    The file is truncated when the handler is created, so it only ever holds
    records from the latest run.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the handlers described by `settings` on the root logger.

    Any handlers installed by an earlier call are replaced.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(
            flight_recorder(settings.log_path, flush_on_close=settings.force_flush)
        )

    # root passes everything; each handler applies its own level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _format_logger_levels(levels: dict[str, int]) -> str:
    if not levels:
        return "<none>"
    return ", ".join(
        f"{name}={logging.getLevelName(level)}" for name, level in sorted(levels.items())
    )


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    *,
    handlers: list[logging.Handler],
    fixture_source: str,
    backend: str,
) -> None:
    """Log which registry backend and phone fixture this run uses.

    The summary line is INFO, so it shows with a single -v. The rest is DEBUG
    and mostly lands in the flight recorder.
    """
    logger.info(
        "ROLODEX %s: backend=%s, fixture=%s", __version__, backend, fixture_source
    )
    logger.debug(
        "Console level: %s%s",
        logging.getLevelName(settings.console_level),
        " (debug)" if settings.debug else "",
    )
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: %s (flush on exit: %s)",
            settings.log_path,
            "yes" if settings.force_flush else "no",
        )
    else:
        logger.debug("Flight recorder: off")
    logger.debug("Handlers: %s", ", ".join(type(h).__name__ for h in handlers))
    logger.debug("Logger levels: %s", _format_logger_levels(settings.logger_levels))
    logger.debug(
        "Python %s on %s (pid %d)",
        sys.version.split()[0],
        platform.platform(terse=True),
        os.getpid(),
    )
