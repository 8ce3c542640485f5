"""Loader for delimited-text phone number fixtures.

A fixture file holds one phone number per line. Lines may carry additional
delimited columns; only the first column is used. Blank lines are ignored.
"""

from __future__ import annotations

import csv
import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


class InvalidPhoneFixtureError(Exception):
    """Raised when a fixture file exists but cannot be parsed."""

    def __init__(self, path: PathLike, reason: str) -> None:
        super().__init__(f"Invalid phone fixture {path}: {reason}")
        self.path = path
        self.reason = reason


def iter_phone_numbers(
    path: PathLike, *, delimiter: str = ",", skip_header: bool = False
) -> Iterator[str]:
    """Yield phone numbers from a delimited text file, in file order.

    Args:
        path: Location of the fixture file (UTF-8 text).
        delimiter: Single-character column delimiter passed to `csv.reader`.
        skip_header: When True, the first row is treated as a header and skipped.

    Yields:
        str: The first cell of each non-blank row, stripped of surrounding whitespace.

    Raises:
        FileNotFoundError: If `path` does not exist.
        InvalidPhoneFixtureError: If the file is not UTF-8 or is not valid
            delimited text for `delimiter`.
    """
    with Path(path).open(encoding="utf-8", newline="") as f:
        try:
            reader = csv.reader(f, delimiter=delimiter)
            if skip_header:
                next(reader, None)
            for row in reader:
                if not row or not (value := row[0].strip()):
                    continue
                yield value
        except UnicodeDecodeError as e:
            raise InvalidPhoneFixtureError(path, "file is not UTF-8 text") from e
        except (csv.Error, TypeError) as e:
            # TypeError: csv rejects delimiters that are not one character
            raise InvalidPhoneFixtureError(path, str(e)) from e


def load_phone_numbers(
    path: PathLike, *, delimiter: str = ",", skip_header: bool = False
) -> list[str]:
    """Read every phone number from a fixture file into a list.

    See `iter_phone_numbers` for the parsing rules.
    """
    numbers = list(
        iter_phone_numbers(path, delimiter=delimiter, skip_header=skip_header)
    )
    logger.debug("Loaded %d phone numbers from %s", len(numbers), path)
    return numbers
