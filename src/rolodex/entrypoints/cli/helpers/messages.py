"""Terminal message helpers for the ROLODEX CLI.

Messages are written to stderr so stdout stays free for tables and other
machine-readable output. Emoji glyphs fall back to ASCII when stderr cannot
encode them.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call, so a terminal whose encoding
    changes between calls is handled.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _pick(glyphs: tuple[str, str]) -> str:
    emoji, fallback = glyphs
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" when stderr cannot encode it."""
    return _pick(CAUTION)


def success_glyph() -> str:
    """Return "✅", or "[OK]" when stderr cannot encode it."""
    return _pick(SUCCESS)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Phone fixture is empty; no contacts registered.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Registered 3 contacts.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)
