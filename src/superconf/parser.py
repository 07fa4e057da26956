"""Document assembler: runs every line through lexer, line parser and builder."""

from __future__ import annotations

import logging
import os

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import ConfIOError, ElementExistsError, NoKeyError, NoValueError
from .lexer import DEFAULT_SEPARATOR
from .line_parser import parse_line
from .values import Value, build_value

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str, *, strict: bool = False) -> dict[str, Value]:
    """Parse *text* using a space as the separator."""
    return parse_with_config(text, ParserConfig(strict=strict) if strict else DEFAULT_CONFIG)


def parse_with_separator(
    text: str, separator: str, *, strict: bool = False
) -> dict[str, Value]:
    """Parse *text* with an explicit single-character *separator*."""
    return parse_with_config(text, ParserConfig(separator=separator, strict=strict))


def parse_file(
    path: str | os.PathLike[str],
    separator: str = DEFAULT_SEPARATOR,
    *,
    strict: bool = False,
) -> dict[str, Value]:
    """Read *path* as UTF-8 and parse it.

    Raises:
        ConfIOError: the file could not be opened, read or decoded.
    """
    config = ParserConfig(separator=separator, strict=strict)
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfIOError(os.fspath(path), exc) from exc
    logger.debug("read %d characters from %s", len(text), path)
    return parse_with_config(text, config)


def parse_with_config(text: str, config: ParserConfig) -> dict[str, Value]:
    """Parse *text* according to *config*.

    Raises:
        ElementExistsError: a key appears on more than one line.
        NoKeyError / NoValueError: only when ``config.strict`` is set.
    """
    document: dict[str, Value] = {}

    # str.split keeps the empty string after a trailing "\n"; it is a blank
    # line and skipped like any other.
    for lineno, line in enumerate(text.split("\n"), start=1):
        parsed = parse_line(line, config.separator)
        if parsed is None:
            logger.debug("line %d: comment, skipped", lineno)
            continue

        value = build_value(parsed.fields)
        if value is None:
            if config.strict and line:
                if not parsed.key:
                    raise NoKeyError(lineno)
                raise NoValueError(parsed.key, lineno)
            logger.debug("line %d: no value for %r, skipped", lineno, parsed.key)
            continue

        if parsed.key in document:
            previous = document[parsed.key]
            logger.debug("line %d: duplicate key %r", lineno, parsed.key)
            raise ElementExistsError(parsed.key, previous, lineno)
        document[parsed.key] = value

    return document
