"""Exception hierarchy for SuperConf."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .values import Value


class SuperConfError(Exception):
    """Base class for every error raised while loading a document.

    All errors are fatal to the whole document; no partial mapping is
    returned alongside them.
    """


class NoKeyError(SuperConfError):
    """A non-blank line produced an empty key (strict mode only)."""

    def __init__(self, lineno: int | None = None) -> None:
        self.lineno = lineno
        where = f" on line {lineno}" if lineno is not None else ""
        super().__init__(f"no key found{where}")


class NoValueError(SuperConfError):
    """A key was given without any value fields (strict mode only)."""

    def __init__(self, key: str, lineno: int | None = None) -> None:
        self.key = key
        self.lineno = lineno
        where = f" on line {lineno}" if lineno is not None else ""
        super().__init__(f"key {key!r} has no value{where}")


class ElementExistsError(SuperConfError):
    """A key was declared twice.

    ``previous`` is the value that was already stored under the key.
    """

    def __init__(self, key: str, previous: Value, lineno: int | None = None) -> None:
        self.key = key
        self.previous = previous
        self.lineno = lineno
        where = f" on line {lineno}" if lineno is not None else ""
        super().__init__(f"duplicate key {key!r}{where} (already set to {previous})")


class ConfIOError(SuperConfError):
    """The input file could not be opened or read."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot read {path!r}: {cause}")
