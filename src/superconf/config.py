"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .lexer import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class ParserConfig:
    """Options shared by every entry point.

    ``separator`` delimits the key and the value fields and may be any single
    character. ``strict`` turns bare keys and empty keys into errors instead
    of silently skipping them.
    """

    separator: str = DEFAULT_SEPARATOR
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ValueError(
                f"separator must be a single character, got {self.separator!r}"
            )


DEFAULT_CONFIG = ParserConfig()
