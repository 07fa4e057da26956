"""Lexer: classifies every character of a line into a token."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

DEFAULT_SEPARATOR = " "
COMMENT_MARKER = "#"
ESCAPE_MARKER = "\\"


class TokenType(Enum):
    CHARACTER = auto()
    SEPARATOR = auto()
    BACKSLASH = auto()
    COMMENT = auto()


@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    char: str | None = None  # only set for CHARACTER


SEPARATOR = Token(TokenType.SEPARATOR)
BACKSLASH = Token(TokenType.BACKSLASH)
COMMENT = Token(TokenType.COMMENT)


def classify(char: str, separator: str = DEFAULT_SEPARATOR) -> Token:
    """Return the token for a single character.

    The separator is checked first, so a separator equal to ``#`` or ``\\``
    shadows the comment or escape meaning of that character.
    """
    if char == separator:
        return SEPARATOR
    if char == COMMENT_MARKER:
        return COMMENT
    if char == ESCAPE_MARKER:
        return BACKSLASH
    return Token(TokenType.CHARACTER, char)


def tokenize(line: str, separator: str = DEFAULT_SEPARATOR) -> list[Token]:
    """Tokenize *line*, one token per character, in order."""
    return [classify(c, separator) for c in line]
