"""Per-line state machine: tokens → key and value fields."""

from __future__ import annotations

from dataclasses import dataclass, field

from .lexer import DEFAULT_SEPARATOR, Token, TokenType, tokenize


@dataclass(slots=True)
class ParsedLine:
    key: str
    fields: list[str]


@dataclass
class LineParser:
    """Consumes the tokens of one line.

    ``fields[0]`` accumulates the key; every unescaped separator that follows
    a non-empty field opens a new slot. A ``#`` anywhere discards the line.

    Usage::

        lp = LineParser()
        lp.feed_all(tokenize("name a\\ b c"))
        lp.finish()   # → ParsedLine(key="name", fields=["a b", "c"])
    """

    separator: str = DEFAULT_SEPARATOR
    fields: list[str] = field(default_factory=lambda: [""])
    ignore_special: bool = False
    is_comment: bool = False
    # Set for bare keys. Reserved for nested key groups; nothing reads it.
    expects_new_level: bool = False

    # -- Transitions ----------------------------------------------------

    def feed(self, token: Token) -> bool:
        """Apply one token. Returns False once the rest of the line is moot."""
        if self.is_comment:
            return False

        kind = token.type
        if kind == TokenType.COMMENT:
            self.is_comment = True
            return False

        if kind == TokenType.BACKSLASH:
            self.ignore_special = not self.ignore_special
        elif kind == TokenType.SEPARATOR:
            if self.ignore_special:
                self.fields[-1] += self.separator
                self.ignore_special = False
            elif self.fields[-1]:
                self.fields.append("")
        else:
            self.ignore_special = False
            self.fields[-1] += token.char
        return True

    def feed_all(self, tokens: list[Token]) -> None:
        for token in tokens:
            if not self.feed(token):
                break

    # -- Result ---------------------------------------------------------

    def finish(self) -> ParsedLine | None:
        """Return the key and its value fields, or None for a comment line."""
        if self.is_comment:
            return None
        key, *rest = self.fields
        self.expects_new_level = not rest
        return ParsedLine(key=key, fields=rest)


def parse_line(line: str, separator: str = DEFAULT_SEPARATOR) -> ParsedLine | None:
    """Tokenize and parse a single line."""
    lp = LineParser(separator=separator)
    lp.feed_all(tokenize(line, separator))
    return lp.finish()
