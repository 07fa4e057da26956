"""SuperConf: parser for a line-oriented key/value configuration format."""

from .config import ParserConfig
from .errors import (
    ConfIOError,
    ElementExistsError,
    NoKeyError,
    NoValueError,
    SuperConfError,
)
from .lexer import Token, TokenType, tokenize
from .line_parser import LineParser, ParsedLine, parse_line
from .parser import parse, parse_file, parse_with_config, parse_with_separator
from .values import Value, VList, VSingle, build_value, to_plain, to_python

__all__ = [
    "parse",
    "parse_with_separator",
    "parse_with_config",
    "parse_file",
    "ParserConfig",
    "Value",
    "VSingle",
    "VList",
    "build_value",
    "to_python",
    "to_plain",
    "Token",
    "TokenType",
    "tokenize",
    "LineParser",
    "ParsedLine",
    "parse_line",
    "SuperConfError",
    "NoKeyError",
    "NoValueError",
    "ElementExistsError",
    "ConfIOError",
]
