"""Value types for SuperConf documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True)
class VSingle:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VList:
    items: list[str]

    def __str__(self) -> str:
        return "[" + ", ".join(self.items) + "]"


Value = Union[VSingle, VList]


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

def build_value(fields: list[str]) -> Value | None:
    """Turn the fields that followed a key into a Value.

    - no fields      → None (bare key, nothing to store)
    - one field      → VSingle
    - several fields → VList, order preserved
    """
    if not fields:
        return None
    if len(fields) == 1:
        return VSingle(fields[0])
    return VList(list(fields))


# ---------------------------------------------------------------------------
# Conversion to plain Python objects
# ---------------------------------------------------------------------------

def to_python(value: Value) -> str | list[str]:
    if isinstance(value, VSingle):
        return value.value
    return list(value.items)


def to_plain(document: dict[str, Value]) -> dict[str, str | list[str]]:
    """Convert a parsed document into str / list[str] values (e.g. for JSON)."""
    return {key: to_python(value) for key, value in document.items()}
