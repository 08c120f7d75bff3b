"""
Hex web-color value.

Stored in canonical ``#rrggbbaa`` form or empty.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from viewcore.domain.metadata import MetaData, ValidationError
from viewcore.domain.values import ValidatingValue

CANONICAL_COLOR_PATTERN = re.compile(r"^#[0-9a-f]{8}$")


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int


def normalize_color(s: str) -> str:
    """
    Rewrite any accepted hex color notation to ``#rrggbbaa``.

    Accepted lengths: 0 and 9 (kept), 3 (rgb), 4 (#rgb or rgba),
    5 (#rgba), 6 (rrggbb), 7 (#rrggbb), 8 (rrggbbaa).

    Raises:
        ValueError: on any other length, or if the result is not hex.
    """
    s = s.lower()
    n = len(s)
    if n in (0, 9):
        out = s
    elif n == 3:
        out = "#" + "".join(c * 2 for c in s) + "ff"
    elif n == 4 and s[0] == "#":
        out = "#" + "".join(c * 2 for c in s[1:]) + "ff"
    elif n == 4:
        out = "#" + "".join(c * 2 for c in s)
    elif n == 5:
        out = "#" + "".join(c * 2 for c in s[1:])
    elif n == 6:
        out = "#" + s + "ff"
    elif n == 7:
        out = s + "ff"
    elif n == 8:
        out = "#" + s
    else:
        raise ValueError("Invalid hex web-color length")
    if out and not CANONICAL_COLOR_PATTERN.match(out):
        raise ValueError("Invalid hex web-color")
    return out


class Color(ValidatingValue):
    """
    Hex web-color with the # prefix and an alpha channel.

    Every mutation goes through ``set``, so a Color built in code is
    always empty or canonical. ``validate`` exists for values that were
    loaded without going through ``set``.

    Colors hash by their current value; do not call ``set`` on a color
    while it is a set member or dict key.
    """

    def __init__(self, value: str = "") -> None:
        self._value = ""
        if value:
            self.set(value)

    @classmethod
    def from_stored(cls, value: str) -> Color:
        """Wrap a stored string as is, without normalizing it."""
        color = cls()
        color._value = value
        return color

    def get(self) -> str:
        return self._value

    def set(self, s: str) -> None:
        self._value = normalize_color(s)

    def set_string(self, s: str) -> None:
        self.set(s)

    def is_empty(self) -> bool:
        return self._value == ""

    def get_or_default(self, default: str) -> str:
        if self.is_empty():
            return default
        return self._value

    def is_valid(self) -> bool:
        if self.is_empty():
            return True
        return CANONICAL_COLOR_PATTERN.match(self._value.lower()) is not None

    def format_error(self, meta: MetaData) -> ValidationError:
        return ValidationError(
            field=meta.name,
            code="invalid_color",
            message=f"Invalid hex web-color: {self._value}",
        )

    def rgba(self) -> RGBA:
        """Color channels as integers; an empty color is all zero."""
        if self.is_empty():
            return RGBA(0, 0, 0, 0)
        if not self.is_valid():
            raise ValueError(f"Invalid hex web-color: {self._value}")
        raw = bytes.fromhex(self._value[1:])
        return RGBA(raw[0], raw[1], raw[2], raw[3])

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Color({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _coerce(cls, value: Any) -> Color:
        if isinstance(value, Color):
            return cls.from_stored(value.get())
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"Invalid type for color: {type(value).__name__}")
