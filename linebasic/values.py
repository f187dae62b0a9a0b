from __future__ import annotations

import re
from dataclasses import dataclass

from linebasic.errors import UnknownVariableError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int32(text: str) -> int:
    """Strict base-10 parse: optional sign, ASCII digits, signed 32-bit range."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    n = int(text)
    if not INT32_MIN <= n <= INT32_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return n


# ----- string literal helpers -----

def is_string_literal(text: str) -> bool:
    # blank counts as a (degenerate) empty string
    s = text.strip()
    if not s:
        return True
    return len(s) >= 2 and s[0] == '"' and s[-1] == '"'


def unquote(text: str) -> str:
    s = text.strip()
    if len(s) <= 2:
        return ""
    return s[1:-1]


@dataclass(frozen=True)
class Value:
    int_value: int = 0
    str_value: str = ""
    is_str: bool = False

    @classmethod
    def of_int(cls, n: int) -> "Value":
        return cls(int_value=n)

    @classmethod
    def of_str(cls, s: str) -> "Value":
        return cls(str_value=s, is_str=True)

    @property
    def text(self) -> str:
        if self.is_str:
            return self.str_value
        return str(self.int_value)

    def render(self) -> str:
        if self.is_str:
            return f'"{self.str_value}"'
        return str(self.int_value)

    def resolve(self, interp) -> str:
        return self.text


@dataclass(frozen=True)
class Reference:
    name: str

    def render(self) -> str:
        return self.name

    def resolve(self, interp) -> str:
        value = interp.variables.get(self.name)
        if value is None:
            raise UnknownVariableError(self.name)
        return value.text
