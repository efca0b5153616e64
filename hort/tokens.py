"""Lexical tokens of the interactive prompt."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Kind(Enum):
    """Token kinds, valued by their display name."""

    SYMBOL = "Symbol"
    BUILTIN = "Builtin"
    STRING = "String"
    NUMBER = "Number"
    WHITESPACE = "Whitespace"
    TRUE = "True"
    FALSE = "False"


_COLORIZE = {
    Kind.SYMBOL: "{}",
    Kind.BUILTIN: "\033[1;31m{}\033[0m",
    Kind.STRING: "\033[1;32m{}\033[0m",
    Kind.NUMBER: "\033[1;33m{}\033[0m",
    Kind.WHITESPACE: "{}",
    Kind.TRUE: "\033[1m{}\033[0m",
    Kind.FALSE: "\033[1m{}\033[0m",
}


@dataclass(frozen=True)
class Position:
    """Line and column of a token."""

    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Token:
    """A piece of input text with its kind and position."""

    kind: Kind
    value: str
    position: Position = field(default_factory=Position)

    def colorized(self) -> str:
        """Return the value wrapped in the colour of its kind."""
        return _COLORIZE[self.kind].format(self.value)

    def __str__(self) -> str:
        return f"{self.kind.value} = '{self.value}'"