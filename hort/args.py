"""A small command-line option parser with generated help and version flags."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    found = _LEADING_INT.match(text)
    return int(found.group(1)) if found else 0


@dataclass(frozen=True)
class _Option:
    short: str
    long: str
    description: str
    action: Callable[..., Any]
    argtype: type | None


class Args:
    """Command-line options, each bound to a callback.

    ``-h/--help`` and ``-v/--version`` are registered automatically; both,
    like any usage error, end the program with exit status 1.
    """

    def __init__(
        self,
        name: str,
        description: str,
        version: str,
        stream: TextIO | None = None,
    ) -> None:
        self.name = name
        self.description = description
        self.version = version
        self._stream = stream
        self._options: list[_Option] = []
        self.add("-h", "--help", "Show help", self.help)
        self.add("-v", "--version", "Show version", self._show_version)

    @property
    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def add(
        self,
        short: str,
        long: str,
        description: str,
        action: Callable[..., Any],
        argtype: type | None = None,
    ) -> None:
        """Register an option.

        With ``argtype`` None the action is called without arguments; with
        ``int`` or ``str`` it receives the next command-line word, converted.
        """
        if argtype not in (None, int, str):
            raise TypeError("argtype must be None, int or str")
        self._options.append(_Option(short, long, description, action, argtype))

    def format_help(self) -> str:
        """Return the usage text."""
        lines = [f"Usage: {self.name}"]
        if self._options:
            lines.append(" [options...]")
        lines.append(f"\n\n  {self.description}\n")
        if self._options:
            lines.append("\nOptions:\n\n")
            width = max(len(option.long) for option in self._options) + 2
            for option in self._options:
                if not option.short:
                    lines.append(f"      {option.long:<{width}} {option.description}\n")
                elif not option.long:
                    lines.append(f"  {option.short}  {'':<{width}} {option.description}\n")
                else:
                    lines.append(
                        f"  {option.short:<2}, {option.long:<{width}} {option.description}\n"
                    )
        return "".join(lines)

    def help(self) -> None:
        """Print the usage text and exit with status 1."""
        self._out.write(self.format_help())
        raise SystemExit(1)

    def _show_version(self) -> None:
        self._out.write(f"{self.name} version {self.version}\n")
        raise SystemExit(1)

    def _lookup(self, arg: str) -> _Option | None:
        return next(
            (option for option in self._options if arg in (option.short, option.long)),
            None,
        )

    def parse(self, argv: list[str] | None = None) -> None:
        """Run the actions of the options in ``argv`` (default: ``sys.argv[1:]``)."""
        args = list(sys.argv[1:] if argv is None else argv)
        position = 0
        while position < len(args):
            arg = args[position]
            option = self._lookup(arg)
            if option is None:
                self._out.write(f"Unrecognized argument: {arg}\n")
                self.help()
                return
            if option.argtype is None:
                option.action()
                position += 1
                continue
            if position + 1 >= len(args):
                self._out.write(f"Missing value for argument: {arg}\n")
                self.help()
                return
            raw = args[position + 1]
            option.action(_to_int(raw) if option.argtype is int else raw)
            position += 2