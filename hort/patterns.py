"""Regular-expression helpers returning captured groups as flat string lists.

Rewrite strings use ``\\0``-``\\9`` for groups and ``\\\\`` for a backslash.
"""

from __future__ import annotations

import re
from typing import Callable

_REWRITE_ESCAPE = re.compile(r"\\(.?)", re.DOTALL)


def _groups(found: re.Match[str]) -> list[str]:
    return [group or "" for group in found.groups()]


def _findall(compiled: re.Pattern[str], target: str) -> list[str]:
    return [group for found in compiled.finditer(target) for group in _groups(found)]


def _find(compiled: re.Pattern[str], target: str) -> list[str]:
    found = compiled.search(target)
    if found is None:
        return [""] * compiled.groups
    return _groups(found)


def _match(compiled: re.Pattern[str], target: str) -> bool:
    return compiled.fullmatch(target) is not None


def _expander(compiled: re.Pattern[str], rewrite: str) -> Callable[[re.Match[str]], str]:
    for escape in _REWRITE_ESCAPE.finditer(rewrite):
        token = escape.group(1)
        if token == "\\":
            continue
        if not token.isdigit():
            raise ValueError(f"invalid rewrite escape in {rewrite!r}")
        if int(token) > compiled.groups:
            raise ValueError(
                f"rewrite {rewrite!r} refers to group {token}, "
                f"pattern has {compiled.groups}"
            )

    def expand(found: re.Match[str]) -> str:
        def substitute(escape: re.Match[str]) -> str:
            token = escape.group(1)
            if token == "\\":
                return "\\"
            return found.group(int(token)) or ""

        return _REWRITE_ESCAPE.sub(substitute, rewrite)

    return expand


def findall(pattern: str, target: str) -> list[str]:
    """Return the groups of every match of ``pattern`` in ``target``, flattened."""
    return _findall(re.compile(pattern), target)


def find(pattern: str, target: str) -> list[str]:
    """Return the groups of the first match; empty strings when nothing matches."""
    return _find(re.compile(pattern), target)


def match(pattern: str, target: str) -> bool:
    """Return True if ``pattern`` matches the whole of ``target``."""
    return _match(re.compile(pattern), target)


def replace(pattern: str, rewrite: str, text: str) -> str:
    """Replace the first match of ``pattern`` in ``text`` with ``rewrite``."""
    compiled = re.compile(pattern)
    return compiled.sub(_expander(compiled, rewrite), text, count=1)


def replaceall(pattern: str, rewrite: str, text: str) -> str:
    """Replace every match of ``pattern`` in ``text`` with ``rewrite``."""
    compiled = re.compile(pattern)
    return compiled.sub(_expander(compiled, rewrite), text)


class Regex:
    """A compiled pattern in which '.' also matches newlines."""

    __slots__ = ("pattern", "_compiled")

    def __init__(self, pattern: str | Regex) -> None:
        if isinstance(pattern, Regex):
            pattern = pattern.pattern
        self.pattern = pattern
        self._compiled = re.compile(pattern, re.DOTALL)

    def __repr__(self) -> str:
        return f"Regex({self.pattern!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Regex):
            return NotImplemented
        return self.pattern == other.pattern

    def __hash__(self) -> int:
        return hash(self.pattern)

    def findall(self, target: str) -> list[str]:
        """Return the groups of every match in ``target``, flattened."""
        return _findall(self._compiled, target)

    def find(self, target: str) -> list[str]:
        """Return the groups of the first match in ``target``."""
        return _find(self._compiled, target)

    def match(self, target: str) -> bool:
        """Return True if the pattern matches the whole of ``target``."""
        return _match(self._compiled, target)