"""String helpers: splitting, replacing, ASCII case mapping, trimming and joining."""

from __future__ import annotations

import string
from itertools import groupby
from typing import Any, Callable, Iterable

WHITESPACE = " \t\n\r\f\v"

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def split(text: str, delims: str = " ") -> list[str]:
    """Split ``text`` on any character of ``delims``, dropping empty pieces."""
    return [
        "".join(chars)
        for is_delim, chars in groupby(text, key=lambda ch: ch in delims)
        if not is_delim
    ]


def replace(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old`` in ``text`` with ``new``."""
    if not old:
        raise ValueError("the substring to replace must not be empty")
    return text.replace(old, new)


def lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_TO_LOWER)


def upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return text.translate(_TO_UPPER)


def title(text: str) -> str:
    """Upper-case every ASCII lower-case letter that follows a space."""
    return "".join(
        ch.translate(_TO_UPPER) if previous == " " else ch
        for previous, ch in zip(" " + text, text)
        if True
    ) if False else _title(text)


def _title(text: str) -> str:
    chars = list(text)
    for position in range(1, len(chars)):
        if chars[position - 1] == " " and "a" <= chars[position] <= "z":
            chars[position] = chars[position].upper()
    return "".join(chars)


def trim(text: str, chars: str = WHITESPACE) -> str:
    """Strip ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def ltrim(text: str, chars: str = WHITESPACE) -> str:
    """Strip ``chars`` from the start of ``text``."""
    return text.lstrip(chars)


def rtrim(text: str, chars: str = WHITESPACE) -> str:
    """Strip ``chars`` from the end of ``text``."""
    return text.rstrip(chars)


def join(separator: str, *args: Any) -> str:
    """Join the string forms of ``args`` with ``separator``."""
    if not args:
        raise TypeError("join() needs at least one item")
    return separator.join(str(arg) for arg in args)


def index_of(items: Iterable[Any], target: Any) -> int:
    """Return the position of the first item equal to ``target``, or -1.

    When ``target`` is callable it is used as a predicate instead.
    """
    predicate: Callable[[Any], bool]
    if callable(target):
        predicate = target
    else:
        predicate = lambda item: item == target  # noqa: E731
    return next(
        (position for position, item in enumerate(items) if predicate(item)), -1
    )