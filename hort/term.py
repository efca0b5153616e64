"""Terminal styling and value rendering for console output."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class Color(Enum):
    """Foreground colours, valued by their escape code."""

    NORMAL = "39"
    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    LIGHT_GRAY = "37"
    DARK_GRAY = "90"
    LIGHT_RED = "91"
    LIGHT_GREEN = "92"
    LIGHT_YELLOW = "93"
    LIGHT_BLUE = "94"
    LIGHT_MAGENTA = "95"
    LIGHT_CYAN = "96"
    WHITE = "97"


class Style(Enum):
    """Text styles, valued by their escape code."""

    NORMAL = "0"
    BOLD = "1"
    FAINT = "2"
    ITALIC = "3"
    UNDERLINE = "4"


@dataclass(frozen=True)
class Text:
    """A string with a colour and a style."""

    data: str
    color: Color = Color.NORMAL
    style: Style = Style.NORMAL

    def __or__(self, other: Color | Style) -> Text:
        if isinstance(other, Color):
            return replace(self, color=other)
        if isinstance(other, Style):
            return replace(self, style=other)
        return NotImplemented

    def __str__(self) -> str:
        return f"\033[{self.style.value};{self.color.value}m{self.data}\033[0m"


def styled(text: str, *args: Color | Style) -> Text:
    """Wrap ``text`` and apply each colour or style in order."""
    result = Text(str(text))
    for attribute in args:
        result = result | attribute
    return result


def _render_one(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return json.dumps(value, indent=2, ensure_ascii=False)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_render_one(item) for item in value) + "]"
    return format(value)


def render(*args: Any) -> str:
    """Render values separated by spaces; dicts as indented JSON, lists bracketed."""
    return " ".join(_render_one(arg) for arg in args)


def echo(*args: Any) -> None:
    """Write the rendered values and a newline to standard output."""
    sys.stdout.write(render(*args) + "\n")