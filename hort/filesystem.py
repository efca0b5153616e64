"""Small file-system helpers built on slash-joined paths."""

from __future__ import annotations

import os

from hort.strings import join


def exists(*args: str) -> bool:
    """Return True if the path made by joining ``args`` with '/' exists."""
    return os.path.exists(join("/", *args))


def mkpath(*args: str) -> None:
    """Create every directory along the path made by joining ``args`` with '/'."""
    path = join("/", *args)
    if os.path.exists(path):
        return
    os.makedirs(path, mode=0o775, exist_ok=True)


def write(source: str | bytes, filepath: str, filename: str) -> str:
    """Save ``source`` to ``filepath/filename``, overwriting it; return the path."""
    mkpath(filepath)
    target = f"{filepath}/{filename}"
    if isinstance(source, (bytes, bytearray)):
        with open(target, "wb") as handle:
            handle.write(source)
    else:
        with open(target, "w", encoding="utf-8", newline="") as handle:
            handle.write(source)
    return target


def sanitize(text: str) -> str:
    """Remove every '/' from ``text``."""
    return text.replace("/", "")


def base_name(path: str) -> str:
    """Return everything after the last '/' of ``path``."""
    return path.rpartition("/")[2]