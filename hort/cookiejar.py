"""Session cookies kept as name/value pairs and stored in a tab-separated file."""

from __future__ import annotations

import os
from typing import Iterable, Iterator


class CookieJar:
    """Cookies of an HTTP session, persisted to ``filepath``."""

    def __init__(self, filepath: str | os.PathLike[str]) -> None:
        self.filepath = os.fspath(filepath)
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str:
        """Return the cookie's value, or an empty string if it is not set."""
        return self._data.get(key, "")

    def __getitem__(self, key: str) -> str:
        return self._data.setdefault(key, "")

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def set(self, key: str, value: str) -> None:
        """Set a cookie; empty values are ignored."""
        if value:
            self._data[key] = value

    def erase(self, key: str) -> None:
        """Remove a cookie if present."""
        self._data.pop(key, None)

    def clear(self) -> None:
        """Remove every cookie."""
        self._data.clear()

    def parse(self, lines: Iterable[str]) -> None:
        """Read cookies from Netscape cookie-file lines (seven tab-separated fields)."""
        for line in lines:
            fields = line.split("\t", 6)
            if len(fields) < 7:
                raise ValueError(f"malformed cookie line: {line!r}")
            self._data[fields[5]] = fields[6]

    def serialize(self) -> str:
        """Return the cookies as a ``Cookie`` header value, sorted by name."""
        return "; ".join(
            f"{key}={value}" for key, value in sorted(self._data.items()) if value
        )

    def load(self) -> None:
        """Read cookies from the file; a missing file leaves the jar unchanged."""
        try:
            with open(self.filepath, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except FileNotFoundError:
            return
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line in lines:
            key, separator, value = line.partition("\t")
            self._data[key] = value if separator else line

    def save(self) -> None:
        """Write every cookie to the file as ``name<TAB>value`` lines."""
        with open(self.filepath, "w", encoding="utf-8", newline="") as handle:
            handle.writelines(
                f"{key}\t{value}\n" for key, value in sorted(self._data.items())
            )