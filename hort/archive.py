"""A thread-safe zip archive whose changes are written out on close."""

from __future__ import annotations

import os
import tempfile
import threading
import zipfile
from dataclasses import dataclass


@dataclass(frozen=True)
class Stat:
    """Name, position and size of an archive entry."""

    name: str
    index: int
    size: int


class Archive:
    """A zip file opened for editing; entries can be added, replaced and removed.

    The archive is created if missing. Changes reach the disk when it is
    closed; an archive left with no entries is not kept on disk.
    """

    def __init__(self, filepath: str | os.PathLike[str] | None = None) -> None:
        self._lock = threading.Lock()
        self._path: str | None = None
        self._entries: dict[str, bytes] = {}
        self._changed = False
        if filepath is not None:
            self.open(filepath)

    @property
    def closed(self) -> bool:
        """True when no archive is open."""
        return self._path is None

    def _require_open(self) -> None:
        if self._path is None:
            raise RuntimeError("archive is not open")

    def open(self, filepath: str | os.PathLike[str]) -> None:
        """Open the archive at ``filepath``, reading its existing entries."""
        path = os.fspath(filepath)
        with self._lock:
            if self._path is not None:
                raise RuntimeError("archive is already open")
            entries: dict[str, bytes] = {}
            if os.path.exists(path) and os.path.getsize(path) > 0:
                with zipfile.ZipFile(path) as source:
                    for info in source.infolist():
                        entries[info.filename] = source.read(info)
            self._path = path
            self._entries = entries
            self._changed = False

    def close(self) -> None:
        """Write pending changes and close the archive."""
        with self._lock:
            if self._path is None:
                return
            path, self._path = self._path, None
            entries, self._entries = self._entries, {}
            changed, self._changed = self._changed, False
        if changed:
            _write(path, entries)

    def add(self, filepath: str, source: str | bytes) -> None:
        """Store ``source`` under ``filepath``, replacing any entry of that name."""
        data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        with self._lock:
            self._require_open()
            self._entries[filepath] = data
            self._changed = True

    def remove(self, filepath: str) -> None:
        """Delete the entry ``filepath``; KeyError if there is none."""
        with self._lock:
            self._require_open()
            if filepath not in self._entries:
                raise KeyError(filepath)
            del self._entries[filepath]
            self._changed = True

    def read(self) -> list[Stat]:
        """Return the stats of every entry in the archive."""
        with self._lock:
            self._require_open()
            return [
                Stat(name, position, len(data))
                for position, (name, data) in enumerate(self._entries.items())
            ]

    def __enter__(self) -> Archive:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _write(path: str, entries: dict[str, bytes]) -> None:
    if not entries:
        if os.path.exists(path):
            os.remove(path)
        return
    directory = os.path.dirname(path) or "."
    descriptor, temporary = tempfile.mkstemp(dir=directory, suffix=".zip")
    try:
        with os.fdopen(descriptor, "wb") as handle:
            with zipfile.ZipFile(handle, "w", zipfile.ZIP_DEFLATED) as target:
                for name, data in entries.items():
                    target.writestr(name, data)
        os.replace(temporary, path)
    except BaseException:
        if os.path.exists(temporary):
            os.remove(temporary)
        raise