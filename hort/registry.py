"""The registry of interfaces and the command-line entry point."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from hort.args import Args
from hort.imgur import Imgur
from hort.interface import Interface
from hort.pastebin import Pastebin
from hort.strings import trim
from hort.term import echo

NAME = "hortd"
DESCRIPTION = "Data hoarding and indexing framework"
VERSION = "0.1.0"

_QUIT = ("quit", "exit")


class Registry:
    """Interfaces by id, with command-line and interactive front ends."""

    _instance: Registry | None = None

    def __init__(self, stream: TextIO | None = None) -> None:
        self.interfaces: dict[str, Interface] = {}
        self._stream = stream
        self.argparser = Args(NAME, DESCRIPTION, VERSION, stream=stream)
        self.argparser.add("-i", "--interactive", "Run in interactive mode", self.repl)
        self.argparser.add("-f", "--forward", "Forward", self.forward, str)
        self.argparser.add("-d", "--dump", "Dump an interface's index", self._dump, str)
        self.argparser.add("-a", "--archive", "Archive Interface", self._archive, str)

    @classmethod
    def instance(cls) -> Registry:
        """Return the process-wide registry, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add(self, interface: Interface) -> None:
        """Register ``interface``; an id already present is kept."""
        self.interfaces.setdefault(interface.id, interface)

    def _get(self, name: str) -> Interface:
        try:
            return self.interfaces[name]
        except KeyError:
            raise KeyError(f"unknown interface: {name}") from None

    def _dump(self, name: str) -> None:
        echo(self._get(name).dump(), file=self._stream)

    def _archive(self, name: str) -> None:
        self._get(name).archive()

    def parse(self, argv: list[str] | None = None) -> None:
        """Run the command-line options; with none, show help and exit."""
        args = list(sys.argv[1:] if argv is None else argv)
        if not args:
            self.argparser.help()
        self.argparser.parse(args)

    def repl(self, read: Callable[[str], str] | None = None) -> None:
        """Read commands until 'quit', 'exit' or end of input."""
        ask = read if read is not None else input
        try:
            while True:
                command = trim(ask("(hort) "))
                if command in _QUIT:
                    return
                if command == "list":
                    for name in sorted(self.interfaces):
                        echo(name, file=self._stream)
                interface = self.interfaces.get(command)
                if interface is None:
                    self.forward(command)
                else:
                    self._interact(interface, ask)
        except EOFError:
            return

    def _interact(self, interface: Interface, ask: Callable[[str], str]) -> None:
        while True:
            line = trim(ask(f"({interface.id}) "))
            if line in _QUIT:
                return
            if line == "archive":
                interface.run_archive()
                return
            if line == "rules":
                for rule, _ in interface.rules:
                    echo(rule.pattern, file=self._stream)
            elif not interface.forward(trim(line)):
                tags = list(iter(lambda: trim(ask("tag > ")), ""))
                interface.subscribe(line, tags)

    def auth(self) -> None:
        """Authenticate every interface."""
        for name in sorted(self.interfaces):
            self.interfaces[name].auth()

    def forward(self, text: str) -> None:
        """Offer ``text`` to every interface."""
        for name in sorted(self.interfaces):
            self.interfaces[name].forward(text)


def register(cls: type[Interface]) -> type[Interface]:
    """Class decorator: add an instance of ``cls`` to the global registry."""
    Registry.instance().add(cls())
    return cls


def main(argv: list[str] | None = None) -> int:
    """Run the command line; the built-in interfaces are used if none are registered."""
    registry = Registry.instance()
    if not registry.interfaces:
        registry.add(Imgur())
        registry.add(Pastebin())
    try:
        registry.parse(argv)
    except KeyError as error:
        sys.stderr.write(f"{error.args[0]}\n")
        return 1
    finally:
        for interface in registry.interfaces.values():
            interface.save()
    return 0