"""Base class of the services whose content is archived and indexed."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Callable, Iterable, Sequence

from hort import filesystem
from hort.formats import FormatError, loadyaml
from hort.index import Index
from hort.patterns import Regex
from hort.session import Session

Callback = Callable[[list[str]], Any]

CONFIG_FILE = "config.yml"
COOKIE_FILE = "cookies.txt"
SUBSCRIPTIONS_KEY = "subscriptions"


def default_hortpath(name: str) -> str:
    """Return the data directory of the interface ``name``, with a trailing '/'."""
    return os.path.join(os.path.expanduser("~"), ".hort", name, "")


class Interface:
    """A service that input is forwarded to by matching rules.

    Each rule is a pattern and a callback; the callback receives the captured
    groups of the first rule whose pattern is found in the input. The
    interface's ``state`` is loaded from ``config.yml`` in its data directory
    and written back by ``save``.
    """

    def __init__(
        self,
        name: str,
        rules: Iterable[tuple[str, Callback]] = (),
        *,
        hortpath: str | os.PathLike[str] | None = None,
        session: Any = None,
        index: Any = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.id = name
        path = os.fspath(hortpath) if hortpath is not None else default_hortpath(name)
        if not path.endswith("/"):
            path += "/"
        self.hortpath = path
        self.rules: list[tuple[Regex, Callback]] = [
            (Regex(pattern), callback) for pattern, callback in rules
        ]
        self.logger = logger if logger is not None else logging.getLogger(f"hort.{name}")
        self.session = (
            session if session is not None else Session(self.hortpath + COOKIE_FILE)
        )
        self.index = index if index is not None else Index(f"{name}_subscriptions")
        self.state: Any = self._load_state()

    def _load_state(self) -> Any:
        try:
            state = loadyaml(self.hortpath + CONFIG_FILE)
        except (FileNotFoundError, FormatError):
            state = None
        return state if state is not None else {}

    def _subscriptions(self) -> dict[str, list[str]]:
        if not isinstance(self.state, dict):
            raise TypeError(
                f"state of interface {self.id} is not a mapping: {self.state!r}"
            )
        subscriptions = self.state.setdefault(SUBSCRIPTIONS_KEY, {})
        if not isinstance(subscriptions, dict):
            raise TypeError(
                f"subscriptions of interface {self.id} are not a mapping: "
                f"{subscriptions!r}"
            )
        return subscriptions

    def auth(self) -> None:
        """Authenticate with the cookies stored for the session."""
        self.session.cookies.load()

    def subscribe(self, username: str, tags: Sequence[str]) -> None:
        """Record a subscription to ``username`` with ``tags`` in the state."""
        self._subscriptions()[username] = list(tags)
        self.logger.info("subscribed to %s on interface %s", username, self.id)

    def archive(self) -> None:
        """Forward every subscription recorded in the state to the rules."""
        for username in list(self._subscriptions()):
            self.forward(username)

    def run_archive(self) -> None:
        """Authenticate, then archive, logging each step."""
        self.logger.info("authenticating to interface")
        self.auth()
        self.logger.info("started to archive interface %s", self.id)
        self.archive()
        self.logger.info("finished to archive interface %s", self.id)

    def forward(self, text: str) -> bool:
        """Run the callback of the first rule found in ``text``; True if one was."""
        for rule, callback in self.rules:
            groups = rule.findall(text)
            if groups:
                self.logger.info("matched %s with interface %s", text, self.id)
                callback(groups)
                return True
        return False

    def dump(self) -> str:
        """Return every document of the index as indented JSON."""
        return json.dumps(self.index.query(), indent=1)

    def save(self) -> None:
        """Write the state to ``config.yml`` and the session cookies to disk."""
        filesystem.write(json.dumps(self.state), self.hortpath, CONFIG_FILE)
        self.session.cookies.save()