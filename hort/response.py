"""The result of an HTTP request."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from hort.formats import xml2json
from hort.patterns import findall as _findall


@dataclass
class Response:
    """Body, final URL, headers and status code of an HTTP response.

    ``code`` is 0 when no response was received.
    """

    body: str = ""
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    code: int = 0
    content: bytes = b""

    def parse(self) -> Any:
        """Return the body decoded as JSON, or None if it is not valid JSON."""
        try:
            return json.loads(self.body)
        except ValueError:
            return None

    def feedparse(self) -> dict[str, Any] | None:
        """Return the body converted from XML."""
        return xml2json(self.body)

    def findall(self, pattern: str) -> list[str]:
        """Return the groups of every match of ``pattern`` in the body, flattened."""
        return _findall(pattern, self.body)