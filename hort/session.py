"""An HTTP session with default headers, persistent cookies and retries."""

from __future__ import annotations

import time
from enum import Enum
from typing import Any, Iterable, Mapping
from urllib.parse import quote

import requests

from hort import filesystem
from hort.cookiejar import CookieJar
from hort.response import Response

DEFAULT_HEADERS = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,"
        "image/apng,*/*;q=0.8,application/signed-exchange;v=b3"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/77.0.3865.90 Safari/537.36"
    ),
}


class Method(Enum):
    """HTTP request methods."""

    GET = "GET"
    POST = "POST"


def parse_headers(raw: str) -> dict[str, str]:
    """Parse newline-terminated ``Key: value`` lines.

    Parsing stops at the first line without a colon.
    """
    headers: dict[str, str] = {}
    lines = raw.split("\n")[:-1]
    for line in lines:
        key, separator, value = line.partition(":")
        if not separator:
            break
        headers[key] = value[1:].rstrip("\r")
    return headers


def _encode(fields: Mapping[str, Any]) -> str:
    return "&".join(
        f"{key}={quote(str(value), safe='')}" for key, value in sorted(fields.items())
    )


def _cookie_lines(cookies: Iterable[Any]) -> list[str]:
    return [
        "\t".join(
            (
                cookie.domain,
                "TRUE" if cookie.domain.startswith(".") else "FALSE",
                cookie.path,
                "TRUE" if cookie.secure else "FALSE",
                str(cookie.expires or 0),
                cookie.name,
                cookie.value or "",
            )
        )
        for cookie in cookies
    ]


class Session:
    """Sends requests with shared headers and cookies.

    Cookies are loaded from ``cookie_filepath`` on creation and saved back
    when the session is closed. A failed request is tried ``max_retries``
    times in all, ``retry_delay`` seconds apart.
    """

    def __init__(
        self,
        cookie_filepath: str = "./cookies",
        *,
        max_retries: int = 5,
        retry_delay: float = 5,
        http: Any = None,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.headers: dict[str, str] = dict(DEFAULT_HEADERS)
        self.cookies = CookieJar(cookie_filepath)
        self.cookies.load()
        self._http = http if http is not None else requests.Session()
        self._closed = False

    def request(
        self, url: str, payload: str = "", method: Method | str = Method.GET
    ) -> Response:
        """Perform a request; an empty Response (code 0) if every attempt fails."""
        method = Method(method)
        headers = dict(self.headers)
        cookie = self.cookies.serialize()
        if cookie:
            headers["Cookie"] = cookie
        options: dict[str, Any] = {"headers": headers, "allow_redirects": True}
        if method is Method.POST:
            options["data"] = payload

        for attempt in range(self.max_retries):
            if attempt:
                time.sleep(self.retry_delay)
            try:
                reply = self._http.request(method.value, url, **options)
            except requests.RequestException:
                continue
            break
        else:
            return Response()

        self.cookies.parse(_cookie_lines(self._http.cookies))
        return Response(
            body=reply.text,
            url=reply.url,
            headers=dict(reply.headers),
            code=reply.status_code,
            content=reply.content,
        )

    def get(
        self, url: str, *args: Any, params: Mapping[str, Any] | None = None
    ) -> Response:
        """Send a GET request to ``url`` formatted with ``args``.

        ``params`` are URL-encoded, sorted by name and appended to the URL.
        """
        if args:
            url = url.format(*args)
        if params:
            url += _encode(params)
        return self.request(url, "", Method.GET)

    def post(self, url: str, payload: str | Mapping[str, Any]) -> Response:
        """Send a POST request; a mapping payload is form-encoded."""
        if not isinstance(payload, str):
            payload = _encode(payload)
        return self.request(url, payload, Method.POST)

    def download(
        self, filepath: str, filename: str, url: str, *args: Any
    ) -> str | None:
        """Save the resource at ``url`` to ``filepath/filename``.

        Returns the written path, or None if the status was not 200.
        """
        response = self.get(url, *args)
        if response.code != 200:
            return None
        return filesystem.write(response.content, filepath, filename)

    def close(self) -> None:
        """Save the cookies and release the connection pool."""
        if self._closed:
            return
        self._closed = True
        self.cookies.save()
        self._http.close()

    def __enter__(self) -> Session:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def get(url: str) -> Response:
    """Send a single GET request with a fresh session."""
    with Session() as session:
        return session.get(url)


def download(filepath: str, filename: str, url: str, *args: Any) -> str | None:
    """Download one resource with a fresh session."""
    with Session() as session:
        return session.download(filepath, filename, url, *args)