"""Archiving of pastes and of every paste of a user."""

from __future__ import annotations

import time
from itertools import count
from typing import Any

from hort import filesystem, patterns
from hort.interface import Interface
from hort.patterns import Regex


class Pastebin(Interface):
    """Downloads single pastes, or all pastes of a user page by page.

    Forwarded ``pastebin.com/u/<user>`` URLs download a user's pastes;
    ``pastebin.com/<id>`` URLs download one paste.
    """

    URL_RAWPASTE = "https://pastebin.com/raw/{}"
    URL_USER = "https://pastebin.com/u/{}/{}"
    RE_PASTES = Regex(r'\ <a href="/(\w*?)">(.*?)</a>')

    paste_delay = 1.0
    page_delay = 2.5

    def __init__(self, **options: Any) -> None:
        super().__init__(
            "pastebin",
            [
                (
                    r"^(?:https?://)?(?:www\.)?pastebin\.com/u/([\w\d_]+)$",
                    lambda groups: self.download_user(groups[0]),
                ),
                (
                    r"^(?:https?://)?(?:www\.)?pastebin\.com/([\w\d]+)$",
                    lambda groups: self.download_paste(groups[0]),
                ),
            ],
            **options,
        )

    def download_paste(
        self, paste_id: str, title: str | None = None, username: str | None = None
    ) -> bool:
        """Download a paste; return True if it was already downloaded.

        Without a title the paste is saved as ``<id>``; with one it is saved
        as ``<id> - <title>`` in the directory of ``username``.
        """
        if title is None:
            if filesystem.exists(self.hortpath, paste_id):
                return True
            self.session.download(self.hortpath, paste_id, self.URL_RAWPASTE, paste_id)
            return False

        if username is None:
            raise TypeError("a titled paste needs the author's username")
        title = patterns.replace("/", "-", title)
        filename = f"{paste_id} - {title}"
        if filesystem.exists(self.hortpath, username, filename):
            return True
        self.session.download(
            self.hortpath + username, filename, self.URL_RAWPASTE, paste_id
        )
        return False

    def download_user(self, username: str) -> None:
        """Download the pastes of ``username``, page by page until a page is empty.

        On each page, downloading stops at the first paste already present.
        """
        for page in count(1):
            body = self.session.get(self.URL_USER, username, page).body
            pastes = self.RE_PASTES.findall(body)
            if not pastes:
                return
            for paste_id, title in zip(pastes[::2], pastes[1::2]):
                if self.download_paste(paste_id, title, username):
                    break
                time.sleep(self.paste_delay)
            time.sleep(self.page_delay)