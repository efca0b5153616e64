"""Archiving of image galleries."""

from __future__ import annotations

import json
from typing import Any

from hort import filesystem
from hort.archive import Archive
from hort.interface import Interface
from hort.patterns import Regex


class Imgur(Interface):
    """Downloads whole galleries into zip archives."""

    URL_IMG = "https://imgur.com/{}{}"
    URL_IMGS = "https://imgur.com/a/{}"
    RE_HASHES = Regex(r'"images":(\[.*?])')

    def __init__(self, **options: Any) -> None:
        super().__init__(
            "imgur",
            [
                (
                    r"^(?:https?://)?imgur.com/(\w+)/?$",
                    lambda groups: self.download_gallery(groups[0]),
                )
            ],
            **options,
        )

    def download_gallery(self, gallery_id: str) -> str:
        """Store every image of the gallery in ``<id>.zip``; return its path."""
        response = self.session.get(self.URL_IMGS, gallery_id)
        found = self.RE_HASHES.findall(response.body)
        if not found:
            raise ValueError(f"no image list found for gallery {gallery_id!r}")
        images = json.loads(found[-1])

        filesystem.mkpath(self.hortpath)
        path = f"{self.hortpath}{gallery_id}.zip"
        with Archive(path) as archive:
            for position, image in enumerate(images, start=1):
                image_hash, ext = image["hash"], image["ext"]
                data = self.session.get(self.URL_IMG, image_hash, ext).content
                archive.add(f"{position}{ext}", data)
        return path