"""
Image loading checks.

The interpreter never fetches images. A host may hand it an ImageLoader
that answers, synchronously, whether a source can be shown; sources it
rejects are replaced with a placeholder at build time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import urlparse

from sdui.specs.widgets import ImageSource

logger = logging.getLogger(__name__)


@runtime_checkable
class ImageLoader(Protocol):
    """Decides whether an image source is loadable."""

    def can_load(self, source: ImageSource) -> bool:
        ...


class AssetImageLoader:
    """
    Loader for a local asset directory.

    Asset sources must name a file inside ``assets_dir``. URL sources must
    be absolute http(s) URLs; they are not fetched.
    """

    def __init__(self, assets_dir: Path):
        self.assets_dir = assets_dir.resolve()

    def can_load(self, source: ImageSource) -> bool:
        if source.kind == "url":
            parsed = urlparse(source.location)
            ok = parsed.scheme in ("http", "https") and bool(parsed.netloc)
        else:
            path = (self.assets_dir / source.location).resolve()
            ok = path.is_relative_to(self.assets_dir) and path.is_file()

        if not ok:
            logger.warning(f"Image not loadable: {source}")
        return ok
