"""Asset metadata: pixel dimensions from filenames or from the file header."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Awaitable, Callable

from PIL import Image

from sequencer.errors import AssetMeasurementError
from sequencer.models.descriptor import AssetDimensions

logger = logging.getLogger(__name__)

AssetProbe = Callable[[str], Awaitable[AssetDimensions]]


def parse_structured_dimensions(path: str) -> AssetDimensions | None:
    """Read "<stem>_<W>x<H>.<ext>" dimensions straight from the filename.

    "fire_200x150.webm" -> 200x150. Returns None when the last
    underscore-delimited token is not two integers joined by "x".
    """
    stem, _ = os.path.splitext(path)
    token = stem.split("_")[-1].lower()
    parts = token.split("x")
    if len(parts) != 2 or not (parts[0].isdecimal() and parts[1].isdecimal()):
        return None
    return AssetDimensions(x=int(parts[0]), y=int(parts[1]))


class ImageProbe:
    """Measure assets by reading their header with Pillow.

    Relative paths are resolved against ``root``. The read runs in a worker
    thread so the event loop is not blocked on disk I/O.
    """

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)

    async def __call__(self, path: str) -> AssetDimensions:
        return await asyncio.to_thread(self._read, path)

    def _read(self, path: str) -> AssetDimensions:
        full = self.root / path
        try:
            with Image.open(full) as im:
                width, height = im.size
        except (OSError, ValueError) as e:
            # UnidentifiedImageError is an OSError
            logger.warning("Probe failed for %s: %s", full, e)
            raise AssetMeasurementError(path, str(e)) from e
        logger.debug("Measured %s: %dx%d", full, width, height)
        return AssetDimensions(x=width, y=height)
