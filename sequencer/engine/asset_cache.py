"""Per-sequence cache of asset pixel dimensions."""

from __future__ import annotations

import logging

from sequencer.models.descriptor import AssetDimensions
from sequencer.utils.media import AssetProbe, ImageProbe, parse_structured_dimensions

logger = logging.getLogger(__name__)


class AssetDimensionCache:
    """Maps an asset path to its pixel size for the lifetime of one sequence.

    The probe is only awaited on a cache miss. Not safe for concurrent writers;
    a sequence finalizes its effects one at a time.
    """

    def __init__(self, probe: AssetProbe | None = None) -> None:
        self.probe: AssetProbe = probe or ImageProbe()
        self._dimensions: dict[str, AssetDimensions] = {}
        self.probe_calls = 0

    def get(self, path: str) -> AssetDimensions | None:
        return self._dimensions.get(path)

    def put(self, path: str, dims: AssetDimensions) -> None:
        self._dimensions[path] = dims

    async def measure(self, path: str) -> AssetDimensions:
        self.probe_calls += 1
        return await self.probe(path)

    async def fetch(self, path: str, structured: bool = False) -> AssetDimensions:
        """Dimensions for ``path``: filename fast path, then cache, then probe."""
        if structured:
            parsed = parse_structured_dimensions(path)
            if parsed is not None:
                return parsed
            logger.debug("No structured dimensions in %s, falling back to probe", path)

        dims = self.get(path)
        if dims is None:
            dims = await self.measure(path)
            self.put(path, dims)
        return dims

    def __len__(self) -> int:
        return len(self._dimensions)

    def __contains__(self, path: object) -> bool:
        return path in self._dimensions
