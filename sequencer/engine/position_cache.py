"""Per-sequence store of resolved effect positions, addressable by name."""

from __future__ import annotations

from sequencer.errors import UnresolvedNameError
from sequencer.models.locations import Point


class NamedPositionCache:
    """(name, repetition) -> origin of the effect run that recorded it.

    Written at the end of each finalize, read at the start of any later one
    that references the name. Later effects must be finalized after the one
    they reference.
    """

    def __init__(self) -> None:
        self._positions: dict[tuple[str, int], Point] = {}

    def record(self, name: str, repetition: int, position: Point) -> None:
        self._positions[(name, repetition)] = position.copy_point()

    def lookup(self, name: str, repetition: int) -> Point:
        try:
            return self._positions[(name, repetition)].copy_point()
        except KeyError:
            raise UnresolvedNameError(name, repetition) from None

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __len__(self) -> int:
        return len(self._positions)
