"""Error taxonomy for effect finalization.

Every error propagates out of ``Pipeline.finalize``; nothing here is retried.
"""

from __future__ import annotations


class SequencerError(Exception):
    """Base class for all sequencer failures."""


class ConfigurationError(SequencerError, ValueError):
    """Malformed or contradictory effect options (missing file, degenerate trim points)."""


class UnresolvedNameError(SequencerError, KeyError):
    """A name reference was resolved before any effect recorded it for that repetition."""

    def __init__(self, name: str, repetition: int) -> None:
        self.name = name
        self.repetition = repetition
        super().__init__(f"No position recorded for {name!r} at repetition {repetition}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class AssetMeasurementError(SequencerError):
    """The asset probe could not read an asset's pixel dimensions."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        message = f"Could not measure asset {path!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class HookError(SequencerError):
    """An override hook broke the chain contract (did not hand back a descriptor)."""
