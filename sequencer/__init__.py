"""Effect sequencer: resolve declarative sprite effects into render descriptors.

Usage:
    from sequencer import Sequence

    seq = Sequence()
    seq.effect("jb2a/fire_bolt_1600x400.webm").jb2a().at_location((100, 100)).reach_towards((600, 300))
    descriptors = await seq.finalize_all()
"""

__version__ = "0.1.0"

from sequencer.builder import EffectBuilder
from sequencer.engine.pipeline import Pipeline, create_pipeline
from sequencer.errors import (
    AssetMeasurementError,
    ConfigurationError,
    HookError,
    SequencerError,
    UnresolvedNameError,
)
from sequencer.models.descriptor import AssetDimensions, RenderDescriptor
from sequencer.models.effect import EffectOptions
from sequencer.models.locations import EntityRef, NameRef, Point, PointRef, TemplateRef
from sequencer.sequence import FailedRun, Renderer, Sequence
from sequencer.utils.random_source import NumpyRandomSource, RandomSource

__all__ = [
    "__version__",
    "EffectBuilder",
    "EffectOptions",
    "Pipeline",
    "create_pipeline",
    "Sequence",
    "Renderer",
    "FailedRun",
    "RenderDescriptor",
    "AssetDimensions",
    "Point",
    "PointRef",
    "EntityRef",
    "TemplateRef",
    "NameRef",
    "RandomSource",
    "NumpyRandomSource",
    "SequencerError",
    "ConfigurationError",
    "UnresolvedNameError",
    "AssetMeasurementError",
    "HookError",
]
