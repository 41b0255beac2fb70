"""Effect finalize engine."""

from sequencer.engine.registry import step, Stage, get_registry, register_steps
from sequencer.engine.context import PipelineContext
from sequencer.engine.pipeline import Pipeline
from sequencer.engine.asset_cache import AssetDimensionCache
from sequencer.engine.position_cache import NamedPositionCache

__all__ = [
    "step",
    "Stage",
    "get_registry",
    "register_steps",
    "PipelineContext",
    "Pipeline",
    "AssetDimensionCache",
    "NamedPositionCache",
]
