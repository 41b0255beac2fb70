"""PipelineContext — the single mutable state object flowing through all finalize steps.

Per-run inputs (options, repetition) and injected collaborators (caches,
random source, template renderer) sit next to the descriptor being built.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sequencer.engine.asset_cache import AssetDimensionCache
from sequencer.engine.config import PipelineConfig
from sequencer.engine.position_cache import NamedPositionCache
from sequencer.engine.resolver.location_resolver import LocationResolver
from sequencer.models.descriptor import RenderDescriptor
from sequencer.models.effect import EffectOptions
from sequencer.models.locations import Point
from sequencer.utils.random_source import RandomSource
from sequencer.utils.templating import TemplateRenderer, render_path


@dataclass
class PipelineContext:
    """Shared state for one finalize call."""

    options: EffectOptions
    repetition: int
    rng: RandomSource
    positions: NamedPositionCache
    assets: AssetDimensionCache
    # Grid size of the active scene
    scene_grid_size: float = 100.0
    config: PipelineConfig = field(default_factory=PipelineConfig)
    render_template: TemplateRenderer = render_path

    descriptor: RenderDescriptor = field(default_factory=RenderDescriptor)

    # --- Resolved locations (populated by the placement steps) ---
    origin: Point | None = None
    target: Point | None = None
    recorded_name: str | None = None

    # --- Pipeline metadata ---
    completed_steps: list[str] = field(default_factory=list)

    @property
    def grid_size(self) -> float:
        """Grid size the asset was authored against."""
        return self.options.grid_size or self.scene_grid_size

    @property
    def grid_ratio(self) -> float:
        return self.scene_grid_size / self.grid_size

    @property
    def has_explicit_anchor(self) -> bool:
        return self.options.anchor is not None

    def resolver(self) -> LocationResolver:
        return LocationResolver(
            self.positions,
            self.rng,
            self.scene_grid_size,
            miss_offset_divisor=self.config.miss_offset_divisor,
        )
