"""Pipeline orchestrator — runs the finalize steps in dependency order."""

from __future__ import annotations

import inspect
import logging
import time

from sequencer.config import settings
from sequencer.engine.asset_cache import AssetDimensionCache
from sequencer.engine.config import PipelineConfig
from sequencer.engine.context import PipelineContext
from sequencer.engine.position_cache import NamedPositionCache
from sequencer.engine.registry import StepRegistry, register_steps
from sequencer.models.descriptor import RenderDescriptor
from sequencer.models.effect import EffectOptions
from sequencer.utils.random_source import NumpyRandomSource, RandomSource
from sequencer.utils.templating import TemplateRenderer, render_path

logger = logging.getLogger(__name__)


class Pipeline:
    """Turns effect options into a render descriptor.

    Stateless between calls: all cross-effect state lives in the caches the
    caller passes in, so independent sequences never share anything.
    """

    def __init__(
        self,
        registry: StepRegistry | None = None,
        config: PipelineConfig | None = None,
        scene_grid_size: float | None = None,
    ) -> None:
        self.registry = registry or register_steps()
        self.config = config or PipelineConfig()
        self.scene_grid_size = scene_grid_size or settings.scene_grid_size

    async def finalize(
        self,
        options: EffectOptions,
        repetition: int = 0,
        *,
        positions: NamedPositionCache | None = None,
        assets: AssetDimensionCache | None = None,
        rng: RandomSource | None = None,
        scene_grid_size: float | None = None,
        render_template: TemplateRenderer = render_path,
    ) -> RenderDescriptor:
        """Run every step for one repetition of one effect and return the descriptor.

        Any step failure propagates; there is no partial result.
        """
        ctx = PipelineContext(
            options=options,
            repetition=repetition,
            rng=rng if rng is not None else NumpyRandomSource(),
            positions=positions if positions is not None else NamedPositionCache(),
            assets=assets if assets is not None else AssetDimensionCache(),
            scene_grid_size=scene_grid_size or self.scene_grid_size,
            config=self.config,
            render_template=render_template,
        )
        await self.run(ctx)
        return ctx.descriptor

    async def run(self, ctx: PipelineContext) -> PipelineContext:
        """Run the full step chain on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                result = spec.fn(ctx)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.warning("  %s FAILED: %s", spec.id, e)
                raise
            ctx.completed_steps.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.2fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Finalized %s (repetition %d): %d steps in %.1fms",
            ctx.recorded_name or "effect",
            ctx.repetition,
            len(ctx.completed_steps),
            total,
        )
        return ctx


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)
