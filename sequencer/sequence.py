"""Sequence — owns the shared caches and finalizes its effects in declaration order."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Protocol, Union

from sequencer.builder import EffectBuilder
from sequencer.engine.asset_cache import AssetDimensionCache
from sequencer.engine.pipeline import Pipeline
from sequencer.engine.position_cache import NamedPositionCache
from sequencer.errors import ConfigurationError
from sequencer.models.descriptor import RenderDescriptor
from sequencer.models.effect import EffectOptions
from sequencer.models.locations import Point
from sequencer.utils.media import AssetProbe
from sequencer.utils.random_source import NumpyRandomSource, RandomSource
from sequencer.utils.templating import TemplateRenderer, render_path

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Consumer of finalized descriptors. ``play`` may be sync or async."""

    def play(self, descriptor: RenderDescriptor) -> Union[None, Awaitable[Any]]: ...


@dataclass
class FailedRun:
    """A finalize call that was rejected with a ConfigurationError.

    ``repetition`` is None when the effect could not even be built.
    """

    effect: int
    repetition: int | None
    error: ConfigurationError


@dataclass
class _Entry:
    source: EffectBuilder | EffectOptions
    repetitions: int = 1

    def options(self) -> EffectOptions:
        if isinstance(self.source, EffectBuilder):
            return self.source.build()
        return self.source

    def repetition_count(self) -> int:
        if isinstance(self.source, EffectBuilder):
            return self.source.repetition_count
        return self.repetitions


class Sequence:
    """A series of effects sharing one named-position cache and one asset cache.

    Effects are finalized strictly in the order they were added, and each
    effect's repetitions in index order, so a name is always recorded before
    a later effect looks it up. Use one Sequence per independent run.
    """

    def __init__(
        self,
        pipeline: Pipeline | None = None,
        rng: RandomSource | None = None,
        probe: AssetProbe | None = None,
        scene_grid_size: float | None = None,
        render_template: TemplateRenderer = render_path,
    ) -> None:
        self.pipeline = pipeline or Pipeline(scene_grid_size=scene_grid_size)
        self.rng = rng if rng is not None else NumpyRandomSource()
        self.positions = NamedPositionCache()
        self.assets = AssetDimensionCache(probe)
        self.scene_grid_size = scene_grid_size or self.pipeline.scene_grid_size
        self.render_template = render_template
        self._entries: list[_Entry] = []
        self.failures: list[FailedRun] = []

    def effect(self, file: str | list[str] = "") -> EffectBuilder:
        """Start a new effect; its builder stays attached and is built at finalize time."""
        builder = EffectBuilder(file, sequence=self)
        self._entries.append(_Entry(builder))
        return builder

    def add(self, options: EffectOptions, repetitions: int = 1) -> Sequence:
        if repetitions < 1:
            raise ConfigurationError("repetitions must be at least 1")
        self._entries.append(_Entry(options, repetitions))
        return self

    def record_named_position(self, name: str, repetition: int, position: Point) -> None:
        """Pre-seed a position that effects can refer to by name."""
        self.positions.record(name, repetition, position)

    def lookup_named_position(self, name: str, repetition: int = 0) -> Point:
        return self.positions.lookup(name, repetition)

    async def finalize(self, options: EffectOptions, repetition: int = 0) -> RenderDescriptor:
        return await self.pipeline.finalize(
            options,
            repetition,
            positions=self.positions,
            assets=self.assets,
            rng=self.rng,
            scene_grid_size=self.scene_grid_size,
            render_template=self.render_template,
        )

    async def finalize_all(self) -> list[list[RenderDescriptor]]:
        """One list per effect, in declaration order, holding a descriptor per repetition.

        A ConfigurationError only fails the call that raised it: the run is
        logged, kept in ``failures`` and left out of the results, and the rest
        of the sequence carries on. Any other error aborts the sequence.
        """
        self.failures = []
        results: list[list[RenderDescriptor]] = []
        for index, entry in enumerate(self._entries):
            descriptors: list[RenderDescriptor] = []
            results.append(descriptors)
            try:
                options = entry.options()
            except ConfigurationError as e:
                logger.warning("Effect %d FAILED to build: %s", index, e)
                self.failures.append(FailedRun(index, None, e))
                continue

            count = entry.repetition_count()
            for rep in range(count):
                try:
                    descriptors.append(await self.finalize(options, rep))
                except ConfigurationError as e:
                    logger.warning("Effect %d repetition %d FAILED: %s", index, rep, e)
                    self.failures.append(FailedRun(index, rep, e))
            logger.debug("Effect %d finalized %d of %d repetition(s)", index, len(descriptors), count)
        return results

    async def play(self, renderer: Renderer) -> list[list[RenderDescriptor]]:
        """Finalize everything, then hand each descriptor to the renderer in order."""
        results = await self.finalize_all()
        played = 0
        for descriptors in results:
            for descriptor in descriptors:
                outcome = renderer.play(descriptor)
                if inspect.isawaitable(outcome):
                    await outcome
                played += 1
        logger.info("Sequence played %d descriptor(s) from %d effect(s)", played, len(results))
        return results

    def __len__(self) -> int:
        return len(self._entries)
