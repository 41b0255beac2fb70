"""Step registry — every finalize step is a standalone function registered via decorator.

Usage:
    @step(id="S09", stage=Stage.SCALING, dependencies=["S08"])
    def grid_normalization(ctx: PipelineContext) -> None:
        ctx.descriptor.scale.x *= ctx.grid_ratio

Steps may be plain functions or coroutines. Adding a step = creating one file
in ``sequencer.engine.steps`` with the decorator.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Callable, Union

if TYPE_CHECKING:
    from sequencer.engine.context import PipelineContext

logger = logging.getLogger(__name__)

StepFn = Callable[["PipelineContext"], Union[None, Awaitable[None]]]


class Stage(enum.IntEnum):
    PLACEMENT = 0
    ASSET = 1
    SCALING = 2
    OUTPUT = 3


@dataclass
class StepSpec:
    id: str
    stage: Stage
    fn: StepFn
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StepRegistry:
    """Registry of finalize steps (a module-level singleton by default)."""

    def __init__(self) -> None:
        self._steps: dict[str, StepSpec] = {}

    def register(self, spec: StepSpec) -> None:
        if spec.id in self._steps:
            raise ValueError(f"Duplicate step ID: {spec.id}")
        self._steps[spec.id] = spec
        logger.debug("Registered step %s (%s)", spec.id, spec.stage.name)

    def get(self, step_id: str) -> StepSpec:
        return self._steps[step_id]

    def resolve_order(self) -> list[StepSpec]:
        """Topological sort respecting dependencies."""
        pool = self._steps

        # Kahn's algorithm, ties broken by ID
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[sid] += 1

        queue = sorted([sid for sid, d in in_degree.items() if d == 0])
        ordered: list[StepSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other_spec in pool.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._steps)


# Module-level singleton
_registry = StepRegistry()


def get_registry() -> StepRegistry:
    return _registry


def step(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a finalize step."""

    def decorator(fn: StepFn):
        spec = StepSpec(
            id=id,
            stage=stage,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def register_steps() -> StepRegistry:
    """Import all step modules so @step decorators fire. Safe to call repeatedly."""
    package = importlib.import_module("sequencer.engine.steps")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"sequencer.engine.steps.{module_name}")
    return _registry
