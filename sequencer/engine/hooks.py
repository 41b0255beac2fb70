"""Override hook chains.

A hook is ``hook(ctx, descriptor) -> descriptor`` and may be async. Hooks run
strictly in registration order and each receives exactly what the previous
one returned. There is no isolation: a hook that corrupts the descriptor
corrupts it for every hook after it, and an exception from a hook propagates
unchanged and fails the whole finalize.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Awaitable, Callable, Union

from sequencer.errors import HookError
from sequencer.models.descriptor import RenderDescriptor

if TYPE_CHECKING:
    from sequencer.engine.context import PipelineContext

logger = logging.getLogger(__name__)

OverrideHook = Callable[
    ["PipelineContext", RenderDescriptor],
    Union[RenderDescriptor, Awaitable[RenderDescriptor]],
]


class OverrideHookChain:
    def __init__(self, hooks: Iterable[OverrideHook] = ()) -> None:
        self.hooks: list[OverrideHook] = list(hooks)

    def add(self, hook: OverrideHook) -> None:
        self.hooks.append(hook)

    async def run(self, ctx: PipelineContext, descriptor: RenderDescriptor) -> RenderDescriptor:
        for i, hook in enumerate(self.hooks):
            result = hook(ctx, descriptor)
            if inspect.isawaitable(result):
                result = await result
            if not isinstance(result, RenderDescriptor):
                raise HookError(
                    f"Override hook #{i} ({_hook_name(hook)}) returned "
                    f"{type(result).__name__}, expected RenderDescriptor"
                )
            descriptor = result
            logger.debug("Hook %s applied", _hook_name(hook))
        return descriptor

    def __len__(self) -> int:
        return len(self.hooks)


def _hook_name(hook: OverrideHook) -> str:
    return getattr(hook, "__qualname__", None) or repr(hook)
