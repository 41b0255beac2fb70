"""S08 — Path Template.

Runs after variant selection so templates can build on the chosen variant.
"""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step


@step(
    id="S08",
    stage=Stage.ASSET,
    dependencies=["S07"],
    description="Substitute the path template context",
)
def path_template(ctx: PipelineContext) -> None:
    context = ctx.options.template_context
    if context is None:
        return
    ctx.descriptor.file = ctx.render_template(ctx.descriptor.file, context)
