"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sequencer.models.descriptor import RenderDescriptor


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    steps_registered: int = 0


class EffectFailure(BaseModel):
    effect: int
    # None when the effect could not be built at all
    repetition: int | None = None
    detail: str


class FinalizeResponse(BaseModel):
    # One list per effect, one descriptor per repetition
    descriptors: list[list[RenderDescriptor]] = Field(default_factory=list)
    # Runs rejected with a configuration error; their descriptors are omitted
    failures: list[EffectFailure] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    seed: int | None = None
