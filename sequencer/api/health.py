"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from sequencer import __version__
from sequencer.engine.registry import get_registry
from sequencer.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        steps_registered=get_registry().count,
    )


@router.get("/steps")
async def steps() -> list[dict[str, str]]:
    return [
        {"id": spec.id, "stage": spec.stage.name, "description": spec.description}
        for spec in get_registry().resolve_order()
    ]
