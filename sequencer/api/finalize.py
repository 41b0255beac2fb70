"""POST /api/finalize — resolve a batch of effects into render descriptors."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from sequencer.builder import build_options
from sequencer.config import settings
from sequencer.errors import AssetMeasurementError, ConfigurationError, UnresolvedNameError
from sequencer.models.locations import Point
from sequencer.models.requests import FinalizeRequest
from sequencer.models.responses import EffectFailure, FinalizeResponse
from sequencer.sequence import Sequence
from sequencer.utils.media import ImageProbe
from sequencer.utils.random_source import NumpyRandomSource

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/finalize", response_model=FinalizeResponse)
async def finalize(req: FinalizeRequest) -> FinalizeResponse:
    start = time.perf_counter()

    seq = Sequence(
        rng=NumpyRandomSource(req.seed),
        probe=ImageProbe(settings.asset_root),
        scene_grid_size=req.scene_grid_size,
    )
    for seed in req.named_positions:
        seq.record_named_position(seed.name, seed.repetition, Point(x=seed.x, y=seed.y))

    try:
        for effect in req.effects:
            options = build_options(
                **effect.model_dump(exclude_none=True, exclude={"repetitions"})
            )
            seq.add(options, repetitions=effect.repetitions)
        descriptors = await seq.finalize_all()
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except UnresolvedNameError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except AssetMeasurementError as e:
        raise HTTPException(status_code=424, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Finalized %d effect(s) in %.1fms", len(descriptors), elapsed)

    return FinalizeResponse(
        descriptors=descriptors,
        failures=[
            EffectFailure(effect=f.effect, repetition=f.repetition, detail=str(f.error))
            for f in seq.failures
        ],
        processing_time_ms=round(elapsed, 3),
        seed=req.seed,
    )
