"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sequencer import __version__
from sequencer.config import settings
from sequencer.engine.registry import register_steps

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.sequencer_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Effect Sequencer",
        description="Resolves declarative sprite effects into render descriptors",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all step modules to trigger registration
    register_steps()

    from sequencer.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
