"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sequencer_env: str = "development"
    sequencer_log_level: str = "info"

    # Grid size (pixels per square) of the active scene
    scene_grid_size: float = 100.0
    # Relative asset paths are measured from here
    asset_root: str = "."

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
