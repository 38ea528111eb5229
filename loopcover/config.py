"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    loopcover_env: str = "development"
    loopcover_log_level: str = "info"

    # Grid (defaults draw a 5-spoke, 15-ring disk)
    radial_divisions: int = 5
    concentric_divisions: int = 15

    # Randomness: None = fresh entropy each run
    random_seed: int | None = None

    # Deformation budgets: None = run to quiescence
    cover_max_iterations: int | None = None
    series_iterations: int = 200

    check_invariants: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
