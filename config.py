"""
Centralised settings loader.

All knobs can be overridden through ``HEALTH_*`` environment variables or a
local ``.env`` file.
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── persisted sources ──────────────────────────────────────────
    data_dir: Path = Path(".")
    navy_source: str = "us_user_data.csv"
    bmi_source: str = "bmi_user_data.csv"
    hip_precision: int = Field(1, ge=0, le=6)

    # ─── console ────────────────────────────────────────────────────
    display_width: int = Field(60, gt=0)
    log_level: str = "INFO"

    # allow unrelated env-vars without crashing
    model_config = SettingsConfigDict(
        env_prefix="HEALTH_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()


settings: _Settings = _cached()
