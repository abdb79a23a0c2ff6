"""Environment-based settings for the demo drivers."""
from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    seed: Optional[int] = Field(default=None, description="Generator seed (unset = random)")
    log_level: str = Field(default="INFO")
    dashboard_sample_size: int = Field(default=2000, ge=0, description="Flights generated by the dashboard")


def load_settings() -> Settings:
    """Read ``FLIGHTS_*`` variables (a local ``.env`` file is honoured)."""
    load_dotenv()
    values = {
        "seed": os.getenv("FLIGHTS_SEED"),
        "log_level": os.getenv("FLIGHTS_LOG_LEVEL"),
        "dashboard_sample_size": os.getenv("FLIGHTS_DASHBOARD_SAMPLE_SIZE"),
    }
    return Settings(**{k: v for k, v in values.items() if v not in (None, "")})
