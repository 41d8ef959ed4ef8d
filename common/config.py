"""
common/config.py
----------------
Tunables for the zone populator.

Defaults reproduce the stock izakaya behaviour; every value can be
overridden from the environment (a local `.env` file is honoured):

  MAPGEN_SEED                     integer seed for reproducible maps
  MAPGEN_WINDOW_SKIP_PROBABILITY  chance to leave an exterior wall run bare
  MAPGEN_CABINET_PROBABILITY      chance a kitchen back cell becomes a cabinet
  MAPGEN_MAX_SETTLE_PASSES        diagonal/connectivity settle iterations
  MAPGEN_LOG_LEVEL                logging level name for the CLI / API
"""

import os
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


class PopulatorConfig(BaseModel):
    seed: Optional[int] = None

    # Wall decoration
    window_skip_probability: float = Field(0.3, ge=0.0, le=1.0)
    window_size: int = Field(2, ge=1)
    min_window_run: int = Field(3, ge=1)

    # Kitchen
    cabinet_probability: float = Field(0.8, ge=0.0, le=1.0)
    kitchen_appliances: List[str] = Field(default_factory=lambda: ["O", "B", "S", "S", "S"])

    # Dining
    dining_attempt_factor: int = Field(2, ge=0)

    # Bedroom / Lounge
    bed_count: int = Field(1, ge=0)
    lamp_count: int = Field(1, ge=0)
    max_sofas: int = Field(4, ge=0)
    sofa_ratio: float = Field(0.08, ge=0.0)
    max_bookshelves: int = Field(3, ge=0)
    bookshelf_ratio: float = Field(0.05, ge=0.0)

    # Stairs
    min_stairs_height: int = Field(2, ge=1)

    # Diagonal fix <-> connectivity repair alternation
    max_settle_passes: int = Field(8, ge=1)


DEFAULT_CONFIG = PopulatorConfig()


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    return float(raw) if raw not in (None, "") else None


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    return int(raw) if raw not in (None, "") else None


def load_config(**overrides) -> PopulatorConfig:
    """Build a PopulatorConfig from defaults, environment and explicit overrides."""
    load_dotenv(find_dotenv(usecwd=True))
    values = {
        "seed": _env_int("MAPGEN_SEED"),
        "window_skip_probability": _env_float("MAPGEN_WINDOW_SKIP_PROBABILITY"),
        "cabinet_probability": _env_float("MAPGEN_CABINET_PROBABILITY"),
        "max_settle_passes": _env_int("MAPGEN_MAX_SETTLE_PASSES"),
    }
    values = {k: v for k, v in values.items() if v is not None}
    values.update(overrides)
    return PopulatorConfig(**values)


def get_log_level_name() -> str:
    load_dotenv(find_dotenv(usecwd=True))
    return os.getenv("MAPGEN_LOG_LEVEL", "INFO")
