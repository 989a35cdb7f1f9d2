from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


def _env_bool(key: str, default: bool) -> bool:
    v = _env(key)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    data_dir: Path
    reports_dir: Path


def get_project_root() -> Path:
    """
    Resolve repo root robustly.
    Assumes this file lives at: <root>/src/utils/config.py
    """
    return Path(__file__).resolve().parents[2]


def get_paths() -> ProjectPaths:
    root = get_project_root()
    return ProjectPaths(
        root=root,
        data_dir=root / "data",
        reports_dir=root / "reports",
    )


@dataclass(frozen=True)
class RatingSettings:
    currency: str = "USD"
    log_level: str = "INFO"
    # Add a warning to quotes for vehicles that only rated as sedan by default
    warn_unknown_vehicle: bool = True


def get_settings() -> RatingSettings:
    """
    Runtime settings from environment variables.
    Rates themselves are compiled in (see src.rating.knowledge_base).

    Env:
      RATING_CURRENCY              (default: USD)
      LOG_LEVEL                    (default: INFO)
      RATING_WARN_UNKNOWN_VEHICLE  (default: true)
    """
    return RatingSettings(
        currency=_env("RATING_CURRENCY", "USD") or "USD",
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        warn_unknown_vehicle=_env_bool("RATING_WARN_UNKNOWN_VEHICLE", True),
    )
