# src/quote/service.py
"""
Premium quote service for the Insurance Rating Engine.

Single source of truth for callers (API, Lambda, batch):
- raw profile dict -> DriverProfile -> RatingEngine -> PremiumResponse
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from src.quote.schemas import PremiumResponse
from src.rating.classifier import is_recognised_vehicle
from src.rating.engine import RatingEngine
from src.rating.profile import DriverProfile
from src.utils.config import RatingSettings, get_settings

logger = logging.getLogger(__name__)

# In-process cache (FastAPI startup + AWS Lambda warm invocations)
_CACHED_ENGINE: Optional[RatingEngine] = None


def get_engine(force_reload: bool = False) -> RatingEngine:
    """
    Build and cache the rating engine.
    """
    global _CACHED_ENGINE
    if force_reload or _CACHED_ENGINE is None:
        _CACHED_ENGINE = RatingEngine()
        logger.info("Rating engine ready: %s", ", ".join(_CACHED_ENGINE.rule_names))
    return _CACHED_ENGINE


def profile_warnings(profile: DriverProfile) -> List[str]:
    warnings: List[str] = []
    if not is_recognised_vehicle(profile.vehicle_make, profile.vehicle_model):
        warnings.append(
            f"Unrecognised vehicle '{profile.vehicle_make} {profile.vehicle_model}'; rated as sedan."
        )
    return warnings


def premium_from_profile(
    profile: DriverProfile,
    *,
    engine: Optional[RatingEngine] = None,
    settings: Optional[RatingSettings] = None,
) -> Tuple[PremiumResponse, List[str]]:
    """
    Rate a single profile.
    Returns (PremiumResponse, warnings).
    """
    eng = engine or get_engine()
    cfg = settings or get_settings()

    premium = eng.calculate_premium(profile)

    warnings = profile_warnings(profile) if cfg.warn_unknown_vehicle else []
    for w in warnings:
        logger.warning(w)

    resp = PremiumResponse(
        currency=cfg.currency,
        vehicle_category=premium.vehicle_category.value if premium.vehicle_category else None,
        base_rate=premium.base_rate,
        adjustments=[a.to_dict() for a in premium.adjustments],
        total=premium.total,
    )
    return resp, warnings


def premium_from_profile_dict(
    profile: Dict[str, Any],
    *,
    engine: Optional[RatingEngine] = None,
    settings: Optional[RatingSettings] = None,
) -> Dict[str, Any]:
    """
    Convenience: returns a JSON-ready dict and includes warnings.
    """
    resp, warnings = premium_from_profile(
        DriverProfile.from_dict(profile), engine=engine, settings=settings
    )
    out = resp.to_dict()
    out["warnings"] = warnings
    return out
