# src/rating/classifier.py
"""
Vehicle classification from raw make/model strings.

Priority (first match wins):
  1. luxury make  -> luxury
  2. sports make  -> sports
  3. SUV model    -> suv
  4. anything else -> sedan

Unknown vehicles rate as sedans. That is the intended default, not an error;
outer layers can use is_recognised_vehicle() to surface it as a warning.
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from src.rating.knowledge_base import VehicleCategory

LUXURY_MAKES: FrozenSet[str] = frozenset({"bmw", "mercedes", "lexus", "audi"})
SPORTS_MAKES: FrozenSet[str] = frozenset({"ferrari", "porsche", "mustang", "corvette"})
SUV_MODELS: FrozenSet[str] = frozenset({"suv", "explorer", "tahoe", "highlander"})


def _norm(s: str) -> str:
    return s.strip().lower()


def _match(make: str, model: str) -> Optional[VehicleCategory]:
    make_n = _norm(make)
    model_n = _norm(model)

    if make_n in LUXURY_MAKES:
        return VehicleCategory.LUXURY
    if make_n in SPORTS_MAKES:
        return VehicleCategory.SPORTS
    if model_n in SUV_MODELS:
        return VehicleCategory.SUV
    return None


def classify_vehicle(make: str, model: str) -> VehicleCategory:
    category = _match(make, model)
    return VehicleCategory.SEDAN if category is None else category


def is_recognised_vehicle(make: str, model: str) -> bool:
    """False when the vehicle only rated as a sedan by default."""
    return _match(make, model) is not None
