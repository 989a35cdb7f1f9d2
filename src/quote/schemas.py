# src/quote/schemas.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class PremiumResponse:
    currency: str
    vehicle_category: Optional[str]
    base_rate: float
    adjustments: List[Dict[str, Any]]
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currency": self.currency,
            "vehicle_category": self.vehicle_category,
            "base_rate": self.base_rate,
            "adjustments": [dict(a) for a in self.adjustments],
            "total": self.total,
        }
