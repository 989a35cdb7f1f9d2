# src/rating/premium.py
"""
Premium result accumulator.

A Premium starts empty, is filled in by the rules of one calculation and is
sealed by the engine before it is handed back. The total is never stored.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from src.rating.errors import PremiumSealedError
from src.rating.knowledge_base import VehicleCategory


@dataclass(frozen=True)
class Adjustment:
    label: str
    amount: float
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Premium:
    def __init__(self) -> None:
        self._base_rate: float = 0.0
        self._vehicle_category: Optional[VehicleCategory] = None
        self._adjustments: List[Adjustment] = []
        self._sealed: bool = False

    @property
    def base_rate(self) -> float:
        return self._base_rate

    @base_rate.setter
    def base_rate(self, rate: float) -> None:
        self.set_base_rate(rate)

    @property
    def vehicle_category(self) -> Optional[VehicleCategory]:
        """Category the base rate was priced for; None until a rule sets it."""
        return self._vehicle_category

    @property
    def adjustments(self) -> Tuple[Adjustment, ...]:
        return tuple(self._adjustments)

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def total(self) -> float:
        # Left-to-right in list order: base + a1 + a2 + ...
        total = float(self._base_rate)
        for adj in self._adjustments:
            total += adj.amount
        return total

    def set_base_rate(self, rate: float, category: Optional[VehicleCategory] = None) -> None:
        self._check_open()
        self._base_rate = float(rate)
        if category is not None:
            self._vehicle_category = category

    def add_adjustment(self, label: str, amount: float, explanation: str) -> Adjustment:
        self._check_open()
        adj = Adjustment(label=label, amount=float(amount), explanation=explanation)
        self._adjustments.append(adj)
        return adj

    def find_adjustment(self, label: str) -> Optional[Adjustment]:
        for adj in self._adjustments:
            if adj.label == label:
                return adj
        return None

    def seal(self) -> "Premium":
        self._sealed = True
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vehicle_category": self._vehicle_category.value if self._vehicle_category else None,
            "base_rate": self._base_rate,
            "adjustments": [a.to_dict() for a in self._adjustments],
            "total": self.total,
        }

    def __repr__(self) -> str:
        return f"Premium(base_rate={self._base_rate}, adjustments={len(self._adjustments)}, total={self.total})"

    def _check_open(self) -> None:
        if self._sealed:
            raise PremiumSealedError("Premium has already been returned by the engine and is read-only")
