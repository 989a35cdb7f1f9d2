# src/rating/knowledge_base.py
"""
Static knowledge base of insurance rates and factors.

Provides:
- typed bucket enums (vehicle category, age bracket, accident bucket)
- bucket selection helpers for age and accident count
- KnowledgeBase: read-only string-keyed facts with typed accessors

Keys are namespaced by family and bucket:
  baseRate.<category>         e.g. baseRate.sedan
  ageFactor.<bracket>         e.g. ageFactor.20-24
  accidentSurcharge.<bucket>  e.g. accidentSurcharge.2+

Notes:
- Rates are compiled-in constants. The base is instance scoped; every engine
  builds its own.
- A key a rule asks for that is not in the base is a ConfigurationError.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from src.rating.errors import ConfigurationError

BASE_RATE_PREFIX = "baseRate"
AGE_FACTOR_PREFIX = "ageFactor"
ACCIDENT_SURCHARGE_PREFIX = "accidentSurcharge"


class VehicleCategory(str, Enum):
    SEDAN = "sedan"
    SUV = "suv"
    LUXURY = "luxury"
    SPORTS = "sports"


class AgeBracket(str, Enum):
    TEEN = "16-19"
    YOUNG_ADULT = "20-24"
    ADULT = "25-65"
    SENIOR = "66+"


class AccidentBucket(str, Enum):
    NONE = "0"
    ONE = "1"
    TWO_OR_MORE = "2+"


DEFAULT_FACTS: Mapping[str, float] = MappingProxyType(
    {
        # Base rates by vehicle category
        "baseRate.sedan": 1000.0,
        "baseRate.suv": 1200.0,
        "baseRate.luxury": 1500.0,
        "baseRate.sports": 1800.0,
        # Age risk factors
        "ageFactor.16-19": 2.0,
        "ageFactor.20-24": 1.5,
        "ageFactor.25-65": 1.0,
        "ageFactor.66+": 1.3,
        # Accident surcharges
        "accidentSurcharge.0": 0.0,
        "accidentSurcharge.1": 300.0,
        "accidentSurcharge.2+": 600.0,
    }
)


def age_bracket(age: int) -> AgeBracket:
    """
    Half-open brackets, first match wins:

    - TEEN        : age < 20
    - YOUNG_ADULT : 20 <= age < 25
    - ADULT       : 25 <= age < 66
    - SENIOR      : age >= 66
    """
    if age < 20:
        return AgeBracket.TEEN
    if age < 25:
        return AgeBracket.YOUNG_ADULT
    if age < 66:
        return AgeBracket.ADULT
    return AgeBracket.SENIOR


def accident_bucket(count: int) -> AccidentBucket:
    if count <= 0:
        return AccidentBucket.NONE
    if count == 1:
        return AccidentBucket.ONE
    return AccidentBucket.TWO_OR_MORE


def base_rate_key(category: VehicleCategory) -> str:
    return f"{BASE_RATE_PREFIX}.{category.value}"


def age_factor_key(bracket: AgeBracket) -> str:
    return f"{AGE_FACTOR_PREFIX}.{bracket.value}"


def accident_surcharge_key(bucket: AccidentBucket) -> str:
    return f"{ACCIDENT_SURCHARGE_PREFIX}.{bucket.value}"


def required_keys() -> List[str]:
    """Every key the default rules can request at runtime."""
    keys = [base_rate_key(c) for c in VehicleCategory]
    keys += [age_factor_key(b) for b in AgeBracket]
    keys += [accident_surcharge_key(b) for b in AccidentBucket]
    return keys


class KnowledgeBase:
    """
    Read-only table of named numeric facts.

    `facts` defaults to DEFAULT_FACTS. With `validate=True` (the default) a
    base missing any required key fails at construction instead of mid
    calculation.
    """

    def __init__(self, facts: Optional[Mapping[str, float]] = None, *, validate: bool = True) -> None:
        source = DEFAULT_FACTS if facts is None else facts
        self._facts: Mapping[str, float] = MappingProxyType({k: float(v) for k, v in source.items()})
        if validate:
            self.validate()

    def validate(self) -> None:
        missing = [k for k in required_keys() if k not in self._facts]
        if missing:
            raise ConfigurationError(f"Knowledge base missing keys: {missing}")

    def get(self, key: str) -> float:
        try:
            return self._facts[key]
        except KeyError:
            raise ConfigurationError(f"Knowledge base has no entry for '{key}'") from None

    def base_rate(self, category: VehicleCategory) -> float:
        return self.get(base_rate_key(category))

    def age_factor(self, bracket: AgeBracket) -> float:
        return self.get(age_factor_key(bracket))

    def accident_surcharge(self, bucket: AccidentBucket) -> float:
        return self.get(accident_surcharge_key(bucket))

    def keys(self) -> List[str]:
        return list(self._facts.keys())

    def as_dict(self) -> Dict[str, float]:
        return dict(self._facts)

    def __contains__(self, key: object) -> bool:
        return key in self._facts

    def __iter__(self) -> Iterator[str]:
        return iter(self._facts)

    def __len__(self) -> int:
        return len(self._facts)

    def __repr__(self) -> str:
        return f"KnowledgeBase({len(self._facts)} facts)"
