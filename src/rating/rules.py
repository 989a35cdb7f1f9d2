# src/rating/rules.py
"""
Rating rules.

Each rule answers two questions about a profile:
- applies(profile): should this rule fire?
- apply(profile, premium): mutate the premium in place

Default sequence (see default_rules):
  1. BaseRateRule         sets premium.base_rate from the vehicle category
  2. AgeFactorRule        reads premium.base_rate, so it requires rule 1
  3. AccidentHistoryRule  only for profiles with accidents

Rules keep no per-calculation state; they only hold the knowledge base.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from src.rating.classifier import classify_vehicle
from src.rating.knowledge_base import (
    AccidentBucket,
    AgeBracket,
    KnowledgeBase,
    accident_bucket,
    age_bracket,
)
from src.rating.premium import Premium
from src.rating.profile import DriverProfile

AGE_FACTOR_LABEL = "Age factor"
ACCIDENT_HISTORY_LABEL = "Accident history"

AGE_EXPLANATIONS: Dict[AgeBracket, str] = {
    AgeBracket.TEEN: "Drivers under 20 have higher statistical risk",
    AgeBracket.YOUNG_ADULT: "Drivers 20-24 have moderately higher risk",
    AgeBracket.ADULT: "Standard rate for drivers 25-65",
    AgeBracket.SENIOR: "Slight increase for senior drivers",
}

ACCIDENT_EXPLANATIONS: Dict[AccidentBucket, str] = {
    AccidentBucket.ONE: "Surcharge for 1 accident in past 5 years",
    AccidentBucket.TWO_OR_MORE: "Major surcharge for 2+ accidents in past 5 years",
}


class Rule(ABC):
    """
    Base class for a named (predicate, effect) pair.

    `requires` lists the names of rules that must have run earlier in the
    sequence; the engine refuses sequences that break it.
    """

    name: str = ""
    requires: Tuple[str, ...] = ()

    def __init__(self, kb: KnowledgeBase) -> None:
        self.kb = kb

    def applies(self, profile: DriverProfile) -> bool:
        return True

    @abstractmethod
    def apply(self, profile: DriverProfile, premium: Premium) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class BaseRateRule(Rule):
    name = "base rate"

    def apply(self, profile: DriverProfile, premium: Premium) -> None:
        category = classify_vehicle(profile.vehicle_make, profile.vehicle_model)
        premium.set_base_rate(self.kb.base_rate(category), category)


class AgeFactorRule(Rule):
    name = "age factor"
    requires = (BaseRateRule.name,)

    def apply(self, profile: DriverProfile, premium: Premium) -> None:
        bracket = age_bracket(profile.age)
        factor = self.kb.age_factor(bracket)
        amount = premium.base_rate * (factor - 1.0)
        premium.add_adjustment(AGE_FACTOR_LABEL, amount, AGE_EXPLANATIONS[bracket])


class AccidentHistoryRule(Rule):
    name = "accident history"

    def applies(self, profile: DriverProfile) -> bool:
        return profile.accidents_in_last_five_years > 0

    def apply(self, profile: DriverProfile, premium: Premium) -> None:
        bucket = accident_bucket(profile.accidents_in_last_five_years)
        surcharge = self.kb.accident_surcharge(bucket)
        premium.add_adjustment(ACCIDENT_HISTORY_LABEL, surcharge, ACCIDENT_EXPLANATIONS[bucket])


def default_rules(kb: KnowledgeBase) -> List[Rule]:
    """The fixed rating sequence. Order matters: base rate first."""
    return [
        BaseRateRule(kb),
        AgeFactorRule(kb),
        AccidentHistoryRule(kb),
    ]
