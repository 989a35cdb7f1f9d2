# src/rating/engine.py
"""
Rule-based premium calculation.

Usage:
    engine = RatingEngine()
    premium = engine.calculate_premium(DriverProfile(30, "Toyota", "Camry", 0))
    premium.total  # 1000.0

The knowledge base and rule tuple are read-only after construction, so one
engine can serve any number of calculations. Every calculation gets its own
Premium.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Set, Tuple

from src.rating.errors import ConfigurationError
from src.rating.knowledge_base import KnowledgeBase
from src.rating.premium import Premium
from src.rating.profile import DriverProfile
from src.rating.rules import Rule, default_rules

logger = logging.getLogger(__name__)


def check_rule_order(rules: Iterable[Rule]) -> None:
    """Raise ConfigurationError unless each rule's requirements run before it."""
    seen: Set[str] = set()
    for rule in rules:
        if rule.name in seen:
            raise ConfigurationError(f"Duplicate rule name: '{rule.name}'")
        missing = [r for r in rule.requires if r not in seen]
        if missing:
            raise ConfigurationError(f"Rule '{rule.name}' must run after {missing}")
        seen.add(rule.name)


class RatingEngine:
    def __init__(
        self,
        knowledge_base: Optional[KnowledgeBase] = None,
        rules: Optional[Iterable[Rule]] = None,
    ) -> None:
        self._kb = knowledge_base if knowledge_base is not None else KnowledgeBase()
        seq = default_rules(self._kb) if rules is None else list(rules)
        check_rule_order(seq)
        self._rules: Tuple[Rule, ...] = tuple(seq)

    @property
    def knowledge_base(self) -> KnowledgeBase:
        return self._kb

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def rule_names(self) -> Tuple[str, ...]:
        return tuple(r.name for r in self._rules)

    def calculate_premium(self, profile: DriverProfile) -> Premium:
        """
        Apply every rule whose predicate holds, in sequence order.

        A ConfigurationError from any rule aborts the whole calculation.
        """
        premium = Premium()
        for rule in self._rules:
            if not rule.applies(profile):
                logger.debug("Rule skipped: %s", rule.name)
                continue
            rule.apply(profile, premium)
            logger.debug("Rule applied: %s (running total %.2f)", rule.name, premium.total)
        return premium.seal()
