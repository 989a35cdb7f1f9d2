import pytest

from src.rating.errors import ConfigurationError
from src.rating.knowledge_base import DEFAULT_FACTS, KnowledgeBase, VehicleCategory
from src.rating.premium import Premium
from src.rating.rules import (
    ACCIDENT_HISTORY_LABEL,
    AGE_FACTOR_LABEL,
    AccidentHistoryRule,
    AgeFactorRule,
    BaseRateRule,
    Rule,
    default_rules,
)


def test_default_sequence(kb):
    rules = default_rules(kb)
    assert [r.name for r in rules] == ["base rate", "age factor", "accident history"]
    assert AgeFactorRule.requires == ("base rate",)


def test_base_rate_rule(kb, make_profile):
    rule = BaseRateRule(kb)
    p = Premium()
    assert rule.applies(make_profile())
    rule.apply(make_profile(make="Chevrolet", model="Tahoe"), p)
    assert p.base_rate == 1200.0
    assert p.adjustments == ()


@pytest.mark.parametrize(
    "age, amount, explanation",
    [
        (19, 1000.0, "Drivers under 20 have higher statistical risk"),
        (20, 500.0, "Drivers 20-24 have moderately higher risk"),
        (65, 0.0, "Standard rate for drivers 25-65"),
        (66, 1000.0 * (1.3 - 1.0), "Slight increase for senior drivers"),
    ],
)
def test_age_factor_rule(kb, make_profile, age, amount, explanation):
    p = Premium()
    p.set_base_rate(1000.0)
    AgeFactorRule(kb).apply(make_profile(age=age), p)
    (adj,) = p.adjustments
    assert adj.label == AGE_FACTOR_LABEL
    assert adj.amount == pytest.approx(amount)
    assert adj.explanation == explanation


def test_accident_rule_predicate(kb, make_profile):
    rule = AccidentHistoryRule(kb)
    assert not rule.applies(make_profile(accidents=0))
    assert rule.applies(make_profile(accidents=1))


@pytest.mark.parametrize("accidents, surcharge", [(1, 300.0), (2, 600.0), (5, 600.0)])
def test_accident_rule_surcharge(kb, make_profile, accidents, surcharge):
    p = Premium()
    AccidentHistoryRule(kb).apply(make_profile(accidents=accidents), p)
    (adj,) = p.adjustments
    assert adj.label == ACCIDENT_HISTORY_LABEL
    assert adj.amount == surcharge


def test_rule_lookup_failure_is_configuration_error(make_profile):
    facts = {k: v for k, v in DEFAULT_FACTS.items() if k != "baseRate.sports"}
    rule = BaseRateRule(KnowledgeBase(facts, validate=False))
    with pytest.raises(ConfigurationError):
        rule.apply(make_profile(make="Ferrari"), Premium())


def test_rule_base_is_abstract(kb):
    with pytest.raises(TypeError):
        Rule(kb)


def test_base_rate_rule_records_category(kb, make_profile):
    p = Premium()
    BaseRateRule(kb).apply(make_profile(make="Porsche", model="911"), p)
    assert p.vehicle_category is VehicleCategory.SPORTS
