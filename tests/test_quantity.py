"""Tests for quantity calculation."""
from __future__ import annotations

import pytest

from conftest import make_context, make_entry
from smart_packing.core.quantity import apply_rule, calculate_quantity, conditional_quantity
from smart_packing.core.schemas import (
    Climate,
    Condition,
    ConditionOperator,
    ConditionType,
    ItemCategory,
    QuantityFormula,
    QuantityRule,
)


def _rule(formula, min_quantity=1, max_quantity=20, condition=None):
    return QuantityRule(
        formula=formula, min_quantity=min_quantity, max_quantity=max_quantity, condition=condition
    )


def test_no_rules_uses_base_quantity():
    assert calculate_quantity(make_entry("bag", base_quantity=2), make_context()) == 2


@pytest.mark.parametrize(
    ("formula", "expected"),
    [
        (QuantityFormula.FIXED, 2),
        (QuantityFormula.PER_DAY, 8),
        (QuantityFormula.PER_PERSON, 6),
        (QuantityFormula.PER_DAY_PER_PERSON, 20),
    ],
)
def test_scaling_formulas(formula, expected):
    """Test fixed and scaling formulas with base 2, 4 days and 3 people."""
    entry = make_entry("thing", base_quantity=2, quantity_rules=[_rule(formula)])
    context = make_context(days=4, number_of_people=3)
    assert calculate_quantity(entry, context) == expected


def test_rule_bounds_clamp():
    entry = make_entry("snack", quantity_rules=[_rule(QuantityFormula.PER_DAY, 2, 5)])
    assert calculate_quantity(entry, make_context(days=10)) == 5
    assert calculate_quantity(entry, make_context(days=1)) == 2


def test_global_bounds_clamp():
    """Test that the result never exceeds 20 even when a rule allows more."""
    entry = make_entry(
        "water",
        base_quantity=3,
        quantity_rules=[_rule(QuantityFormula.PER_DAY_PER_PERSON, 1, 500)],
    )
    assert calculate_quantity(entry, make_context(days=10, number_of_people=4)) == 20


def test_zero_rule_minimum_still_yields_one():
    entry = make_entry("stub", quantity_rules=[_rule(QuantityFormula.FIXED, 0, 0)])
    assert calculate_quantity(entry, make_context()) == 1


def test_last_applicable_rule_wins():
    entry = make_entry(
        "shirt",
        quantity_rules=[_rule(QuantityFormula.PER_DAY), _rule(QuantityFormula.FIXED)],
    )
    assert calculate_quantity(entry, make_context(days=6)) == 1


def test_guarded_rule_is_skipped_when_condition_fails():
    """Test that a rule whose guard does not match leaves the running value alone."""
    long_trip = Condition(type=ConditionType.DURATION, values=("10",), operator=ConditionOperator.GREATER_THAN)
    entry = make_entry(
        "sweater",
        quantity_rules=[
            _rule(QuantityFormula.PER_DAY, 1, 3),
            _rule(QuantityFormula.FIXED, 1, 1, condition=long_trip),
        ],
    )
    assert calculate_quantity(entry, make_context(days=5)) == 3
    assert calculate_quantity(entry, make_context(days=12)) == 1


def test_apply_rule_returns_running_value_for_failed_guard():
    guard = Condition(type=ConditionType.CLIMATE, values=("hot",))
    rule = _rule(QuantityFormula.PER_DAY, condition=guard)
    assert apply_rule(7, rule, make_entry("x"), make_context(climate=Climate.COLD)) == 7


class TestConditionalFormula:
    """Category and tag heuristics behind the conditional formula."""

    @pytest.mark.parametrize(("days", "expected"), [(2, 3), (6, 7), (12, 7)])
    def test_underwear_and_socks(self, days, expected):
        entry = make_entry("socks", category=ItemCategory.CLOTHING, tags=("socks",))
        assert conditional_quantity(entry, make_context(days=days)) == expected

    @pytest.mark.parametrize(("days", "expected"), [(2, 2), (8, 4), (20, 5)])
    def test_tops(self, days, expected):
        entry = make_entry("shirts", category=ItemCategory.CLOTHING, tags=("shirts",))
        assert conditional_quantity(entry, make_context(days=days)) == expected

    def test_bottoms_depend_on_trip_length(self):
        entry = make_entry("pants", category=ItemCategory.CLOTHING, tags=("pants",))
        assert conditional_quantity(entry, make_context(days=5)) == 2
        assert conditional_quantity(entry, make_context(days=15)) == 3

    def test_outerwear_and_untagged_clothing(self):
        jacket = make_entry("jacket", category=ItemCategory.CLOTHING, tags=("outerwear",), base_quantity=3)
        scarf = make_entry("scarf", category=ItemCategory.CLOTHING, base_quantity=2)
        assert conditional_quantity(jacket, make_context()) == 1
        assert conditional_quantity(scarf, make_context()) == 2

    def test_other_categories(self):
        toiletry = make_entry("soap", category=ItemCategory.TOILETRIES)
        gadget = make_entry("cable", category=ItemCategory.ELECTRONICS)
        document = make_entry("visa", category=ItemCategory.DOCUMENTS, base_quantity=4)
        other = make_entry("games", category=ItemCategory.OTHER, base_quantity=3)

        assert conditional_quantity(toiletry, make_context(days=5)) == 1
        assert conditional_quantity(toiletry, make_context(days=14)) == 2
        assert conditional_quantity(gadget, make_context(number_of_people=2)) == 1
        assert conditional_quantity(gadget, make_context(number_of_people=3)) == 2
        assert conditional_quantity(document, make_context()) == 1
        assert conditional_quantity(other, make_context()) == 3


class TestWeatherDependentFormula:
    rule = _rule(QuantityFormula.WEATHER_DEPENDENT)

    def test_cold_items_get_one_more_in_the_cold(self):
        gloves = make_entry("gloves", tags=("winter",), quantity_rules=[self.rule])
        assert calculate_quantity(gloves, make_context(climate=Climate.COLD)) == 2
        assert calculate_quantity(gloves, make_context(climate=Climate.WARM)) == 1

    def test_sun_items_get_one_more_in_the_heat(self):
        hat = make_entry("hat", tags=("sun",), quantity_rules=[self.rule])
        assert calculate_quantity(hat, make_context(climate=Climate.HOT)) == 2
        assert calculate_quantity(hat, make_context(climate=Climate.COLD)) == 1

    def test_base_without_weather(self):
        gloves = make_entry("gloves", tags=("cold",), base_quantity=2, quantity_rules=[self.rule])
        assert calculate_quantity(gloves, make_context()) == 2
