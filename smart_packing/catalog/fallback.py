"""Embedded default catalog used whenever the dataset cannot be loaded.

The set spans every priority tier and the documents, clothing, toiletries and
electronics categories so a generation run never works against zero entries.
"""
from __future__ import annotations

from typing import List

from smart_packing.core.schemas import (
    CatalogEntry,
    Condition,
    ConditionOperator,
    ConditionType,
    Gender,
    ItemCategory,
    ItemPriority,
    QuantityFormula,
    QuantityRule,
    Seasonality,
)


def create_fallback_entries() -> List[CatalogEntry]:
    return [
        CatalogEntry(
            id="passport",
            name_key="item_passport",
            category=ItemCategory.DOCUMENTS,
            tags=("travel", "international", "essential"),
            is_essential=True,
            priority=ItemPriority.CRITICAL,
            conditions=(
                Condition(type=ConditionType.TRANSPORT, values=("plane",), operator=ConditionOperator.CONTAINS),
            ),
            quantity_rules=(QuantityRule(formula=QuantityFormula.FIXED, min_quantity=1, max_quantity=1),),
            alternatives=("id_card",),
            seasonality=Seasonality.YEAR_ROUND,
            gender_specific=Gender.UNISEX,
        ),
        CatalogEntry(
            id="underwear",
            name_key="item_underwear",
            category=ItemCategory.CLOTHING,
            tags=("clothing", "underwear", "daily", "essential"),
            is_essential=True,
            priority=ItemPriority.ESSENTIAL,
            conditions=(
                Condition(type=ConditionType.DURATION, values=("0",), operator=ConditionOperator.GREATER_THAN),
            ),
            quantity_rules=(QuantityRule(formula=QuantityFormula.PER_DAY, min_quantity=2, max_quantity=10),),
            seasonality=Seasonality.YEAR_ROUND,
            gender_specific=Gender.UNISEX,
        ),
        CatalogEntry(
            id="toothbrush",
            name_key="item_toothbrush",
            category=ItemCategory.TOILETRIES,
            tags=("toiletries", "hygiene", "daily"),
            is_essential=True,
            priority=ItemPriority.ESSENTIAL,
            conditions=(
                Condition(type=ConditionType.DURATION, values=("0",), operator=ConditionOperator.GREATER_THAN),
            ),
            quantity_rules=(QuantityRule(formula=QuantityFormula.PER_PERSON, min_quantity=1, max_quantity=10),),
            seasonality=Seasonality.YEAR_ROUND,
            gender_specific=Gender.UNISEX,
        ),
        CatalogEntry(
            id="sunscreen",
            name_key="item_sunscreen",
            category=ItemCategory.TOILETRIES,
            tags=("sun", "protection", "summer", "beach"),
            priority=ItemPriority.RECOMMENDED,
            conditions=(
                Condition(type=ConditionType.CLIMATE, values=("hot", "warm"), weight=0.9),
                Condition(type=ConditionType.ACTIVITY, values=("beach", "swimming"), weight=0.8),
            ),
            quantity_rules=(
                QuantityRule(formula=QuantityFormula.WEATHER_DEPENDENT, min_quantity=1, max_quantity=2),
            ),
            seasonality=Seasonality.SUMMER,
            gender_specific=Gender.UNISEX,
        ),
        CatalogEntry(
            id="business_suit",
            name_key="item_business_suit",
            category=ItemCategory.CLOTHING,
            tags=("business", "formal", "professional"),
            priority=ItemPriority.ESSENTIAL,
            conditions=(
                Condition(type=ConditionType.BUSINESS_TRIP, values=("true",), operator=ConditionOperator.EQUALS),
                Condition(type=ConditionType.ACTIVITY, values=("business",), weight=0.9),
            ),
            quantity_rules=(QuantityRule(formula=QuantityFormula.CONDITIONAL, min_quantity=1, max_quantity=3),),
            alternatives=("formal_dress",),
            seasonality=Seasonality.YEAR_ROUND,
            gender_specific=Gender.UNISEX,
        ),
        CatalogEntry(
            id="hiking_boots",
            name_key="item_hiking_boots",
            category=ItemCategory.CLOTHING,
            tags=("hiking", "outdoor", "footwear", "sports"),
            is_essential=True,
            priority=ItemPriority.ESSENTIAL,
            conditions=(Condition(type=ConditionType.ACTIVITY, values=("hiking",)),),
            quantity_rules=(QuantityRule(formula=QuantityFormula.FIXED, min_quantity=1, max_quantity=1),),
            alternatives=("sturdy_shoes",),
            seasonality=Seasonality.YEAR_ROUND,
            gender_specific=Gender.UNISEX,
        ),
        CatalogEntry(
            id="phone_charger",
            name_key="item_phone_charger",
            category=ItemCategory.ELECTRONICS,
            tags=("electronics", "essential", "daily", "charger"),
            is_essential=True,
            priority=ItemPriority.CRITICAL,
            conditions=(
                Condition(type=ConditionType.DURATION, values=("0",), operator=ConditionOperator.GREATER_THAN),
            ),
            quantity_rules=(QuantityRule(formula=QuantityFormula.FIXED, min_quantity=1, max_quantity=2),),
            alternatives=("power_bank",),
            seasonality=Seasonality.YEAR_ROUND,
            gender_specific=Gender.UNISEX,
        ),
        CatalogEntry(
            id="travel_pillow",
            name_key="item_travel_pillow",
            category=ItemCategory.ACCESSORIES,
            tags=("comfort", "transit"),
            priority=ItemPriority.OPTIONAL,
            conditions=(
                Condition(type=ConditionType.TRANSPORT, values=("plane", "train", "bus"), weight=0.8),
            ),
            quantity_rules=(QuantityRule(formula=QuantityFormula.PER_PERSON, min_quantity=1, max_quantity=6),),
            seasonality=Seasonality.YEAR_ROUND,
            gender_specific=Gender.UNISEX,
        ),
        CatalogEntry(
            id="umbrella",
            name_key="item_umbrella",
            category=ItemCategory.ACCESSORIES,
            tags=("rain", "weather"),
            priority=ItemPriority.SITUATIONAL,
            conditions=(Condition(type=ConditionType.CLIMATE, values=("moderate", "cool"), weight=0.7),),
            quantity_rules=(QuantityRule(formula=QuantityFormula.FIXED, min_quantity=1, max_quantity=1),),
            seasonality=Seasonality.YEAR_ROUND,
            gender_specific=Gender.UNISEX,
        ),
    ]
