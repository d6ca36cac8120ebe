"""Estimate the mass of parsed food items."""

from wellness_tracker.domain.food_tables import (
    COUNT_UNITS,
    MASS_UNITS,
    REFERENCE_CUP_ML,
    UNIT_CONVERSIONS,
    VOLUME_UNITS,
    density_for,
    per_item_grams,
)
from wellness_tracker.domain.meals import ParsedFoodItem


def calculate_weight(item: ParsedFoodItem) -> float:
    """Return the estimated weight of an item in grams.

    Mass units convert directly. Volume units are converted through the
    food's density in grams per reference cup (100 g when unknown). Count
    units use the food's typical per-item weight when one is known; any
    other unit falls back to its table factor, or 1 when unrecognised.
    """
    unit = item.unit
    quantity = item.quantity
    if unit in MASS_UNITS:
        return quantity * UNIT_CONVERSIONS[unit]
    if unit in VOLUME_UNITS:
        volume_ml = quantity * UNIT_CONVERSIONS[unit]
        return volume_ml * density_for(item.name) / REFERENCE_CUP_ML
    if unit in COUNT_UNITS:
        item_grams = per_item_grams(item.name)
        if item_grams is not None:
            return quantity * item_grams
    return quantity * UNIT_CONVERSIONS.get(unit, 1.0)
