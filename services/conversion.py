"""
Unit Conversion Service

Converts ingredient quantities between units. Weight and volume units
convert within their own table; a weight/volume pair is bridged through the
ingredient's density when one can be found for its name.

Conversions fail soft: an impossible conversion hands back the original
quantity tagged as unresolved, so one bad unit never blocks a recipe total.
"""

import math
from dataclasses import dataclass
from typing import Optional

from constants import (
    INGREDIENT_DENSITIES,
    VOLUME,
    VOLUME_TO_ML,
    VOLUME_UNITS,
    WEIGHT,
    WEIGHT_TO_G,
    WEIGHT_UNITS,
)
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Converted:
    value: float
    resolved = True


@dataclass(frozen=True)
class Unresolved:
    """Conversion could not be performed; value is the original quantity."""
    value: float
    reason: str
    resolved = False


def normalize_unit(unit):
    return (unit or '').strip().lower()


def unit_category(unit):
    """Return 'weight', 'volume', or None for units found in neither table."""
    unit = normalize_unit(unit)
    if unit in WEIGHT_UNITS:
        return WEIGHT
    if unit in VOLUME_UNITS:
        return VOLUME
    return None


def guess_ingredient_density(ingredient_name) -> Optional[float]:
    """
    Look up a density (g/ml) for an ingredient by substring match on its name.

    When several entries match, the longest substring wins, so "olive oil"
    beats "oil" and "sour cream" beats "cream". Equal lengths keep table order.
    """
    name = (ingredient_name or '').lower()
    if not name:
        return None

    best_key, best_density = None, None
    for key, density in INGREDIENT_DENSITIES:
        if key in name and (best_key is None or len(key) > len(best_key)):
            best_key, best_density = key, density
    return best_density


def convert_units(quantity, from_unit, to_unit, ingredient_name=''):
    """
    Convert a quantity between units.

    Args:
        quantity: Amount expressed in from_unit
        from_unit: Source unit (case-insensitive)
        to_unit: Target unit (case-insensitive)
        ingredient_name: Used for density lookup on weight/volume conversions

    Returns:
        Converted(value) on success, Unresolved(quantity, reason) otherwise
    """
    quantity = _finite(quantity)
    source = normalize_unit(from_unit)
    target = normalize_unit(to_unit)

    if source == target:
        return Converted(quantity)

    if source in WEIGHT_TO_G and target in WEIGHT_TO_G:
        return Converted(quantity * WEIGHT_TO_G[source] / WEIGHT_TO_G[target])

    if source in VOLUME_TO_ML and target in VOLUME_TO_ML:
        return Converted(quantity * VOLUME_TO_ML[source] / VOLUME_TO_ML[target])

    source_kind = unit_category(source)
    target_kind = unit_category(target)

    if {source_kind, target_kind} == {WEIGHT, VOLUME}:
        density = guess_ingredient_density(ingredient_name)
        if not density:
            return Unresolved(quantity, (
                f'Cannot convert {from_unit} to {to_unit} - unknown ingredient density '
                f'for "{ingredient_name}". Use units of the same kind (volume or weight).'
            ))
        if source_kind == VOLUME:
            grams = quantity * VOLUME_TO_ML[source] * density
            return Converted(grams / WEIGHT_TO_G[target])
        ml = quantity * WEIGHT_TO_G[source] / density
        return Converted(ml / VOLUME_TO_ML[target])

    unknown = [unit for unit, kind in ((from_unit, source_kind), (to_unit, target_kind)) if kind is None]
    return Unresolved(quantity, f'Cannot convert {from_unit} to {to_unit} - unknown unit "{unknown[0]}"')


def convert(quantity, from_unit, to_unit, ingredient_name=''):
    """Convert and return a plain number, logging unresolved conversions."""
    result = convert_units(quantity, from_unit, to_unit, ingredient_name)
    if not result.resolved:
        logger.warning(result.reason)
    return result.value


def _finite(value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0
