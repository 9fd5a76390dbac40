"""
Constants Package

Unit tables, ingredient densities, energy ratings, validation whitelists
and seed data.
"""

from .units import (
    WEIGHT_TO_G,
    VOLUME_TO_ML,
    WEIGHT_UNITS,
    VOLUME_UNITS,
    WEIGHT,
    VOLUME,
    COMMON_FRACTIONS,
    UNICODE_FRACTIONS,
)

from .ingredients import INGREDIENT_DENSITIES

from .energy import (
    OVEN_BTU_PER_HOUR,
    OVEN_EFFICIENCY,
    MIXER_WATTAGE,
    BTU_PER_THERM,
    WATTS_PER_KW,
    GAS,
    ELECTRIC,
    INDUCTION,
    STOVE_TYPES,
    DEFAULT_POWER_LEVEL,
    DEFAULT_SETTINGS,
    DEFAULT_PACKAGING_OPTIONS,
)

from .validation import (
    VALID_SETTINGS_KEYS,
    TEXT_SETTINGS_KEYS,
    VALID_STOVE_TYPES,
    EFFICIENCY_KEYS,
    MAX_LENGTHS,
    EXPORT_VERSION,
)

from .defaults import DEFAULT_INGREDIENTS, DEFAULT_RECIPES
