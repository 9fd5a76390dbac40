"""
Services Package

Business logic modules for the batch cost calculator.
"""

from .parsing import (
    float_to_fraction,
    normalize_fractions,
    parse_fraction,
    safe_float,
)

from .records import (
    CostSettings,
    IngredientLine,
    PackagingOption,
    RecipeInput,
    StovetopProcess,
)

from .conversion import (
    Converted,
    Unresolved,
    convert,
    convert_units,
    guess_ingredient_density,
    normalize_unit,
    unit_category,
)

from .cost import (
    CostBreakdown,
    EnergyCost,
    IngredientCost,
    calculate_ingredient_cost,
    calculate_labor_cost,
    calculate_mixer_cost,
    calculate_oven_cost,
    calculate_packaging_cost,
    calculate_recipe_cost,
    calculate_stovetop_cost,
)

from .errors import ValidationError

__all__ = [
    # Parsing
    'float_to_fraction',
    'normalize_fractions',
    'parse_fraction',
    'safe_float',
    # Records
    'CostSettings',
    'IngredientLine',
    'PackagingOption',
    'RecipeInput',
    'StovetopProcess',
    # Conversion
    'Converted',
    'Unresolved',
    'convert',
    'convert_units',
    'guess_ingredient_density',
    'normalize_unit',
    'unit_category',
    # Cost
    'CostBreakdown',
    'EnergyCost',
    'IngredientCost',
    'calculate_ingredient_cost',
    'calculate_labor_cost',
    'calculate_mixer_cost',
    'calculate_oven_cost',
    'calculate_packaging_cost',
    'calculate_recipe_cost',
    'calculate_stovetop_cost',
    # Errors
    'ValidationError',
]
