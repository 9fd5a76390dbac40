"""
Cost Calculation Service

Prices one batch of a recipe: ingredients (converted into their package
units), oven, mixer and stovetop energy, labor and packaging.

Every guard degrades to zero instead of raising. Nothing is rounded here;
rounding is left to whoever displays the numbers.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from constants import (
    BTU_PER_THERM,
    DEFAULT_POWER_LEVEL,
    GAS,
    MIXER_WATTAGE,
    OVEN_BTU_PER_HOUR,
    OVEN_EFFICIENCY,
    WATTS_PER_KW,
)
from utils.logging import get_logger
from .conversion import convert_units
from .parsing import safe_float

logger = get_logger(__name__)

THERMS = 'therms'
KWH = 'kWh'


@dataclass
class IngredientCost:
    name: str
    quantity: float
    unit: str
    converted_quantity: float
    package_unit: str
    unit_price: float
    cost: float
    warning: Optional[str] = None

    def to_dict(self):
        return {
            'name': self.name,
            'quantity': self.quantity,
            'unit': self.unit,
            'convertedQuantity': self.converted_quantity,
            'packageUnit': self.package_unit,
            'unitPrice': self.unit_price,
            'cost': self.cost,
            'warning': self.warning,
        }


@dataclass
class EnergyCost:
    label: str
    kind: str               # 'oven', 'mixer' or the stove type
    consumed_units: float   # therms for gas, kWh for electric
    unit_label: str
    cost: float
    warning: Optional[str] = None

    def to_dict(self):
        return {
            'label': self.label,
            'kind': self.kind,
            'consumedUnits': self.consumed_units,
            'unitLabel': self.unit_label,
            'cost': self.cost,
            'warning': self.warning,
        }


@dataclass
class CostBreakdown:
    """Complete cost breakdown for one batch."""
    ingredients: List[IngredientCost] = field(default_factory=list)
    energy: List[EnergyCost] = field(default_factory=list)
    ingredient_total: float = 0.0
    stovetop_total: float = 0.0
    energy_total: float = 0.0
    labor_cost: float = 0.0
    packaging_total: float = 0.0
    grand_total: float = 0.0
    grand_total_without_labor: float = 0.0
    cost_per_unit: float = 0.0
    cost_per_unit_without_labor: float = 0.0
    warnings: List[str] = field(default_factory=list)

    def to_dict(self):
        return {
            'ingredients': [row.to_dict() for row in self.ingredients],
            'energy': [row.to_dict() for row in self.energy],
            'ingredientTotal': self.ingredient_total,
            'stovetopTotal': self.stovetop_total,
            'energyTotal': self.energy_total,
            'laborCost': self.labor_cost,
            'packagingTotal': self.packaging_total,
            'grandTotal': self.grand_total,
            'grandTotalWithoutLabor': self.grand_total_without_labor,
            'costPerUnit': self.cost_per_unit,
            'costPerUnitWithoutLabor': self.cost_per_unit_without_labor,
            'warnings': list(self.warnings),
        }


def calculate_ingredient_cost(line):
    """
    Cost one ingredient line.

    The used quantity is converted into the package unit, then priced at
    package_price / package_size. A missing or zero package size prices the
    line at zero.
    """
    result = convert_units(line.quantity, line.usage_unit, line.package_unit, line.name)
    package_size = safe_float(line.package_size)
    package_price = safe_float(line.package_price)
    unit_price = package_price / package_size if package_size > 0 else 0.0
    warning = None if result.resolved else result.reason
    if warning:
        logger.warning(warning)
    return IngredientCost(
        name=line.name,
        quantity=line.quantity,
        unit=line.usage_unit,
        converted_quantity=result.value,
        package_unit=line.package_unit,
        unit_price=unit_price,
        cost=result.value * unit_price,
        warning=warning,
    )


def calculate_oven_cost(preheat_time, bake_time, gas_rate):
    """Gas used by a generic 25,000 BTU/hr oven at 65% efficiency."""
    hours = (safe_float(preheat_time) + safe_float(bake_time)) / 60
    therms = OVEN_BTU_PER_HOUR * hours / BTU_PER_THERM / OVEN_EFFICIENCY
    return EnergyCost(label='Oven', kind='oven', consumed_units=therms,
                      unit_label=THERMS, cost=therms * safe_float(gas_rate))


def calculate_mixer_cost(mixer_time, electric_rate):
    """Electricity used by a 300 W stand mixer."""
    kwh = MIXER_WATTAGE * (safe_float(mixer_time) / 60) / WATTS_PER_KW
    return EnergyCost(label='Mixer', kind='mixer', consumed_units=kwh,
                      unit_label=KWH, cost=kwh * safe_float(electric_rate))


def calculate_stovetop_cost(process, settings, gas_rate, electric_rate):
    """
    Cost one stovetop process.

    Gas burners are rated in BTU/hr and billed in therms; electric and
    induction burners are rated in watts and billed in kWh. The burner rating
    comes from the process when given, else from settings for its stove type.
    Any stove type other than gas or induction is treated as electric.
    """
    stove_type = str(process.stove_type or GAS).strip().lower()
    hours = safe_float(process.duration) / 60
    power_fraction = safe_float(process.power_level, default=DEFAULT_POWER_LEVEL) / 100
    label = process.name or f'{stove_type.capitalize()} burner'

    if stove_type == GAS:
        rating = safe_float(process.burner_btu, default=None)
        if rating is None:
            rating = safe_float(settings.gas_burner_btu)
        efficiency = safe_float(settings.gas_burner_efficiency)
        unit_label, rate = THERMS, safe_float(gas_rate)
        delivered = rating * power_fraction * hours / BTU_PER_THERM
    else:
        rating = safe_float(process.burner_wattage, default=None)
        if rating is None:
            rating = safe_float(settings.burner_wattage(stove_type))
        efficiency = safe_float(settings.burner_efficiency(stove_type))
        unit_label, rate = KWH, safe_float(electric_rate)
        delivered = rating * power_fraction * hours / WATTS_PER_KW

    if efficiency <= 0:
        warning = f'{label}: {stove_type} burner efficiency must be above zero'
        logger.warning(warning)
        return EnergyCost(label=label, kind=stove_type, consumed_units=0.0,
                          unit_label=unit_label, cost=0.0, warning=warning)

    consumed = delivered / efficiency
    return EnergyCost(label=label, kind=stove_type, consumed_units=consumed,
                      unit_label=unit_label, cost=consumed * rate)


def calculate_labor_cost(labor_time, labor_rate):
    return (safe_float(labor_time) / 60) * safe_float(labor_rate)


def calculate_packaging_cost(packaging_cost, yield_qty):
    """Packaging is a flat allowance per yield unit."""
    return safe_float(packaging_cost) * safe_float(yield_qty)


def calculate_recipe_cost(recipe, settings):
    """
    Price one batch of a recipe.

    Malformed or missing numbers count as zero.

    Args:
        recipe: RecipeInput with ingredient lines, times and rates
        settings: CostSettings snapshot supplying burner defaults

    Returns:
        CostBreakdown with per-ingredient and per-energy-source rows and totals
    """
    breakdown = CostBreakdown()

    for line in recipe.ingredients:
        row = calculate_ingredient_cost(line)
        breakdown.ingredients.append(row)
        if row.warning:
            breakdown.warnings.append(row.warning)
    breakdown.ingredient_total = sum(row.cost for row in breakdown.ingredients)

    oven = calculate_oven_cost(recipe.preheat_time, recipe.bake_time, recipe.gas_rate)
    mixer = calculate_mixer_cost(recipe.mixer_time, recipe.electric_rate)
    stovetop = [
        calculate_stovetop_cost(process, settings, recipe.gas_rate, recipe.electric_rate)
        for process in recipe.stovetop_processes
    ]
    breakdown.energy = [oven, mixer] + stovetop
    breakdown.warnings.extend(row.warning for row in stovetop if row.warning)
    breakdown.stovetop_total = sum(row.cost for row in stovetop)
    breakdown.energy_total = oven.cost + mixer.cost + breakdown.stovetop_total

    yield_qty = safe_float(recipe.yield_qty)
    breakdown.labor_cost = calculate_labor_cost(recipe.labor_time, recipe.labor_rate)
    breakdown.packaging_total = calculate_packaging_cost(recipe.packaging_cost, yield_qty)

    breakdown.grand_total = (breakdown.ingredient_total + breakdown.energy_total
                             + breakdown.labor_cost + breakdown.packaging_total)
    breakdown.grand_total_without_labor = breakdown.grand_total - breakdown.labor_cost

    if yield_qty > 0:
        breakdown.cost_per_unit = breakdown.grand_total / yield_qty
        breakdown.cost_per_unit_without_labor = breakdown.grand_total_without_labor / yield_qty

    return breakdown
