"""
Recipe and Settings Records

Plain in-memory inputs for the cost engine. The engine never touches the
database; callers build these from ORM rows or from JSON payloads.

Payload keys are camelCase (the export file format); snake_case keys are
accepted too. Malformed numbers fall back to their defaults.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from constants import (
    DEFAULT_PACKAGING_OPTIONS,
    DEFAULT_POWER_LEVEL,
    DEFAULT_SETTINGS,
    GAS,
    INDUCTION,
    MAX_LENGTHS,
)
from utils.sanitizer import sanitize_text, sanitize_unit
from .errors import ValidationError
from .parsing import parse_fraction, safe_float


def _pick(data, camel, snake, default=None):
    """Read a field by its camelCase or snake_case key."""
    if camel in data:
        return data[camel]
    return data.get(snake, default)


def _objects(data, camel, snake, label):
    """Read a list of objects, rejecting anything that is not one."""
    items = _pick(data, camel, snake) or []
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise ValidationError(f'{label} must be a list of objects')
    return items


def _camel(name):
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


@dataclass
class IngredientLine:
    name: str = ''
    quantity: float = 0.0
    usage_unit: str = 'g'
    package_size: float = 0.0
    package_unit: str = 'g'
    package_price: float = 0.0

    @classmethod
    def from_dict(cls, data):
        usage_unit = sanitize_unit(_pick(data, 'unit', 'usage_unit', 'g'), default='g')
        return cls(
            name=sanitize_text(data.get('name', ''), max_length=MAX_LENGTHS['ingredient_name']),
            quantity=parse_fraction(data.get('quantity'), default=0.0),
            usage_unit=usage_unit,
            package_size=safe_float(_pick(data, 'packageSize', 'package_size'), min_val=0.0),
            # Lines saved before package units existed reuse the usage unit
            package_unit=sanitize_unit(_pick(data, 'packageUnit', 'package_unit'), default=usage_unit),
            package_price=safe_float(_pick(data, 'packagePrice', 'package_price'), min_val=0.0),
        )

    def to_dict(self):
        return {
            'name': self.name,
            'quantity': self.quantity,
            'unit': self.usage_unit,
            'packageSize': self.package_size,
            'packageUnit': self.package_unit,
            'packagePrice': self.package_price,
        }


@dataclass
class StovetopProcess:
    name: str = ''
    stove_type: str = GAS
    power_level: float = DEFAULT_POWER_LEVEL
    duration: float = 0.0
    burner_btu: Optional[float] = None
    burner_wattage: Optional[float] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=sanitize_text(data.get('name', ''), max_length=MAX_LENGTHS['process_name']),
            stove_type=str(_pick(data, 'stoveType', 'stove_type', GAS) or GAS).strip().lower(),
            power_level=safe_float(_pick(data, 'powerLevel', 'power_level'),
                                   default=DEFAULT_POWER_LEVEL, min_val=0.0, max_val=100.0),
            duration=safe_float(data.get('duration'), min_val=0.0),
            burner_btu=safe_float(_pick(data, 'burnerBTU', 'burner_btu'), default=None, min_val=0.0),
            burner_wattage=safe_float(_pick(data, 'burnerWattage', 'burner_wattage'), default=None, min_val=0.0),
        )

    def to_dict(self):
        data = {
            'name': self.name,
            'stoveType': self.stove_type,
            'powerLevel': self.power_level,
            'duration': self.duration,
        }
        if self.burner_btu is not None:
            data['burnerBTU'] = self.burner_btu
        if self.burner_wattage is not None:
            data['burnerWattage'] = self.burner_wattage
        return data


@dataclass
class RecipeInput:
    """Everything the cost engine needs to price one batch."""
    name: str = ''
    ingredients: List[IngredientLine] = field(default_factory=list)
    preheat_time: float = 0.0
    bake_time: float = 0.0
    bake_temp: float = 0.0
    mixer_time: float = 0.0
    labor_time: float = 0.0
    labor_rate: float = DEFAULT_SETTINGS['labor_rate']
    packaging_cost: float = 0.0
    yield_qty: float = 1.0
    yield_unit: str = 'unit'
    gas_rate: float = DEFAULT_SETTINGS['gas_rate']
    electric_rate: float = DEFAULT_SETTINGS['electric_rate']
    stovetop_processes: List[StovetopProcess] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        def number(camel, snake, default=0.0):
            return safe_float(_pick(data, camel, snake), default=default, min_val=0.0)

        return cls(
            name=sanitize_text(_pick(data, 'recipeName', 'name', ''), max_length=MAX_LENGTHS['recipe_name']),
            ingredients=[
                IngredientLine.from_dict(item)
                for item in _objects(data, 'ingredients', 'ingredients', 'Ingredients')
            ],
            preheat_time=number('preheatTime', 'preheat_time'),
            bake_time=number('bakeTime', 'bake_time'),
            bake_temp=number('bakeTemp', 'bake_temp'),
            mixer_time=number('mixerTime', 'mixer_time'),
            labor_time=number('laborTime', 'labor_time'),
            labor_rate=number('laborRate', 'labor_rate', DEFAULT_SETTINGS['labor_rate']),
            packaging_cost=number('packagingCost', 'packaging_cost'),
            yield_qty=number('yieldQty', 'yield_qty', 1.0),
            yield_unit=sanitize_text(_pick(data, 'yieldUnit', 'yield_unit', 'unit'),
                                     max_length=MAX_LENGTHS['yield_unit']),
            gas_rate=number('gasRate', 'gas_rate', DEFAULT_SETTINGS['gas_rate']),
            electric_rate=number('electricRate', 'electric_rate', DEFAULT_SETTINGS['electric_rate']),
            stovetop_processes=[
                StovetopProcess.from_dict(item)
                for item in _objects(data, 'stovetopProcesses', 'stovetop_processes', 'Stovetop processes')
            ],
        )

    def to_dict(self):
        return {
            'recipeName': self.name,
            'ingredients': [line.to_dict() for line in self.ingredients],
            'preheatTime': self.preheat_time,
            'bakeTime': self.bake_time,
            'bakeTemp': self.bake_temp,
            'mixerTime': self.mixer_time,
            'laborTime': self.labor_time,
            'laborRate': self.labor_rate,
            'packagingCost': self.packaging_cost,
            'yieldQty': self.yield_qty,
            'yieldUnit': self.yield_unit,
            'gasRate': self.gas_rate,
            'electricRate': self.electric_rate,
            'stovetopProcesses': [process.to_dict() for process in self.stovetop_processes],
        }


@dataclass
class PackagingOption:
    name: str
    cost: float
    id: Optional[int] = None

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'cost': self.cost}


def _default_packaging_options():
    return [PackagingOption(name=name, cost=cost) for name, cost in DEFAULT_PACKAGING_OPTIONS]


@dataclass
class CostSettings:
    """Snapshot of the account-wide settings, passed explicitly to the engine."""
    labor_rate: float = DEFAULT_SETTINGS['labor_rate']
    gas_rate: float = DEFAULT_SETTINGS['gas_rate']
    electric_rate: float = DEFAULT_SETTINGS['electric_rate']
    stove_type: str = DEFAULT_SETTINGS['stove_type']
    gas_burner_btu: float = DEFAULT_SETTINGS['gas_burner_btu']
    electric_burner_wattage: float = DEFAULT_SETTINGS['electric_burner_wattage']
    induction_burner_wattage: float = DEFAULT_SETTINGS['induction_burner_wattage']
    gas_burner_efficiency: float = DEFAULT_SETTINGS['gas_burner_efficiency']
    electric_burner_efficiency: float = DEFAULT_SETTINGS['electric_burner_efficiency']
    induction_burner_efficiency: float = DEFAULT_SETTINGS['induction_burner_efficiency']
    packaging_options: List[PackagingOption] = field(default_factory=_default_packaging_options)

    @classmethod
    def from_dict(cls, data):
        values = {}
        for key, default in DEFAULT_SETTINGS.items():
            raw = _pick(data, _camel(key), key)
            if key == 'stove_type':
                values[key] = str(raw or default).strip().lower()
            elif key == 'gas_burner_btu':
                values[key] = safe_float(_pick(data, 'gasBurnerBTU', key), default=default, min_val=0.0)
            else:
                values[key] = safe_float(raw, default=default, min_val=0.0)

        if _pick(data, 'packagingOptions', 'packaging_options') is None:
            values['packaging_options'] = _default_packaging_options()
        else:
            values['packaging_options'] = [
                PackagingOption(
                    name=sanitize_text(option.get('name', ''), max_length=MAX_LENGTHS['packaging_name']),
                    cost=safe_float(option.get('cost'), min_val=0.0),
                )
                for option in _objects(data, 'packagingOptions', 'packaging_options', 'Packaging options')
            ]
        return cls(**values)

    def to_dict(self):
        data = {_camel(key): getattr(self, key) for key in DEFAULT_SETTINGS}
        data['gasBurnerBTU'] = data.pop('gasBurnerBtu')
        data['packagingOptions'] = [option.to_dict() for option in self.packaging_options]
        return data

    def burner_wattage(self, stove_type):
        if stove_type == INDUCTION:
            return self.induction_burner_wattage
        return self.electric_burner_wattage

    def burner_efficiency(self, stove_type):
        if stove_type == INDUCTION:
            return self.induction_burner_efficiency
        return self.electric_burner_efficiency
