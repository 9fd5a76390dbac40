"""
Catalog Service

Saves, loads and deletes recipes in the catalog, and manages the reusable
ingredient database. Recipes are keyed by name: saving under an existing
name overwrites that entry. The cost snapshot stored with a recipe is
computed here, at save time.
"""

from datetime import datetime, timezone

from sqlalchemy import func

from constants import DEFAULT_POWER_LEVEL, MAX_LENGTHS
from models import db, Ingredient, Recipe, RecipeIngredient, StovetopProcess as StovetopProcessRow
from utils.logging import get_logger
from utils.sanitizer import sanitize_recipe_name, sanitize_text, sanitize_unit
from .cost import calculate_recipe_cost
from .errors import ValidationError
from .parsing import safe_float
from .records import IngredientLine, RecipeInput, StovetopProcess

logger = get_logger(__name__)

# Ingredient database fields that may be edited, with their payload spellings
_INGREDIENT_FIELDS = {
    'name': 'name',
    'packageSize': 'package_size',
    'package_size': 'package_size',
    'packageUnit': 'package_unit',
    'package_unit': 'package_unit',
    'packagePrice': 'package_price',
    'package_price': 'package_price',
}


# ============================================
# RECIPES
# ============================================

def recipe_to_record(recipe):
    """Build the engine input for a saved recipe."""
    return RecipeInput(
        name=recipe.name,
        ingredients=[
            IngredientLine(
                name=ri.name,
                quantity=ri.quantity or 0.0,
                usage_unit=ri.unit,
                package_size=ri.package_size or 0.0,
                package_unit=ri.package_unit or ri.unit,
                package_price=ri.package_price or 0.0,
            )
            for ri in recipe.ingredients
        ],
        preheat_time=recipe.preheat_time or 0.0,
        bake_time=recipe.bake_time or 0.0,
        bake_temp=recipe.bake_temp or 0.0,
        mixer_time=recipe.mixer_time or 0.0,
        labor_time=recipe.labor_time or 0.0,
        labor_rate=recipe.labor_rate or 0.0,
        packaging_cost=recipe.packaging_cost or 0.0,
        yield_qty=recipe.yield_qty or 0.0,
        yield_unit=recipe.yield_unit or '',
        gas_rate=recipe.gas_rate or 0.0,
        electric_rate=recipe.electric_rate or 0.0,
        stovetop_processes=[
            StovetopProcess(
                name=row.name or '',
                stove_type=row.stove_type,
                power_level=row.power_level if row.power_level is not None else DEFAULT_POWER_LEVEL,
                duration=row.duration or 0.0,
                burner_btu=row.burner_btu,
                burner_wattage=row.burner_wattage,
            )
            for row in recipe.stovetop_processes
        ],
    )


def recipe_to_dict(recipe):
    """Serialize a saved recipe, including its stored cost snapshot."""
    data = {'id': recipe.id}
    data.update(recipe_to_record(recipe).to_dict())
    data.update({
        'totalCost': recipe.total_cost,
        'costPerUnit': recipe.cost_per_unit,
        'costPerUnitWithoutLabor': recipe.cost_per_unit_without_labor,
        'savedAt': recipe.saved_at.isoformat() if recipe.saved_at else None,
    })
    return data


def save_recipe(record, settings):
    """
    Save a recipe to the catalog with a fresh cost snapshot.

    Args:
        record: RecipeInput to store
        settings: CostSettings used to price stovetop processes

    Returns:
        (recipe, created) where created is False when an entry with the same
        name was overwritten

    Raises:
        ValidationError: the recipe name is empty
    """
    name = sanitize_recipe_name(record.name)
    if not name:
        raise ValidationError('Recipe name is required')

    breakdown = calculate_recipe_cost(record, settings)

    recipe = Recipe.query.filter_by(name=name).first()
    created = recipe is None
    if created:
        recipe = Recipe(name=name)
        db.session.add(recipe)

    recipe.preheat_time = record.preheat_time
    recipe.bake_time = record.bake_time
    recipe.bake_temp = record.bake_temp
    recipe.mixer_time = record.mixer_time
    recipe.labor_time = record.labor_time
    recipe.labor_rate = record.labor_rate
    recipe.packaging_cost = record.packaging_cost
    recipe.yield_qty = record.yield_qty
    recipe.yield_unit = record.yield_unit
    recipe.gas_rate = record.gas_rate
    recipe.electric_rate = record.electric_rate

    recipe.ingredients = [
        RecipeIngredient(
            position=position,
            name=line.name,
            quantity=line.quantity,
            unit=line.usage_unit,
            package_size=line.package_size,
            package_unit=line.package_unit,
            package_price=line.package_price,
        )
        for position, line in enumerate(record.ingredients)
    ]
    recipe.stovetop_processes = [
        StovetopProcessRow(
            position=position,
            name=process.name,
            stove_type=process.stove_type,
            burner_btu=process.burner_btu,
            burner_wattage=process.burner_wattage,
            power_level=process.power_level,
            duration=process.duration,
        )
        for position, process in enumerate(record.stovetop_processes)
    ]

    recipe.total_cost = breakdown.grand_total
    recipe.cost_per_unit = breakdown.cost_per_unit
    recipe.cost_per_unit_without_labor = breakdown.cost_per_unit_without_labor
    recipe.saved_at = datetime.now(timezone.utc)

    db.session.commit()
    logger.info("recipe.%s id=%s name=%s total=%s", 'created' if created else 'updated',
                recipe.id, recipe.name, recipe.total_cost)
    return recipe, created


def delete_recipe(recipe):
    recipe_id, name = recipe.id, recipe.name
    db.session.delete(recipe)
    db.session.commit()
    logger.info("recipe.deleted id=%s name=%s", recipe_id, name)


def new_recipe_defaults(settings):
    """Blank recipe pre-filled with the default rates from settings."""
    return RecipeInput(
        name='',
        labor_rate=settings.labor_rate,
        gas_rate=settings.gas_rate,
        electric_rate=settings.electric_rate,
        yield_qty=0.0,
        yield_unit='',
    )


def new_stovetop_process(settings):
    """New stovetop process on the default stove at 70% power."""
    return StovetopProcess(stove_type=settings.stove_type, power_level=DEFAULT_POWER_LEVEL, duration=0.0)


# ============================================
# INGREDIENT DATABASE
# ============================================

def ingredient_to_dict(ingredient):
    return {
        'id': ingredient.id,
        'name': ingredient.name,
        'packageSize': ingredient.package_size,
        'packageUnit': ingredient.package_unit,
        'packagePrice': ingredient.package_price,
    }


def _find_ingredient(name, exclude_id=None):
    query = Ingredient.query.filter(func.lower(Ingredient.name) == name.lower())
    if exclude_id is not None:
        query = query.filter(Ingredient.id != exclude_id)
    return query.first()


def clean_ingredient_fields(data, require_name=False):
    """
    Sanitize an ingredient payload into column values.

    Raises:
        ValidationError: the payload is not an object, or require_name is set
            and no usable name is left after sanitizing
    """
    if not isinstance(data, dict):
        raise ValidationError('Ingredient must be an object')

    fields = {}
    for key, value in data.items():
        column = _INGREDIENT_FIELDS.get(key)
        if column is None:
            continue
        if column == 'name':
            fields[column] = sanitize_text(value, max_length=MAX_LENGTHS['ingredient_name'])
        elif column == 'package_unit':
            fields[column] = sanitize_unit(value, default='g')
        else:
            fields[column] = safe_float(value, min_val=0.0)

    if require_name and not fields.get('name'):
        raise ValidationError('Ingredient name is required')
    return fields


def add_ingredient(data):
    """
    Add an ingredient to the database.

    Raises:
        ValidationError: missing name, or the name is already taken
    """
    fields = clean_ingredient_fields(data, require_name=True)
    name = fields['name']
    if _find_ingredient(name):
        raise ValidationError(f'"{name}" already exists in the ingredient database')

    ingredient = Ingredient(**fields)
    db.session.add(ingredient)
    db.session.commit()
    logger.info("ingredient.created id=%s name=%s", ingredient.id, ingredient.name)
    return ingredient


def update_ingredient(ingredient, data):
    fields = clean_ingredient_fields(data)
    if 'name' in fields:
        if not fields['name']:
            raise ValidationError('Ingredient name is required')
        if _find_ingredient(fields['name'], exclude_id=ingredient.id):
            raise ValidationError(f'An ingredient named "{fields["name"]}" already exists')

    for column, value in fields.items():
        setattr(ingredient, column, value)
    db.session.commit()
    return ingredient


def upsert_ingredient(data):
    """Insert or overwrite an ingredient keyed by name (case-insensitive)."""
    fields = clean_ingredient_fields(data, require_name=True)

    ingredient = _find_ingredient(fields['name'])
    if ingredient is None:
        ingredient = Ingredient()
        db.session.add(ingredient)
    for column, value in fields.items():
        setattr(ingredient, column, value)
    db.session.commit()
    return ingredient


def delete_ingredient(ingredient):
    ingredient_id = ingredient.id
    db.session.delete(ingredient)
    db.session.commit()
    logger.info("ingredient.deleted id=%s", ingredient_id)


def apply_catalog_ingredient(line, ingredient):
    """
    Prefill a recipe line from the ingredient database.

    Copies the name and package fields; the quantity is kept and the usage
    unit is reset to grams.
    """
    return IngredientLine(
        name=ingredient.name,
        quantity=line.quantity,
        usage_unit='g',
        package_size=ingredient.package_size or 0.0,
        package_unit=ingredient.package_unit or 'g',
        package_price=ingredient.package_price or 0.0,
    )
