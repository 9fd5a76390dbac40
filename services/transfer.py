"""
Data Transfer Service

Exports the whole catalog (recipes, ingredient database, settings) to a
JSON-ready dict and imports such a file back.
"""

from datetime import datetime, timezone

from constants import EXPORT_VERSION
from models import Ingredient, Recipe
from utils.logging import get_logger
from utils.sanitizer import sanitize_recipe_name
from .catalog import (
    clean_ingredient_fields,
    ingredient_to_dict,
    recipe_to_dict,
    save_recipe,
    upsert_ingredient,
)
from .errors import ValidationError
from .records import RecipeInput
from .settings import get_settings, update_settings

logger = get_logger(__name__)


def export_data():
    """Return every recipe, ingredient and the settings as one document."""
    recipes = Recipe.query.order_by(Recipe.name).all()
    ingredients = Ingredient.query.order_by(Ingredient.name).all()
    return {
        'recipes': [recipe_to_dict(recipe) for recipe in recipes],
        'ingredients': [ingredient_to_dict(ingredient) for ingredient in ingredients],
        'settings': get_settings().to_dict(),
        'exportedAt': datetime.now(timezone.utc).isoformat(),
        'version': EXPORT_VERSION,
    }


def import_data(payload):
    """
    Import an exported document.

    Ids in the file are ignored. Every entry is validated before anything is
    written. Settings are applied first so that imported recipes are priced
    with them; recipes and ingredients then upsert by name. Stored cost
    snapshots are recomputed on save.

    Returns:
        dict with 'recipes' and 'ingredients' counts

    Raises:
        ValidationError: the payload is not an export document, or an entry
            in it is invalid
    """
    if not isinstance(payload, dict) or 'recipes' not in payload or 'ingredients' not in payload:
        raise ValidationError('Invalid file format. Please select a valid export file.')

    recipes = payload['recipes'] or []
    ingredients = payload['ingredients'] or []
    settings_changes = payload.get('settings') or {}
    if not isinstance(recipes, list) or not isinstance(ingredients, list):
        raise ValidationError('Invalid file format. Please select a valid export file.')
    if not isinstance(settings_changes, dict):
        raise ValidationError('Imported settings must be an object')

    records = []
    for data in recipes:
        if not isinstance(data, dict):
            raise ValidationError('Every imported recipe must be an object')
        record = RecipeInput.from_dict(data)
        if not sanitize_recipe_name(record.name):
            raise ValidationError('Every imported recipe needs a name')
        records.append(record)

    ingredient_fields = [clean_ingredient_fields(data, require_name=True) for data in ingredients]

    if settings_changes:
        settings = update_settings(settings_changes)
    else:
        settings = get_settings()

    for record in records:
        save_recipe(record, settings)
    for fields in ingredient_fields:
        upsert_ingredient(fields)

    logger.info("import.completed recipes=%s ingredients=%s", len(records), len(ingredient_fields))
    return {'recipes': len(records), 'ingredients': len(ingredient_fields)}
