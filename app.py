from flask import Flask, jsonify, request, abort
from flask_migrate import Migrate
from sqlalchemy.orm import joinedload

from config import get_config
from constants import DEFAULT_INGREDIENTS, DEFAULT_RECIPES
from models import db, Ingredient, PackagingOption, Recipe
from services import (
    IngredientLine,
    RecipeInput,
    ValidationError,
    calculate_recipe_cost,
    float_to_fraction,
)
from services.catalog import (
    add_ingredient,
    apply_catalog_ingredient,
    delete_ingredient,
    delete_recipe,
    ingredient_to_dict,
    new_recipe_defaults,
    new_stovetop_process,
    recipe_to_dict,
    recipe_to_record,
    save_recipe,
    update_ingredient,
)
from services.settings import (
    add_packaging_option,
    delete_packaging_option,
    get_settings,
    update_packaging_option,
    update_settings,
)
from services.transfer import export_data, import_data
from utils.logging import configure_logging, get_logger

app = Flask(__name__)
app.config.from_object(get_config())
app.json.sort_keys = False

configure_logging(app.config)
logger = get_logger()

db.init_app(app)
migrate = Migrate(app, db)


def json_body():
    """Return the request's JSON object, or abort with 400."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description='Expected a JSON object')
    return data


def load_recipe(id):
    return Recipe.query.options(
        joinedload(Recipe.ingredients),
        joinedload(Recipe.stovetop_processes),
    ).filter_by(id=id).first_or_404()


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(ValidationError)
def handle_validation_error(error):
    return jsonify(error=str(error)), 400


@app.errorhandler(400)
def handle_bad_request(error):
    return jsonify(error=error.description), 400


@app.errorhandler(404)
def handle_not_found(error):
    return jsonify(error='Not found'), 404


# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    recipes = Recipe.query.order_by(Recipe.name).all()
    return jsonify(recipes=[
        {
            'id': recipe.id,
            'recipeName': recipe.name,
            'yield': f"{float_to_fraction(recipe.yield_qty)} {recipe.yield_unit or ''}".strip(),
            'totalCost': recipe.total_cost,
            'costPerUnit': recipe.cost_per_unit,
            'costPerUnitWithoutLabor': recipe.cost_per_unit_without_labor,
        }
        for recipe in recipes
    ])


@app.route('/api/cost', methods=['POST'])
def cost_preview():
    """Price an unsaved recipe with the current settings."""
    record = RecipeInput.from_dict(json_body())
    breakdown = calculate_recipe_cost(record, get_settings())
    return jsonify(breakdown.to_dict())


# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/api/recipes')
def recipes_list():
    recipes = Recipe.query.order_by(Recipe.name).all()
    return jsonify(recipes=[recipe_to_dict(recipe) for recipe in recipes])


@app.route('/api/recipes', methods=['POST'])
def recipe_save():
    record = RecipeInput.from_dict(json_body())
    recipe, created = save_recipe(record, get_settings())
    return jsonify(recipe=recipe_to_dict(recipe), created=created), 201 if created else 200


@app.route('/api/recipes/new')
def recipe_new():
    settings = get_settings()
    return jsonify(
        recipe=new_recipe_defaults(settings).to_dict(),
        stovetopProcess=new_stovetop_process(settings).to_dict(),
        ingredient=IngredientLine().to_dict(),
    )


@app.route('/api/recipes/<int:id>')
def recipe_view(id):
    return jsonify(recipe=recipe_to_dict(load_recipe(id)))


@app.route('/api/recipes/<int:id>/cost')
def recipe_cost(id):
    """Live breakdown for a saved recipe; the stored snapshot is left untouched."""
    recipe = load_recipe(id)
    breakdown = calculate_recipe_cost(recipe_to_record(recipe), get_settings())
    return jsonify(breakdown.to_dict())


@app.route('/api/recipes/<int:id>', methods=['DELETE'])
def recipe_delete(id):
    recipe = Recipe.query.get_or_404(id)
    delete_recipe(recipe)
    return '', 204


# ============================================
# ROUTES - INGREDIENT DATABASE
# ============================================

@app.route('/api/ingredients')
def ingredients_list():
    ingredients = Ingredient.query.order_by(Ingredient.name).all()
    return jsonify(ingredients=[ingredient_to_dict(ing) for ing in ingredients])


@app.route('/api/ingredients', methods=['POST'])
def ingredient_add():
    ingredient = add_ingredient(json_body())
    return jsonify(ingredient=ingredient_to_dict(ingredient)), 201


@app.route('/api/ingredients/<int:id>', methods=['PATCH'])
def ingredient_edit(id):
    ingredient = Ingredient.query.get_or_404(id)
    update_ingredient(ingredient, json_body())
    return jsonify(ingredient=ingredient_to_dict(ingredient))


@app.route('/api/ingredients/<int:id>', methods=['DELETE'])
def ingredient_delete(id):
    ingredient = Ingredient.query.get_or_404(id)
    delete_ingredient(ingredient)
    return '', 204


@app.route('/api/ingredients/<int:id>/apply', methods=['POST'])
def ingredient_apply(id):
    """Prefill a recipe ingredient line from the ingredient database."""
    ingredient = Ingredient.query.get_or_404(id)
    line = IngredientLine.from_dict(json_body())
    return jsonify(ingredient=apply_catalog_ingredient(line, ingredient).to_dict())


# ============================================
# ROUTES - SETTINGS
# ============================================

@app.route('/api/settings')
def settings_view():
    return jsonify(settings=get_settings().to_dict())


@app.route('/api/settings', methods=['PATCH'])
def settings_update():
    settings = update_settings(json_body())
    return jsonify(settings=settings.to_dict())


@app.route('/api/settings/packaging', methods=['POST'])
def packaging_add():
    data = json_body()
    option = add_packaging_option(data.get('name', ''), data.get('cost', 0.0))
    return jsonify(option={'id': option.id, 'name': option.name, 'cost': option.cost}), 201


@app.route('/api/settings/packaging/<int:id>', methods=['PATCH'])
def packaging_edit(id):
    option = PackagingOption.query.get_or_404(id)
    data = json_body()
    update_packaging_option(option, name=data.get('name'), cost=data.get('cost'))
    return jsonify(option={'id': option.id, 'name': option.name, 'cost': option.cost})


@app.route('/api/settings/packaging/<int:id>', methods=['DELETE'])
def packaging_delete(id):
    option = PackagingOption.query.get_or_404(id)
    delete_packaging_option(option)
    return '', 204


# ============================================
# ROUTES - EXPORT / IMPORT
# ============================================

@app.route('/api/export')
def data_export():
    response = jsonify(export_data())
    response.headers['Content-Disposition'] = 'attachment; filename=batch-cost-export.json'
    return response


@app.route('/api/import', methods=['POST'])
def data_import():
    counts = import_data(json_body())
    return jsonify(imported=counts)


# ============================================
# INITIALIZE DATABASE
# ============================================

def seed_defaults():
    """Fill an empty database with the default ingredient database and example recipe."""
    settings = get_settings()

    if Ingredient.query.count() == 0:
        for name, package_size, package_unit, package_price in DEFAULT_INGREDIENTS:
            db.session.add(Ingredient(name=name, package_size=package_size,
                                      package_unit=package_unit, package_price=package_price))
        db.session.commit()
        logger.info("seed.ingredients count=%s", len(DEFAULT_INGREDIENTS))

    if Recipe.query.count() == 0:
        for data in DEFAULT_RECIPES:
            save_recipe(RecipeInput.from_dict(data), settings)
        logger.info("seed.recipes count=%s", len(DEFAULT_RECIPES))


def init_db():
    with app.app_context():
        # Enable SQLite foreign key enforcement
        from sqlalchemy import event
        from sqlalchemy.engine import Engine
        import sqlite3

        @event.listens_for(Engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            if isinstance(dbapi_connection, sqlite3.Connection):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        db.create_all()

        if app.config['SEED_DEFAULTS']:
            seed_defaults()
        else:
            get_settings()


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
