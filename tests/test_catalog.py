import pytest

from models import Ingredient, Recipe, RecipeIngredient, StovetopProcess as StovetopProcessRow
from services import CostSettings, IngredientLine, RecipeInput, StovetopProcess, ValidationError
from services.catalog import (
    add_ingredient,
    apply_catalog_ingredient,
    delete_ingredient,
    delete_recipe,
    new_recipe_defaults,
    new_stovetop_process,
    recipe_to_dict,
    recipe_to_record,
    save_recipe,
    update_ingredient,
    upsert_ingredient,
)


def bread(name="Country Bread", **overrides):
    fields = dict(
        name=name,
        ingredients=[
            IngredientLine("Flour", 500, "g", 1, "kg", 2.5),
            IngredientLine("Salt", 2, "tsp", 1, "kg", 1.0),
        ],
        preheat_time=30,
        bake_time=30,
        mixer_time=10,
        labor_time=30,
        labor_rate=20,
        packaging_cost=0.2,
        yield_qty=2,
        yield_unit="loaves",
        stovetop_processes=[StovetopProcess("Scald milk", "electric", duration=5)],
    )
    fields.update(overrides)
    return RecipeInput(**fields)


def test_save_recipe_creates_entry_with_snapshot(app, settings):
    recipe, created = save_recipe(bread(), settings)

    assert created is True
    assert recipe.id is not None
    assert recipe.saved_at is not None
    assert recipe.total_cost == pytest.approx(recipe.cost_per_unit * 2)
    assert [ri.name for ri in recipe.ingredients] == ["Flour", "Salt"]
    assert recipe.stovetop_processes[0].stove_type == "electric"


def test_save_recipe_overwrites_by_name(app, settings):
    first, _ = save_recipe(bread(), settings)
    second, created = save_recipe(
        bread(ingredients=[IngredientLine("Rye flour", 400, "g", 1, "kg", 3.0)],
              stovetop_processes=[]),
        settings,
    )

    assert created is False
    assert second.id == first.id
    assert Recipe.query.count() == 1
    assert [ri.name for ri in second.ingredients] == ["Rye flour"]
    assert RecipeIngredient.query.count() == 1
    assert StovetopProcessRow.query.count() == 0


def test_save_recipe_collapses_whitespace_in_name(app, settings):
    save_recipe(bread(name="Rye  Bread"), settings)
    _, created = save_recipe(bread(name=" Rye Bread "), settings)
    assert created is False


def test_save_recipe_requires_name(app, settings):
    with pytest.raises(ValidationError):
        save_recipe(bread(name="   "), settings)
    assert Recipe.query.count() == 0


def test_snapshot_uses_settings_at_save_time(app):
    hot_gas = CostSettings(gas_burner_btu=24000)
    cool_gas = CostSettings(gas_burner_btu=6000)
    record = bread(stovetop_processes=[StovetopProcess("Boil", "gas", power_level=100, duration=60)])

    recipe, _ = save_recipe(record, hot_gas)
    hot_total = recipe.total_cost
    recipe, _ = save_recipe(record, cool_gas)
    assert recipe.total_cost < hot_total


def test_recipe_record_round_trip(app, settings):
    recipe, _ = save_recipe(bread(), settings)
    record = recipe_to_record(recipe)
    assert record == bread()


def test_recipe_to_dict_includes_snapshot(app, settings):
    recipe, _ = save_recipe(bread(), settings)
    data = recipe_to_dict(recipe)
    assert data["id"] == recipe.id
    assert data["recipeName"] == "Country Bread"
    assert data["totalCost"] == recipe.total_cost
    assert data["costPerUnitWithoutLabor"] == recipe.cost_per_unit_without_labor
    assert data["savedAt"]


def test_delete_recipe_removes_children(app, settings):
    recipe, _ = save_recipe(bread(), settings)
    delete_recipe(recipe)
    assert Recipe.query.count() == 0
    assert RecipeIngredient.query.count() == 0
    assert StovetopProcessRow.query.count() == 0


def test_new_recipe_defaults_take_rates_from_settings():
    settings = CostSettings(labor_rate=25, gas_rate=1.8, electric_rate=0.3, stove_type="induction")
    record = new_recipe_defaults(settings)
    assert (record.labor_rate, record.gas_rate, record.electric_rate) == (25, 1.8, 0.3)
    assert record.ingredients == []
    assert record.yield_qty == 0.0

    process = new_stovetop_process(settings)
    assert process.stove_type == "induction"
    assert process.power_level == 70


def test_add_ingredient_rejects_duplicates_ignoring_case(app):
    add_ingredient({"name": "Flour", "packageSize": 1, "packageUnit": "kg", "packagePrice": 2.5})
    with pytest.raises(ValidationError):
        add_ingredient({"name": "flour"})
    assert Ingredient.query.count() == 1


def test_add_ingredient_requires_name(app):
    with pytest.raises(ValidationError):
        add_ingredient({"packageSize": 1})


def test_update_ingredient(app):
    flour = add_ingredient({"name": "Flour", "packageSize": 1, "packageUnit": "kg", "packagePrice": 2.5})
    add_ingredient({"name": "Sugar"})

    update_ingredient(flour, {"packagePrice": "3.1", "packageUnit": "lb"})
    assert flour.package_price == 3.1
    assert flour.package_unit == "lb"

    with pytest.raises(ValidationError):
        update_ingredient(flour, {"name": "SUGAR"})
    with pytest.raises(ValidationError):
        update_ingredient(flour, {"name": ""})


def test_upsert_ingredient_overwrites_by_name(app):
    add_ingredient({"name": "Milk", "packageSize": 1, "packageUnit": "L", "packagePrice": 1.5})
    milk = upsert_ingredient({"name": "milk", "packagePrice": 1.75})
    assert Ingredient.query.count() == 1
    assert milk.package_price == 1.75
    assert milk.package_size == 1


def test_delete_ingredient(app):
    butter = add_ingredient({"name": "Butter"})
    delete_ingredient(butter)
    assert Ingredient.query.count() == 0


def test_apply_catalog_ingredient_keeps_quantity(app):
    butter = add_ingredient({"name": "Butter", "packageSize": 1, "packageUnit": "kg", "packagePrice": 8})
    line = apply_catalog_ingredient(IngredientLine("butter?", 3, "tbsp"), butter)
    assert line == IngredientLine("Butter", 3, "g", 1, "kg", 8)


def test_ingredient_names_with_wildcard_characters_match_exactly(app):
    add_ingredient({"name": "Dark chocolate 70%", "packagePrice": 18})
    upsert_ingredient({"name": "Dark chocolate 7%", "packagePrice": 5})
    assert sorted(ing.name for ing in Ingredient.query.all()) == [
        "Dark chocolate 7%",
        "Dark chocolate 70%",
    ]
    assert Ingredient.query.filter_by(name="Dark chocolate 70%").one().package_price == 18

    add_ingredient({"name": "Flour T55"})
    add_ingredient({"name": "Flour_T55"})
    assert Ingredient.query.count() == 4


def test_ingredient_payload_must_be_an_object(app):
    with pytest.raises(ValidationError):
        add_ingredient(["Flour"])
    with pytest.raises(ValidationError):
        upsert_ingredient("Flour")
