import pytest

from constants import DEFAULT_RECIPES
from models import Ingredient, PackagingOption as PackagingOptionRow, Recipe
from services import RecipeInput, ValidationError
from services.catalog import add_ingredient, delete_recipe, save_recipe
from services.settings import get_settings
from services.transfer import export_data, import_data


@pytest.fixture(name="catalog")
def catalog_fixture(app):
    settings = get_settings()
    save_recipe(RecipeInput.from_dict(DEFAULT_RECIPES[0]), settings)
    add_ingredient({"name": "Flour", "packageSize": 1, "packageUnit": "kg", "packagePrice": 2.5})
    add_ingredient({"name": "Butter", "packageSize": 1, "packageUnit": "kg", "packagePrice": 8})
    return settings


def test_export_document(catalog):
    data = export_data()

    assert data["version"] == "1.0"
    assert data["exportedAt"]
    assert [r["recipeName"] for r in data["recipes"]] == ["French-Style Country Bread"]
    assert data["recipes"][0]["totalCost"] == pytest.approx(13.5033, abs=1e-3)
    assert [i["name"] for i in data["ingredients"]] == ["Butter", "Flour"]
    assert data["settings"]["laborRate"] == 20.0


def test_import_restores_exported_catalog(catalog):
    data = export_data()
    for recipe in Recipe.query.all():
        delete_recipe(recipe)
    Ingredient.query.delete()

    counts = import_data(data)

    assert counts == {"recipes": 1, "ingredients": 2}
    recipe = Recipe.query.one()
    assert recipe.name == "French-Style Country Bread"
    assert len(recipe.ingredients) == 7
    assert recipe.total_cost == pytest.approx(13.5033, abs=1e-3)
    assert Ingredient.query.count() == 2


def test_import_upserts_by_name(catalog):
    data = export_data()
    data["recipes"][0]["laborTime"] = 60
    data["ingredients"][0]["packagePrice"] = 9.5

    import_data(data)

    assert Recipe.query.count() == 1
    assert Recipe.query.one().labor_time == 60
    assert Ingredient.query.filter_by(name="Butter").one().package_price == 9.5


def test_import_applies_settings_before_pricing(catalog):
    data = export_data()
    data["settings"]["gasRate"] = 1.0
    data["recipes"][0]["gasRate"] = 1.0
    data["settings"]["packagingOptions"] = [{"id": 99, "name": "Bag", "cost": 0.1}]

    import_data(data)

    settings = get_settings()
    assert settings.gas_rate == 1.0
    assert [(o.name, o.cost) for o in settings.packaging_options] == [("Bag", 0.1)]
    assert PackagingOptionRow.query.filter_by(id=99).first() is None
    # oven cost drops from 1.00 to about 0.385
    assert Recipe.query.one().total_cost == pytest.approx(13.5033 - 1 + 0.3846, abs=1e-3)


@pytest.mark.parametrize("payload", [{}, {"recipes": []}, {"ingredients": []}, []])
def test_import_rejects_non_export_payload(app, payload):
    with pytest.raises(ValidationError):
        import_data(payload)


def test_import_validates_names_before_writing(catalog):
    data = export_data()
    data["settings"]["laborRate"] = 40
    data["recipes"].append({"recipeName": "  ", "ingredients": []})

    with pytest.raises(ValidationError):
        import_data(data)

    assert get_settings().labor_rate == 20.0

    data["recipes"].pop()
    data["ingredients"].append({"packageSize": 1})
    with pytest.raises(ValidationError):
        import_data(data)
    assert Ingredient.query.count() == 2


def test_import_rejects_name_emptied_by_sanitizing(catalog):
    data = export_data()
    data["settings"]["laborRate"] = 99
    data["recipes"].append({"recipeName": "Rye", "ingredients": []})
    data["ingredients"].append({"name": "\x01"})

    with pytest.raises(ValidationError):
        import_data(data)

    assert get_settings().labor_rate == 20.0
    assert Recipe.query.filter_by(name="Rye").first() is None


def _drop_in(key, value):
    def mutate(data):
        data[key].append(value)
    return mutate


def _recipe_lines(data):
    data["recipes"][0]["ingredients"].append("flour")


def _packaging(data):
    data["settings"]["packagingOptions"].append("box")


@pytest.mark.parametrize(
    "mutate",
    [_drop_in("recipes", "Rye"), _drop_in("ingredients", 5), _recipe_lines, _packaging],
)
def test_import_rejects_malformed_entries_before_writing(catalog, mutate):
    data = export_data()
    data["settings"]["laborRate"] = 99
    data["recipes"][0]["laborTime"] = 90
    mutate(data)

    with pytest.raises(ValidationError):
        import_data(data)

    assert get_settings().labor_rate == 20.0
    assert Recipe.query.one().labor_time == 30


def test_import_rejects_settings_that_are_not_an_object(catalog):
    data = export_data()
    data["settings"] = ["laborRate", 99]
    with pytest.raises(ValidationError):
        import_data(data)
