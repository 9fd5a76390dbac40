import pytest

from models import PackagingOption as PackagingOptionRow, Settings
from services import ValidationError
from services.settings import (
    add_packaging_option,
    delete_packaging_option,
    get_settings,
    update_packaging_option,
    update_settings,
)


def test_first_use_creates_defaults(app):
    settings = get_settings()

    assert settings.labor_rate == 20.0
    assert settings.stove_type == "gas"
    assert settings.gas_burner_btu == 12000.0
    assert settings.induction_burner_efficiency == 0.85
    assert [(o.name, o.cost) for o in settings.packaging_options] == [
        ("Cake board and box", 2.0),
        ("Bread bag", 0.2),
    ]
    assert all(o.id is not None for o in settings.packaging_options)


def test_defaults_are_seeded_once(app):
    get_settings()
    delete_packaging_option(PackagingOptionRow.query.first())
    get_settings()
    assert PackagingOptionRow.query.count() == 1


def test_update_settings_accepts_both_spellings(app):
    settings = update_settings({"laborRate": 22.5, "gas_rate": "1.9", "stoveType": "Induction",
                                "gasBurnerBTU": 15000})
    assert settings.labor_rate == 22.5
    assert settings.gas_rate == 1.9
    assert settings.stove_type == "induction"
    assert settings.gas_burner_btu == 15000
    assert get_settings().labor_rate == 22.5


@pytest.mark.parametrize(
    "changes",
    [
        {"coffeeRate": 3},
        {"stoveType": "campfire"},
        {"laborRate": "lots"},
        {"gasRate": -1},
        {"gasBurnerEfficiency": 0},
        {"electricBurnerEfficiency": 1.2},
    ],
)
def test_update_settings_rejects_bad_values(app, changes):
    with pytest.raises(ValidationError):
        update_settings(dict(changes, laborRate=changes.get("laborRate", 99)))
    assert get_settings().labor_rate == 20.0


def test_efficiency_of_one_is_allowed(app):
    assert update_settings({"inductionBurnerEfficiency": 1}).induction_burner_efficiency == 1.0


def test_packaging_options_list_replaces_all(app):
    settings = update_settings({"packagingOptions": [{"name": "Pie box", "cost": 1.1}]})
    assert [(o.name, o.cost) for o in settings.packaging_options] == [("Pie box", 1.1)]
    assert Settings.query.count() == 10


def test_packaging_option_crud(app):
    get_settings()
    option = add_packaging_option("Cookie tin", "4.5")
    assert option.cost == 4.5

    update_packaging_option(option, name="Large cookie tin", cost=5)
    assert PackagingOptionRow.query.get(option.id).name == "Large cookie tin"

    with pytest.raises(ValidationError):
        update_packaging_option(option, cost=-2)

    delete_packaging_option(option)
    assert [o.name for o in get_settings().packaging_options] == ["Cake board and box", "Bread bag"]


@pytest.mark.parametrize(
    "options",
    ["Pie box", ["Pie box"], [{"name": "Pie box", "cost": -1}], [{"name": "Pie box", "cost": "free"}]],
)
def test_packaging_options_are_validated_before_writing(app, options):
    with pytest.raises(ValidationError):
        update_settings({"laborRate": 30, "packagingOptions": options})
    settings = get_settings()
    assert settings.labor_rate == 20.0
    assert len(settings.packaging_options) == 2


def test_update_settings_needs_an_object(app):
    with pytest.raises(ValidationError):
        update_settings([("laborRate", 30)])
