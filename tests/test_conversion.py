import logging

import pytest

from services.conversion import (
    Converted,
    Unresolved,
    convert,
    convert_units,
    guess_ingredient_density,
    unit_category,
)


@pytest.mark.parametrize("unit", ["g", "kg", "cup", "tbsp", "fl oz", "xyz", ""])
@pytest.mark.parametrize("quantity", [0, 1, 2.5, 1000])
def test_same_unit_is_identity(unit, quantity):
    assert convert(quantity, unit, unit, "anything") == quantity


def test_same_unit_ignores_case_and_whitespace():
    result = convert_units(3, " CUP ", "cup", "")
    assert result == Converted(3)


def test_weight_to_weight():
    assert convert(1, "kg", "g") == pytest.approx(1000)
    assert convert(1, "lb", "oz") == pytest.approx(453.592 / 28.3495)
    assert convert(2, "ct", "g") == pytest.approx(110)


@pytest.mark.parametrize("a, b", [("g", "lb"), ("oz", "kg"), ("pounds", "grams")])
def test_weight_round_trip(a, b):
    once = convert(7.25, a, b, "flour")
    assert convert(once, b, a, "flour") == pytest.approx(7.25)


def test_volume_to_volume():
    assert convert(1, "tbsp", "tsp") == pytest.approx(3.0, rel=1e-4)
    assert convert(1, "gallon", "quarts") == pytest.approx(4.0, rel=1e-4)
    assert convert(1, "L", "ml") == pytest.approx(1000)


def test_cup_of_water_in_grams():
    assert convert(1, "cup", "g", "water") == pytest.approx(236.588)


def test_cross_category_round_trip_with_known_density():
    grams = convert(2, "cup", "g", "water")
    assert convert(grams, "g", "cup", "water") == pytest.approx(2)


def test_volume_to_weight_uses_density():
    assert convert(1, "cup", "g", "All-Purpose Flour") == pytest.approx(236.588 * 0.528)
    assert convert(2, "tsp", "kg", "Salt") == pytest.approx(2 * 4.92892 * 1.217 / 1000)


def test_weight_to_volume_divides_by_density():
    assert convert(142, "g", "ml", "Honey") == pytest.approx(100)


def test_unknown_unit_is_a_no_op():
    assert convert(5, "xyz", "g", "flour") == 5
    result = convert_units(5, "xyz", "g", "flour")
    assert isinstance(result, Unresolved)
    assert result.value == 5
    assert "xyz" in result.reason


def test_missing_density_is_a_no_op():
    result = convert_units(3, "cup", "g", "mystery powder")
    assert isinstance(result, Unresolved)
    assert result.value == 3
    assert "density" in result.reason


def test_unresolved_conversion_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="services.conversion"):
        assert convert(4, "pinch", "g", "saffron") == 4
    assert "pinch" in caplog.text


def test_non_numeric_quantity_becomes_zero():
    assert convert("lots", "g", "kg") == 0
    assert convert(float("nan"), "g", "kg") == 0


def test_unit_category():
    assert unit_category("Grams") == "weight"
    assert unit_category(" cups") == "volume"
    assert unit_category("eggs") is None


def test_density_longest_match_wins():
    assert guess_ingredient_density("Sour Cream") == 1.02
    assert guess_ingredient_density("extra virgin olive oil") == 0.92
    assert guess_ingredient_density("Brown Sugar") == 0.845
    assert guess_ingredient_density("Powdered sugar") == 0.56
    assert guess_ingredient_density("Cream Cheese") == 1.04


def test_density_multiple_matches_is_deterministic():
    # "chocolate" is the only key contained in this name; "chips" is not
    assert guess_ingredient_density("chocolate chip cookies") == 0.68
    # "buttermilk" outranks both "butter" and "milk"
    assert guess_ingredient_density("Buttermilk") == 1.03


def test_density_unknown_or_empty_name():
    assert guess_ingredient_density("gravel") is None
    assert guess_ingredient_density("") is None
    assert guess_ingredient_density(None) is None
