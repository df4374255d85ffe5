import math

import pytest
from kitchen_converter.conversion.convert_density import (
    convert_cross_category,
    validate_density,
)
from kitchen_converter.measurement.exceptions import (
    InvalidDensityError,
    UnitCategoryError,
)
from kitchen_converter.measurement.models import UNDEFINED


class TestConvertCrossCategory:
    @staticmethod
    @pytest.mark.parametrize(
        "value,from_unit,to_unit,density,expected_value",
        [
            (1, "cup", "gram", 0.593, 236.5882365 * 0.593),
            (100, "g", "ml", 1.0, 100.0),
            (1, "liter", "kg", 1.42, 1.42),
            (453.59237, "ml", "lb", 1.0, 1.0),
            (236.5882365 * 0.5, "g", "cup", 0.5, 1.0),
        ],
    )
    def test_convert_cross_category(
        unit_table, value, from_unit, to_unit, density, expected_value
    ):
        assert convert_cross_category(
            value, from_unit, to_unit, density, unit_table
        ) == pytest.approx(expected_value)

    @staticmethod
    def test_convert_cross_category_flour_cup_to_gram(unit_table):
        assert convert_cross_category(
            1, "cup", "gram", 0.593, unit_table
        ) == pytest.approx(140.3, abs=0.01)

    @staticmethod
    def test_convert_cross_category_without_density_is_undefined(unit_table):
        assert (
            convert_cross_category(1, "cup", "gram", None, unit_table)
            is UNDEFINED
        )

    @staticmethod
    @pytest.mark.parametrize("density", [0.25, 0.911, 2.2])
    def test_convert_cross_category_inverse(unit_table, density):
        weight = convert_cross_category(2, "tbsp", "oz", density, unit_table)
        volume = convert_cross_category(
            weight, "oz", "tbsp", density, unit_table
        )
        assert volume == pytest.approx(2, rel=1e-9)

    @staticmethod
    def test_convert_cross_category_raises_for_same_category(unit_table):
        with pytest.raises(UnitCategoryError) as error:
            convert_cross_category(1, "cup", "ml", 1.0, unit_table)
        assert (
            str(error.value)
            == "[unit category mismatch] from=cup to=milliliter"
        )

    @staticmethod
    @pytest.mark.parametrize("density", [0, -0.5, math.nan, math.inf])
    def test_convert_cross_category_raises_for_invalid_density(
        unit_table, density
    ):
        with pytest.raises(InvalidDensityError):
            convert_cross_category(1, "cup", "gram", density, unit_table)


class TestValidateDensity:
    @staticmethod
    def test_validate_density():
        assert validate_density(1) == 1.0

    @staticmethod
    def test_validate_density_error_message():
        with pytest.raises(InvalidDensityError) as error:
            validate_density(0)
        assert str(error.value) == "[invalid density] density=0"
