import pytest
from hydra import compose, initialize
from kitchen_converter.conversion.provide_ratio import SystemRatioProvider
from kitchen_converter.conversion.unit_table import UnitConversionTable
from kitchen_converter.converter.convert_measurement import KitchenConverter
from kitchen_converter.formatter.format_amount import AmountFormatter
from kitchen_converter.fraction.approximate_fraction import FractionApproximator
from kitchen_converter.ingredient.read_ingredient_catalog import (
    IngredientCatalog,
)


@pytest.fixture(scope="session")
def config_converter():
    with initialize(version_base=None, config_path="../config"):
        return compose(config_name="converter_main")


@pytest.fixture(scope="session")
def unit_table():
    return UnitConversionTable.from_unit_registry()


@pytest.fixture
def approximator(config_converter):
    return FractionApproximator.from_config(config_converter.fraction)


@pytest.fixture
def amount_formatter(config_converter, approximator):
    return AmountFormatter(
        config=config_converter.formatter, approximator=approximator
    )


@pytest.fixture
def ratio_provider(config_converter):
    return SystemRatioProvider(config_converter.ratio_provider)


@pytest.fixture
def ingredient_catalog(config_converter):
    return IngredientCatalog(config_converter.ingredient_catalog)


@pytest.fixture
def kitchen_converter(config_converter):
    return KitchenConverter(config=config_converter)
