from typing import Optional

import hydra
from kitchen_converter.conversion.provide_ratio import SystemRatioProvider
from kitchen_converter.converter.convert_measurement import KitchenConverter
from kitchen_converter.ingredient.read_ingredient_catalog import (
    IngredientCatalog,
)
from kitchen_converter.measurement.models import (
    ConversionRequest,
    ConversionResult,
    Ingredient,
)
from kitchen_converter.measurement.units import MeasurementSystem
from omegaconf import DictConfig
from structlog import get_logger

FILE_LOGGER = get_logger(__name__)


def _get_ratio_provider(config: DictConfig) -> Optional[SystemRatioProvider]:
    if not config.ratio_provider.enabled:
        return None
    return SystemRatioProvider(config.ratio_provider)


def _get_ingredient(config: DictConfig) -> Optional[Ingredient]:
    if config.request.ingredient is None:
        return None
    catalog = IngredientCatalog(config.ingredient_catalog)
    return catalog.get_ingredient(config.request.ingredient)


def run_conversion(config: DictConfig) -> ConversionResult:
    converter = KitchenConverter(
        config=config, ratio_provider=_get_ratio_provider(config)
    )
    request = config.request
    if request.mode == "amount":
        result = converter.convert(
            ConversionRequest(
                amount=request.amount,
                input_unit=request.input_unit,
                output_unit=request.output_unit,
                ingredient=_get_ingredient(config),
                system=MeasurementSystem(request.system),
            )
        )
    elif request.mode == "temperature":
        result = converter.convert_oven_temperature(
            request.amount,
            request.input_unit,
            request.output_unit,
            from_oven=request.input_oven,
            to_oven=request.output_oven,
        )
    else:
        raise ValueError(f"request mode {request.mode} not defined")

    FILE_LOGGER.info(
        "[run conversion]",
        mode=request.mode,
        amount=request.amount,
        input_unit=request.input_unit,
        output_unit=request.output_unit,
        display=result.display,
        is_approximate=result.is_approximate,
    )
    return result


@hydra.main(
    config_path="../config", config_name="converter_main", version_base=None
)
def main(config: DictConfig):
    run_conversion(config)


if __name__ == "__main__":
    main()
