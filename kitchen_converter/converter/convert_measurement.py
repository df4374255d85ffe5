import math
from dataclasses import dataclass, field
from typing import Optional, Union

from kitchen_converter.conversion.convert_density import convert_cross_category
from kitchen_converter.conversion.convert_temperature import (
    OvenTypeLike,
    TemperatureUnitLike,
    convert_temperature,
)
from kitchen_converter.conversion.provide_ratio import RatioProvider
from kitchen_converter.conversion.unit_table import (
    UnitConversionTable,
    UnitLike,
    convert_same_category,
)
from kitchen_converter.formatter.format_amount import AmountFormatter
from kitchen_converter.fraction.approximate_fraction import FractionApproximator
from kitchen_converter.fraction.parse_fraction import (
    parse_decimal,
    parse_fraction,
)
from kitchen_converter.measurement.models import (
    UNDEFINED,
    ConversionRequest,
    ConversionResult,
    Quantity,
    Undefined,
)
from kitchen_converter.measurement.units import (
    AnyMeasurementUnit,
    DisplaySystem,
    get_temperature_unit,
    get_unit,
)
from omegaconf import DictConfig
from structlog import get_logger

FILE_LOGGER = get_logger(__name__)


@dataclass
class KitchenConverter:
    """
    Entry point for callers: parses the raw amount, routes it to the
    same-category, density or temperature conversion and renders the result
    for the output unit's display system.

    All lookup tables are built once here and only read afterwards.
    """

    config: DictConfig
    ratio_provider: Optional[RatioProvider] = None
    unit_table: UnitConversionTable = field(init=False)
    approximator: FractionApproximator = field(init=False)
    amount_formatter: AmountFormatter = field(init=False)

    def __post_init__(self):
        self.unit_table = UnitConversionTable.from_unit_registry()
        self.approximator = FractionApproximator.from_config(
            self.config.fraction
        )
        self.amount_formatter = AmountFormatter(
            config=self.config.formatter, approximator=self.approximator
        )

    @staticmethod
    def parse_amount(amount: Union[str, float], unit: UnitLike) -> float:
        if isinstance(amount, (int, float)) and not isinstance(amount, bool):
            if not math.isfinite(amount):
                return 0.0
            return float(amount)

        if get_unit(unit).display_system is DisplaySystem.imperial:
            return parse_fraction(str(amount))
        return parse_decimal(str(amount))

    def convert(self, request: ConversionRequest) -> ConversionResult:
        input_unit = get_unit(request.input_unit)
        output_unit = get_unit(request.output_unit)
        value = self.parse_amount(request.amount, input_unit)

        if input_unit.category is output_unit.category:
            converted = convert_same_category(
                value,
                input_unit,
                output_unit,
                unit_table=self.unit_table,
                ratio_provider=self.ratio_provider,
                system=request.system,
            )
        else:
            density = None
            if request.ingredient is not None:
                density = request.ingredient.density
            converted = convert_cross_category(
                value,
                input_unit,
                output_unit,
                density=density,
                unit_table=self.unit_table,
            )

        result = self._build_result(converted, output_unit)
        FILE_LOGGER.info(
            "[convert]",
            amount=request.amount,
            input_unit=input_unit.name,
            output_unit=output_unit.name,
            ingredient=getattr(request.ingredient, "name", None),
            display=result.display,
        )
        return result

    def convert_oven_temperature(
        self,
        value: Union[str, float],
        from_unit: TemperatureUnitLike,
        to_unit: TemperatureUnitLike,
        from_oven: OvenTypeLike = False,
        to_oven: OvenTypeLike = False,
    ) -> ConversionResult:
        if isinstance(value, str):
            value = parse_decimal(value)
        to_unit = get_temperature_unit(to_unit)
        temperature = convert_temperature(
            value, from_unit, to_unit, from_oven, to_oven
        )
        FILE_LOGGER.info(
            "[convert oven temperature]",
            value=value,
            to_unit=to_unit.name,
            temperature=temperature,
        )
        return ConversionResult(
            quantity=Quantity(value=float(temperature), unit=to_unit),
            display=str(temperature),
        )

    def _build_result(
        self, converted: Union[float, Undefined], unit: AnyMeasurementUnit
    ) -> ConversionResult:
        if converted is not UNDEFINED and not math.isfinite(converted):
            FILE_LOGGER.warning(
                "[build result]",
                warn="result out of range",
                output_unit=unit.name,
            )
            converted = UNDEFINED

        display_system = unit.display_system
        quantity = UNDEFINED
        if converted is not UNDEFINED:
            quantity = Quantity(value=converted, unit=unit)
        return ConversionResult(
            quantity=quantity,
            display=self.amount_formatter.format(converted, display_system),
            is_approximate=self.amount_formatter.is_approximate(
                converted, display_system
            ),
        )
