import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union

from kitchen_converter.conversion.provide_ratio import RatioProvider
from kitchen_converter.measurement.exceptions import (
    InvalidRatioError,
    UnitCategoryError,
)
from kitchen_converter.measurement.models import UnitDefinition
from kitchen_converter.measurement.units import (
    AnyMeasurementUnit,
    MeasurementCategory,
    MeasurementSystem,
    VolumeUnit,
    WeightUnit,
    get_unit,
)
from structlog import get_logger

FILE_LOGGER = get_logger(__name__)

# relative difference tolerated between a provided ratio and the base factors
RATIO_DRIFT_TOLERANCE = 1e-6

UnitLike = Union[str, AnyMeasurementUnit]


@dataclass(frozen=True)
class UnitConversionTable:
    definitions: Mapping[AnyMeasurementUnit, UnitDefinition]

    @classmethod
    def from_unit_registry(cls) -> "UnitConversionTable":
        definitions = {}
        for unit_enum in (VolumeUnit, WeightUnit):
            for unit in unit_enum:
                category = unit.category
                base_quantity = (1 * unit.pint_unit).to(category.base_unit)
                definitions[unit] = UnitDefinition(
                    unit=unit,
                    category=category,
                    base_factor=float(base_quantity.magnitude),
                )
        return cls(definitions=MappingProxyType(definitions))

    def get_definition(self, unit: UnitLike) -> UnitDefinition:
        return self.definitions[get_unit(unit)]

    def base_factor(self, unit: UnitLike) -> float:
        return self.get_definition(unit).base_factor

    def category_of(self, unit: UnitLike) -> MeasurementCategory:
        return self.get_definition(unit).category


def _apply_provided_ratio(
    from_definition: UnitDefinition,
    to_definition: UnitDefinition,
    ratio_provider: RatioProvider,
    system: MeasurementSystem,
) -> Optional[float]:
    provided_ratio = ratio_provider.get_ratio(
        from_definition.unit, to_definition.unit, system
    )
    if provided_ratio is None:
        return None

    if not (math.isfinite(provided_ratio) and provided_ratio > 0):
        raise InvalidRatioError(
            from_unit=from_definition.unit.name,
            to_unit=to_definition.unit.name,
            ratio=provided_ratio,
        )

    fixed_ratio = from_definition.base_factor / to_definition.base_factor
    if not math.isclose(
        provided_ratio, fixed_ratio, rel_tol=RATIO_DRIFT_TOLERANCE
    ):
        FILE_LOGGER.debug(
            "[ratio drift]",
            system=system.name,
            from_unit=from_definition.unit.name,
            to_unit=to_definition.unit.name,
            provided_ratio=provided_ratio,
            fixed_ratio=fixed_ratio,
        )
    return provided_ratio


def convert_same_category(
    value: float,
    from_unit: UnitLike,
    to_unit: UnitLike,
    unit_table: UnitConversionTable,
    ratio_provider: RatioProvider = None,
    system: Union[str, MeasurementSystem] = MeasurementSystem.US,
) -> float:
    from_definition = unit_table.get_definition(from_unit)
    to_definition = unit_table.get_definition(to_unit)
    if from_definition.category is not to_definition.category:
        raise UnitCategoryError(
            from_unit=from_definition.unit.name,
            to_unit=to_definition.unit.name,
        )

    if from_definition.unit is to_definition.unit:
        return float(value)

    # only volume ratios differ between measurement systems
    if (
        ratio_provider is not None
        and from_definition.category is MeasurementCategory.volume
    ):
        provided_ratio = _apply_provided_ratio(
            from_definition,
            to_definition,
            ratio_provider,
            MeasurementSystem(system),
        )
        if provided_ratio is not None:
            return value * provided_ratio

    return value * from_definition.base_factor / to_definition.base_factor
