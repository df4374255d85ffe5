import math
from typing import Optional, Union

from kitchen_converter.conversion.unit_table import (
    UnitConversionTable,
    UnitLike,
)
from kitchen_converter.measurement.exceptions import (
    InvalidDensityError,
    UnitCategoryError,
)
from kitchen_converter.measurement.models import UNDEFINED, Undefined
from kitchen_converter.measurement.units import MeasurementCategory


def validate_density(density: float) -> float:
    if not (math.isfinite(density) and density > 0):
        raise InvalidDensityError(density=density)
    return float(density)


def convert_cross_category(
    value: float,
    from_unit: UnitLike,
    to_unit: UnitLike,
    density: Optional[float],
    unit_table: UnitConversionTable,
) -> Union[float, Undefined]:
    """
    Convert between volume and weight with a density in grams per milliliter.

    Without a density nothing is guessed: UNDEFINED is returned so the caller
    can show a placeholder until an ingredient is chosen.
    """
    from_definition = unit_table.get_definition(from_unit)
    to_definition = unit_table.get_definition(to_unit)
    if from_definition.category is to_definition.category:
        raise UnitCategoryError(
            from_unit=from_definition.unit.name,
            to_unit=to_definition.unit.name,
        )

    if density is None:
        return UNDEFINED
    density = validate_density(density)

    if from_definition.category is MeasurementCategory.volume:
        weight_gram = value * from_definition.base_factor * density
        return weight_gram / to_definition.base_factor

    volume_milliliter = value * from_definition.base_factor / density
    return volume_milliliter / to_definition.base_factor
