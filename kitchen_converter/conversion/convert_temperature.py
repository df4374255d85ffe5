import math
from typing import Union

from kitchen_converter.abstract.rounding import round_half_up
from kitchen_converter.measurement.exceptions import InvalidTemperatureError
from kitchen_converter.measurement.units import (
    OvenType,
    TemperatureUnit,
    get_temperature_unit,
    unit_registry,
)

TemperatureUnitLike = Union[str, TemperatureUnit]
OvenTypeLike = Union[bool, str, OvenType]


def get_oven_offset(
    to_unit: TemperatureUnit, from_oven: OvenType, to_oven: OvenType
) -> int:
    if from_oven is to_oven:
        return 0
    # fan -> conventional raises the setting
    if from_oven is OvenType.fan:
        return to_unit.fan_offset
    return -to_unit.fan_offset


def convert_temperature(
    value: float,
    from_unit: TemperatureUnitLike,
    to_unit: TemperatureUnitLike,
    from_oven: OvenTypeLike = OvenType.conventional,
    to_oven: OvenTypeLike = OvenType.conventional,
) -> int:
    from_unit = get_temperature_unit(from_unit)
    to_unit = get_temperature_unit(to_unit)

    converted = float(value)
    if from_unit is not to_unit:
        temperature = unit_registry.Quantity(value, from_unit.pint_unit)
        converted = temperature.to(to_unit.pint_unit).magnitude

    if not math.isfinite(converted):
        raise InvalidTemperatureError(value=value)

    offset = get_oven_offset(to_unit, OvenType(from_oven), OvenType(to_oven))
    return round_half_up(converted + offset)
