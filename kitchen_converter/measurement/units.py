from typing import NamedTuple, Union

from kitchen_converter.abstract.extended_enum import ExtendedEnum
from kitchen_converter.measurement.exceptions import UnknownUnitError
from pint import Unit, UnitRegistry
from pint.errors import PintError
from structlog import get_logger

FILE_LOGGER = get_logger(__name__)

unit_registry = UnitRegistry()

# spellings pint does not resolve to the kitchen meaning
UNIT_TEXT_ALIASES = {
    "ml/cc": "milliliter",
    "cc": "milliliter",
    "c": "cup",
}


class MeasurementCategory(ExtendedEnum):
    volume = "volume"
    weight = "weight"

    @property
    def base_unit(self) -> Unit:
        if self is MeasurementCategory.volume:
            return unit_registry.milliliter
        return unit_registry.gram


class DisplaySystem(ExtendedEnum):
    metric = "metric"
    imperial = "imperial"


class MeasurementSystem(ExtendedEnum):
    US = "US"
    UK_METRIC = "UK_METRIC"
    UK_IMPERIAL = "UK_IMPERIAL"
    AU_NZ = "AU_NZ"
    CA = "CA"
    EU = "EU"


class KitchenUnit(NamedTuple):
    pint_name: str
    display_system: DisplaySystem


class MeasurementUnit(ExtendedEnum):
    @property
    def pint_unit(self) -> Unit:
        return unit_registry.Unit(self.value.pint_name)

    @property
    def display_system(self) -> DisplaySystem:
        return self.value.display_system

    @property
    def category(self) -> MeasurementCategory:
        raise NotImplementedError


class VolumeUnit(MeasurementUnit):
    teaspoon = KitchenUnit("teaspoon", DisplaySystem.imperial)
    tablespoon = KitchenUnit("tablespoon", DisplaySystem.imperial)
    cup = KitchenUnit("cup", DisplaySystem.imperial)
    pint = KitchenUnit("pint", DisplaySystem.imperial)
    quart = KitchenUnit("quart", DisplaySystem.imperial)
    gallon = KitchenUnit("gallon", DisplaySystem.imperial)
    milliliter = KitchenUnit("milliliter", DisplaySystem.metric)
    liter = KitchenUnit("liter", DisplaySystem.metric)

    @property
    def category(self) -> MeasurementCategory:
        return MeasurementCategory.volume


class WeightUnit(MeasurementUnit):
    ounce = KitchenUnit("ounce", DisplaySystem.imperial)
    pound = KitchenUnit("pound", DisplaySystem.imperial)
    gram = KitchenUnit("gram", DisplaySystem.metric)
    kilogram = KitchenUnit("kilogram", DisplaySystem.metric)

    @property
    def category(self) -> MeasurementCategory:
        return MeasurementCategory.weight


class TemperatureScale(NamedTuple):
    pint_name: str
    abbreviation: str
    fan_offset: int


class TemperatureUnit(ExtendedEnum):
    celsius = TemperatureScale("degree_Celsius", "c", 20)
    fahrenheit = TemperatureScale("degree_Fahrenheit", "f", 25)

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            text = value.strip().lstrip("°").casefold()
            for member in cls:
                scale = member.value
                if text in (
                    member.name,
                    scale.abbreviation,
                    f"deg{scale.abbreviation}",
                    scale.pint_name.casefold(),
                ):
                    return member
        return None

    @property
    def pint_unit(self) -> Unit:
        return unit_registry.Unit(self.value.pint_name)

    @property
    def fan_offset(self) -> int:
        return self.value.fan_offset


class OvenType(ExtendedEnum):
    conventional = "conventional"
    fan = "fan"

    @classmethod
    def _missing_(cls, value):
        # is_fan flags from toggles
        if isinstance(value, bool):
            return cls.fan if value else cls.conventional
        if isinstance(value, str) and value.strip().casefold() == "convection":
            return cls.fan
        return super()._missing_(value)


AnyMeasurementUnit = Union[VolumeUnit, WeightUnit]


def get_unit(unit: Union[str, MeasurementUnit]) -> AnyMeasurementUnit:
    if isinstance(unit, (VolumeUnit, WeightUnit)):
        return unit
    if not isinstance(unit, str):
        raise UnknownUnitError(text=str(unit))

    text = unit.strip().casefold()
    text = UNIT_TEXT_ALIASES.get(text, text)
    try:
        pint_unit = unit_registry.parse_units(text)
    except (PintError, AttributeError, TypeError, ValueError):
        raise UnknownUnitError(text=unit)

    for unit_enum in (VolumeUnit, WeightUnit):
        for member in unit_enum:
            if member.pint_unit == pint_unit:
                return member

    FILE_LOGGER.warning(
        "[get unit]",
        warn="unit not in kitchen vocabulary",
        unit=pint_unit,
    )
    raise UnknownUnitError(text=unit)


def get_temperature_unit(unit: Union[str, TemperatureUnit]) -> TemperatureUnit:
    member = TemperatureUnit.get_member(unit)
    if member is None:
        raise UnknownUnitError(text=str(unit))
    return member
