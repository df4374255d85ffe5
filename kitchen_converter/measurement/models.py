from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Union

from kitchen_converter.measurement.units import (
    AnyMeasurementUnit,
    MeasurementCategory,
    MeasurementSystem,
    TemperatureUnit,
)


class Undefined(Enum):
    undefined = "undefined"

    def __bool__(self):
        return False


# result of a cross-category conversion without a density
UNDEFINED = Undefined.undefined


@dataclass(frozen=True)
class Quantity:
    value: float
    unit: Union[AnyMeasurementUnit, TemperatureUnit]


@dataclass(frozen=True)
class UnitDefinition:
    unit: AnyMeasurementUnit
    category: MeasurementCategory
    base_factor: float

    def __post_init__(self):
        if not self.base_factor > 0:
            raise ValueError(
                f"base factor must be positive: "
                f"{self.unit.name}={self.base_factor}"
            )


@dataclass(frozen=True)
class Ingredient:
    name: str
    density: float
    category: str = None


@dataclass(frozen=True)
class ConversionRequest:
    amount: Union[str, float]
    input_unit: Union[str, AnyMeasurementUnit]
    output_unit: Union[str, AnyMeasurementUnit]
    ingredient: Optional[Ingredient] = None
    system: MeasurementSystem = MeasurementSystem.US


@dataclass(frozen=True)
class ConversionResult:
    quantity: Union[Quantity, Undefined]
    display: str
    is_approximate: bool = False

    @property
    def is_defined(self) -> bool:
        return self.quantity is not UNDEFINED


class FractionCandidate(NamedTuple):
    numerator: int
    denominator: int
    value: float

    @property
    def display(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class FractionApproximation:
    display: str
    actual_value: float
    error_percent: float
