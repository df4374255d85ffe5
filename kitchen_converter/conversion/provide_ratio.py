from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Protocol, Tuple, Union

from kitchen_converter.measurement.exceptions import RatioConfigError
from kitchen_converter.measurement.units import MeasurementSystem, VolumeUnit
from omegaconf import DictConfig
from structlog import get_logger

FILE_LOGGER = get_logger(__name__)

RatioKey = Tuple[MeasurementSystem, VolumeUnit, VolumeUnit]


class RatioProvider(Protocol):
    def get_ratio(
        self,
        from_unit: VolumeUnit,
        to_unit: VolumeUnit,
        system: MeasurementSystem,
    ) -> Optional[float]:
        ...


@dataclass
class SystemRatioProvider:
    """
    Direct volume ratios per measurement system, e.g. a UK imperial cup is
    284 mL while a US cup is 236.6 mL. Ratios are stored rounded to
    `significant_digits` significant digits.
    """

    config: DictConfig
    ratio_table: Mapping[RatioKey, float] = field(init=False)

    def __post_init__(self):
        self.ratio_table = MappingProxyType(self._build_ratio_table())
        FILE_LOGGER.info(
            "[build ratio table]",
            systems=len(self.config.systems),
            ratios=len(self.ratio_table),
        )

    @property
    def significant_digits(self) -> int:
        return self.config.significant_digits

    def get_ratio(
        self,
        from_unit: VolumeUnit,
        to_unit: VolumeUnit,
        system: Union[str, MeasurementSystem] = MeasurementSystem.US,
    ) -> Optional[float]:
        system = MeasurementSystem.get_member(system)
        return self.ratio_table.get((system, from_unit, to_unit))

    def _build_ratio_table(self) -> Dict[RatioKey, float]:
        ratio_table = {}
        for system_name, unit_to_ml in self.config.systems.items():
            system = MeasurementSystem.get_member(system_name)
            if system is None:
                raise RatioConfigError(
                    custom_message=f"unknown measurement system {system_name}"
                )
            to_ml = self._get_unit_to_ml(system, unit_to_ml)
            for from_unit, from_ml in to_ml.items():
                for to_unit, to_unit_ml in to_ml.items():
                    if from_unit is to_unit:
                        continue
                    ratio = self._round_ratio(from_ml / to_unit_ml)
                    ratio_table[(system, from_unit, to_unit)] = ratio
        return ratio_table

    def _round_ratio(self, ratio: float) -> float:
        return float(f"{ratio:.{self.significant_digits}g}")

    @staticmethod
    def _get_unit_to_ml(
        system: MeasurementSystem, unit_to_ml: DictConfig
    ) -> Dict[VolumeUnit, float]:
        to_ml = {}
        for unit_name, milliliter in unit_to_ml.items():
            unit = VolumeUnit.get_member(unit_name)
            if unit is None:
                raise RatioConfigError(
                    custom_message=f"{system.name} has unknown unit {unit_name}"
                )
            if not milliliter > 0:
                raise RatioConfigError(
                    custom_message=f"{system.name} {unit_name}={milliliter}"
                )
            to_ml[unit] = float(milliliter)
        return to_ml
