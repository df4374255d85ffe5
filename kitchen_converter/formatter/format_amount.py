import math
from dataclasses import dataclass
from typing import Union

from kitchen_converter.abstract.rounding import round_half_up
from kitchen_converter.fraction.approximate_fraction import (
    DEFAULT_APPROXIMATOR,
    FractionApproximator,
    format_imperial_amount,
)
from kitchen_converter.measurement.models import UNDEFINED, Undefined
from kitchen_converter.measurement.units import DisplaySystem
from omegaconf import DictConfig

# (exclusive upper bound of magnitude, decimal places)
PRECISION_TIERS = ((0.01, 4), (1, 3), (10, 2), (100, 1))


def format_metric_amount(value: float) -> str:
    magnitude = abs(value)
    for upper_bound, decimal_places in PRECISION_TIERS:
        if magnitude < upper_bound:
            return f"{value:.{decimal_places}f}"
    return str(round_half_up(value))


@dataclass
class AmountFormatter:
    config: DictConfig
    approximator: FractionApproximator = DEFAULT_APPROXIMATOR

    def format(
        self,
        value: Union[float, Undefined],
        display_system: Union[str, DisplaySystem],
    ) -> str:
        if value is UNDEFINED or not math.isfinite(value):
            return self.config.undefined_placeholder

        if DisplaySystem(display_system) is DisplaySystem.imperial:
            return format_imperial_amount(
                value,
                show_approx_marker=True,
                approximator=self.approximator,
                approx_threshold_percent=self.config.approx_threshold_percent,
                approx_marker=self.config.approx_marker,
            )
        return format_metric_amount(value)

    def is_approximate(
        self,
        value: Union[float, Undefined],
        display_system: Union[str, DisplaySystem],
    ) -> bool:
        if value is UNDEFINED or not math.isfinite(value):
            return False
        if DisplaySystem(display_system) is DisplaySystem.metric:
            return False
        approximation = self.approximator.approximate(value)
        threshold_percent = self.config.approx_threshold_percent
        return approximation.error_percent > threshold_percent
