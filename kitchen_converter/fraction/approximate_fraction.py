import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from kitchen_converter.fraction.parse_fraction import parse_fraction
from kitchen_converter.measurement.exceptions import FractionConfigError
from kitchen_converter.measurement.models import (
    FractionApproximation,
    FractionCandidate,
)
from omegaconf import DictConfig

ALLOWED_DENOMINATORS = (2, 3, 4, 8, 16, 32, 64)
DEFAULT_CANDIDATE_PAIRS = (
    (1, 2),
    (1, 3),
    (2, 3),
    (1, 4),
    (3, 4),
    (1, 8),
    (3, 8),
    (5, 8),
    (7, 8),
    (1, 16),
    (3, 16),
    (5, 16),
    (7, 16),
    (9, 16),
    (11, 16),
    (13, 16),
    (15, 16),
)
ROUND_DOWN_THRESHOLD = 0.001
ROUND_UP_THRESHOLD = 0.99
APPROX_THRESHOLD_PERCENT = 2.0
APPROX_MARKER = "~"


def build_fraction_candidates(
    pairs: Iterable[Sequence[int]],
) -> Tuple[FractionCandidate, ...]:
    candidates = []
    for numerator, denominator in pairs:
        if denominator not in ALLOWED_DENOMINATORS:
            raise FractionConfigError(
                custom_message=f"denominator {denominator} not allowed"
            )
        if not 0 < numerator < denominator:
            raise FractionConfigError(
                custom_message=f"{numerator}/{denominator} not proper"
            )
        candidates.append(
            FractionCandidate(
                numerator=numerator,
                denominator=denominator,
                value=numerator / denominator,
            )
        )
    if len(candidates) == 0:
        raise FractionConfigError(custom_message="no fraction candidates")
    return tuple(candidates)


DEFAULT_FRACTION_CANDIDATES = build_fraction_candidates(DEFAULT_CANDIDATE_PAIRS)


def _find_closest_candidate(
    remainder: float, candidates: Sequence[FractionCandidate]
) -> FractionCandidate:
    best_candidate = candidates[0]
    best_error = abs(remainder - best_candidate.value)
    # strict comparison: on a tie the earlier candidate is kept
    for candidate in candidates[1:]:
        error = abs(remainder - candidate.value)
        if error < best_error:
            best_error = error
            best_candidate = candidate
    return best_candidate


def decimal_to_fraction(
    decimal: float,
    candidates: Sequence[FractionCandidate] = DEFAULT_FRACTION_CANDIDATES,
    round_down_threshold: float = ROUND_DOWN_THRESHOLD,
    round_up_threshold: float = ROUND_UP_THRESHOLD,
) -> FractionApproximation:
    if not math.isfinite(decimal):
        raise ValueError(f"cannot approximate {decimal} as a fraction")

    if decimal < 0:
        positive = decimal_to_fraction(
            -decimal, candidates, round_down_threshold, round_up_threshold
        )
        if positive.actual_value == 0:
            return positive
        return FractionApproximation(
            display=f"-{positive.display}",
            actual_value=-positive.actual_value,
            error_percent=positive.error_percent,
        )

    whole = math.floor(decimal)
    remainder = decimal - whole

    if remainder < round_down_threshold:
        return FractionApproximation(
            display=str(whole), actual_value=float(whole), error_percent=0.0
        )
    if remainder > round_up_threshold:
        return FractionApproximation(
            display=str(whole + 1),
            actual_value=float(whole + 1),
            error_percent=0.0,
        )

    candidate = _find_closest_candidate(remainder, candidates)
    actual_value = whole + candidate.value
    error_percent = abs((actual_value - decimal) / decimal) * 100

    display = candidate.display
    if whole > 0:
        display = f"{whole} {candidate.display}"
    return FractionApproximation(
        display=display, actual_value=actual_value, error_percent=error_percent
    )


@dataclass(frozen=True)
class FractionApproximator:
    candidates: Tuple[FractionCandidate, ...] = DEFAULT_FRACTION_CANDIDATES
    round_down_threshold: float = ROUND_DOWN_THRESHOLD
    round_up_threshold: float = ROUND_UP_THRESHOLD

    @classmethod
    def from_config(cls, config: DictConfig) -> "FractionApproximator":
        return cls(
            candidates=build_fraction_candidates(config.candidates),
            round_down_threshold=config.round_down_threshold,
            round_up_threshold=config.round_up_threshold,
        )

    def approximate(self, decimal: float) -> FractionApproximation:
        return decimal_to_fraction(
            decimal,
            candidates=self.candidates,
            round_down_threshold=self.round_down_threshold,
            round_up_threshold=self.round_up_threshold,
        )


DEFAULT_APPROXIMATOR = FractionApproximator()


def format_imperial_amount(
    value: float,
    show_approx_marker: bool = False,
    approximator: FractionApproximator = DEFAULT_APPROXIMATOR,
    approx_threshold_percent: float = APPROX_THRESHOLD_PERCENT,
    approx_marker: str = APPROX_MARKER,
) -> str:
    approximation = approximator.approximate(value)
    if (
        show_approx_marker
        and approximation.error_percent > approx_threshold_percent
    ):
        return f"{approx_marker}{approximation.display}"
    return approximation.display


def convert_imperial_to_metric(fraction_text: str) -> str:
    return f"{parse_fraction(fraction_text):g}"


def convert_metric_to_imperial(decimal_text: str) -> str:
    return decimal_to_fraction(parse_fraction(decimal_text)).display
