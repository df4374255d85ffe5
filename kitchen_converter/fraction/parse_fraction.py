import math
from typing import Callable

import regex
from structlog import get_logger

FILE_LOGGER = get_logger(__name__)

UNICODE_FRACTIONS = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}


def convert_unicode_to_fraction(text: str) -> str:
    for unicode_fraction, str_fraction in UNICODE_FRACTIONS.items():
        # "1¾" needs the separating space of "1 3/4"
        text = text.replace(unicode_fraction, f" {str_fraction}")
    return regex.sub(r"\s+", " ", text).strip()


def _parse_number(token: str, number_type: Callable = float) -> float:
    try:
        number = float(number_type(token))
    except ValueError:
        FILE_LOGGER.debug(
            "[parse fraction]", warn="unparsable component", token=token
        )
        return 0.0
    if not math.isfinite(number):
        FILE_LOGGER.debug(
            "[parse fraction]", warn="non-finite component", token=token
        )
        return 0.0
    return number


def _parse_simple_fraction(token: str) -> float:
    parts = token.split("/")
    if len(parts) != 2:
        FILE_LOGGER.debug(
            "[parse fraction]", warn="malformed fraction", token=token
        )
        return 0.0

    numerator = _parse_number(parts[0])
    denominator = _parse_number(parts[1])
    if denominator == 0:
        FILE_LOGGER.debug(
            "[parse fraction]", warn="zero denominator", token=token
        )
        return 0.0
    return numerator / denominator


def _parse_single_token(token: str) -> float:
    if "/" in token:
        return _parse_simple_fraction(token)
    return _parse_number(token)


def parse_decimal(text: str) -> float:
    return _parse_number(text.strip())


def parse_fraction(text: str) -> float:
    """
    Parse "3", "3/4", "2 3/4" (or a plain decimal like "1.5") into a float.

    Malformed parts count as 0 instead of raising, as partially typed user
    input is a normal state for the caller.
    """
    tokens = convert_unicode_to_fraction(text).split(" ")
    if tokens == [""]:
        return 0.0

    if len(tokens) > 2:
        FILE_LOGGER.warning(
            "[parse fraction]", warn="ignoring extra tokens", text=text
        )

    if len(tokens) >= 2:
        # whole part must be an integer: "2.5 1/2" parses as 0.5
        whole = _parse_number(tokens[0], number_type=int)
        return whole + _parse_single_token(tokens[1])
    return _parse_single_token(tokens[0])
