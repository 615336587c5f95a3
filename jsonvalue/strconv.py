"""Conversions between JSON real number text and floats."""

from __future__ import annotations

import math
import re

DEFAULT_PRECISION = 17

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_real(text: str) -> float:
    """Parse the text of a real number.

    Raises ValueError for text that is not a number and OverflowError when
    the value is too large to be represented.
    """
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"not a real number: {text!r}")
    value = float(text)
    if math.isinf(value):
        raise OverflowError(f"real number overflow: {text!r}")
    return value


def format_real(value: float, precision: int = 0) -> str:
    """Format a float the way it is written into JSON text.

    A precision of 0 means 17 significant digits. The result always holds a
    dot or an exponent, and the exponent carries no '+' and no leading zeros.
    """
    if precision < 0:
        raise ValueError(f"negative precision: {precision}")
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot format non-finite value: {value!r}")
    if precision == 0:
        precision = DEFAULT_PRECISION

    text = "%.*g" % (precision, value)

    # Keep a real from reading back as an integer.
    if "." not in text and "e" not in text:
        text += ".0"

    mantissa, sep, exponent = text.partition("e")
    if sep:
        sign = "-" if exponent.startswith("-") else ""
        digits = exponent.lstrip("+-").lstrip("0")
        text = f"{mantissa}e{sign}{digits}"
    return text