"""
Number formatting for the token emitters

The exported CSS/SCSS/Tailwind text has to match what downstream
consumers already have byte for byte, which means numbers are rendered
the way a JavaScript template literal renders them ("16", "0.25",
"1.333") and fixed-point values round like Number.prototype.toFixed.
"""
from decimal import Decimal, ROUND_HALF_UP
import math

import numpy as np


def format_number(value) -> str:
    """
    Shortest round-trip representation without exponent or trailing '.0'

    Examples:
        16 -> '16', 16.0 -> '16', 0.25 -> '0.25', 1.333 -> '1.333'
    """
    if isinstance(value, bool):
        raise TypeError("format_number() does not accept booleans")
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if value == 0:
        return '0'  # also folds -0.0
    return np.format_float_positional(value, trim='-')


def to_fixed(value: float, digits: int) -> str:
    """
    Fixed-point string with ties rounded away from zero

    Rounds the exact binary value of `value`, so 1.5625 -> '1.563' while
    Python's f-string formatting would give '1.562'.
    """
    quantum = Decimal(1).scaleb(-digits)
    result = Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if result.is_zero():
        result = abs(result)
    return f"{result:.{digits}f}"


def round_half_up(value: float) -> int:
    """Integer rounding with .5 going towards +infinity (Math.round)"""
    return int(math.floor(value + 0.5))
