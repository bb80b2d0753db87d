"""
Single-precision arithmetic helpers.

Python floats are IEEE-754 doubles. Evaluation results are defined in
single precision, so every value is rounded through a 32-bit float before
it is stored back into a token.
"""

from __future__ import annotations

import math
import struct

from matheval.errors import NumberFormatError

# Largest finite single-precision value
SINGLE_MAX = 3.4028234663852886e38

# Rounding threshold: values at or above this overflow to infinity
_OVERFLOW_LIMIT = 3.4028235677973366e38


def to_single(value: float) -> float:
    """Round a number to the nearest single-precision value."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return value
    if abs(value) >= _OVERFLOW_LIMIT:
        return math.copysign(math.inf, value)
    return struct.unpack("f", struct.pack("f", value))[0]


def format_single(value: float) -> str:
    """Return the canonical text of a single-precision value.

    The value is rounded to 7 significant digits, so float32 noise such as
    1.8400002 is dropped before the text is parsed again.

    Examples:
        format_single(902.0) -> "902"
        format_single(1.8400002) -> "1.84"
    """
    value = to_single(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    return _plain(f"{value:.7g}")


def _plain(text: str) -> str:
    """Expand exponent notation produced by the 'g' format."""
    if "e" not in text:
        return text
    mantissa, _, exponent = text.partition("e")
    sign = ""
    if mantissa.startswith("-"):
        sign, mantissa = "-", mantissa[1:]
    int_part, _, frac_part = mantissa.partition(".")
    digits = int_part + frac_part
    point = len(int_part) + int(exponent)
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    return f"{sign}{digits[:point]}.{digits[point:]}"


def parse_single(text: str, pos: int | None = None) -> float:
    """Parse number text into a single-precision value.

    Raises:
        NumberFormatError: If the text is not a decimal number.
    """
    try:
        return to_single(float(text))
    except ValueError as e:
        raise NumberFormatError(text, pos) from e


def apply_operator(op: str, left: float, right: float) -> float:
    """Apply a binary arithmetic operator in single precision.

    Division by zero follows IEEE-754: ``x / 0`` is a signed infinity and
    ``0 / 0`` is NaN.
    """
    if op == "+":
        result = left + right
    elif op == "-":
        result = left - right
    elif op == "*":
        result = left * right
    elif op == "/":
        result = _divide(left, right)
    else:
        raise ValueError(f"Unknown operator: {op!r}")
    return to_single(result)


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)
