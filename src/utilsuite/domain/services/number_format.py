"""Locale-agnostic number formatting for calculator and converter output."""

import math

ERROR_TEXT = "Error"

CALCULATOR_FRACTION_DIGITS = 6
CONVERSION_FRACTION_DIGITS = 10

# Integral results below this magnitude are shown without a fractional part.
PLAIN_INTEGER_LIMIT = 1e9


def format_decimal(value: float, max_fraction_digits: int) -> str:
    """Format a number as a plain decimal string.

    No grouping separators are used and trailing fractional zeros are
    trimmed.

    Args:
        value: The number to format.
        max_fraction_digits: Maximum number of digits after the point.

    Returns:
        Formatted string, or "Error" for NaN and infinite values.
    """
    if not math.isfinite(value):
        return ERROR_TEXT
    text = f"{value:.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_result(value: float) -> str:
    """Format a calculator result.

    Args:
        value: The evaluated number.

    Returns:
        Plain integer for integral values under 1e9, otherwise a decimal
        with at most 6 fractional digits.
    """
    if math.isfinite(value) and value % 1 == 0 and abs(value) < PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return format_decimal(value, CALCULATOR_FRACTION_DIGITS)


def format_conversion(value: float) -> str:
    """Format a converted value with at most 10 fractional digits."""
    return format_decimal(value, CONVERSION_FRACTION_DIGITS)
