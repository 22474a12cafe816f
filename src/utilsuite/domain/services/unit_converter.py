"""Unit conversion through per-category base units."""

import logging
from collections.abc import Callable

from utilsuite.domain.entities import ConversionCategory, ConversionRequest
from utilsuite.domain.services.number_format import format_conversion

logger = logging.getLogger(__name__)

BASE_UNITS: dict[ConversionCategory, str] = {
    ConversionCategory.LENGTH: "Meters",
    ConversionCategory.WEIGHT: "Grams",
    ConversionCategory.TEMPERATURE: "Celsius",
    ConversionCategory.VOLUME: "Liters",
}

# Multiplier from each unit to its category's base unit.
LINEAR_FACTORS: dict[ConversionCategory, dict[str, float]] = {
    ConversionCategory.LENGTH: {
        "Meters": 1.0,
        "Kilometers": 1000.0,
        "Centimeters": 0.01,
        "Millimeters": 0.001,
        "Inches": 0.0254,
        "Feet": 0.3048,
        "Yards": 0.9144,
        "Miles": 1609.34,
    },
    ConversionCategory.WEIGHT: {
        "Grams": 1.0,
        "Kilograms": 1000.0,
        "Pounds": 453.592,
        "Ounces": 28.3495,
        "Tons": 1_000_000.0,
        "Stones": 6350.29,
    },
    ConversionCategory.VOLUME: {
        "Liters": 1.0,
        "Milliliters": 0.001,
        "Gallons": 3.78541,
        "Quarts": 0.946353,
        "Pints": 0.473176,
        "Cups": 0.236588,
        "Fluid Ounces": 0.0295735,
    },
}

# (to Celsius, from Celsius) pairs for the affine temperature scales.
_Scale = tuple[Callable[[float], float], Callable[[float], float]]

TEMPERATURE_SCALES: dict[str, _Scale] = {
    "Celsius": (lambda v: v, lambda c: c),
    "Fahrenheit": (lambda v: (v - 32) * 5 / 9, lambda c: c * 9 / 5 + 32),
    "Kelvin": (lambda v: v - 273.15, lambda c: c + 273.15),
}


def to_base(value: float, unit: str, category: ConversionCategory) -> float:
    """Normalize a value into the category's base unit.

    Unknown unit names are treated as already being in the base unit.
    """
    if category is ConversionCategory.TEMPERATURE:
        scale = TEMPERATURE_SCALES.get(unit)
        return scale[0](value) if scale else value
    factor = LINEAR_FACTORS[category].get(unit)
    return value * factor if factor is not None else value


def from_base(value: float, unit: str, category: ConversionCategory) -> float:
    """Denormalize a base-unit value into the given unit."""
    if category is ConversionCategory.TEMPERATURE:
        scale = TEMPERATURE_SCALES.get(unit)
        return scale[1](value) if scale else value
    factor = LINEAR_FACTORS[category].get(unit)
    return value / factor if factor is not None else value


def convert(
    value: float,
    from_unit: str,
    to_unit: str,
    category: ConversionCategory,
) -> float:
    """Convert a value between two units of the same category.

    Args:
        value: Input value expressed in from_unit.
        from_unit: Source unit name, e.g. "Celsius".
        to_unit: Target unit name, e.g. "Fahrenheit".
        category: Category both units belong to.

    Returns:
        The converted value. Never raises; callers classify NaN or
        infinite results as errors.
    """
    return from_base(to_base(value, from_unit, category), to_unit, category)


def convert_text(request: ConversionRequest) -> str:
    """Convert user input and format it for display.

    Args:
        request: Category, units and the raw input text.

    Returns:
        "" when there is nothing to convert (empty or unparsable input,
        unselected unit), "Error" for NaN or infinite results, otherwise
        the formatted value.
    """
    if not request.from_unit or not request.to_unit:
        return ""
    try:
        value = float(request.input_value.strip())
    except ValueError:
        logger.debug("Unparsable conversion input: %r", request.input_value)
        return ""

    result = convert(value, request.from_unit, request.to_unit, request.category)
    return format_conversion(result)
