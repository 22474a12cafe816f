"""Application services."""

from utilsuite.application.services.calculation_history import CalculationHistory
from utilsuite.application.services.converter_session import ConverterSession
from utilsuite.application.services.utility_suite import UtilitySuite

__all__ = ["CalculationHistory", "ConverterSession", "UtilitySuite"]
