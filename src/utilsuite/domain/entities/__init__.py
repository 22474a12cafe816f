"""Domain entities."""

from utilsuite.domain.entities.calculation import (
    CalculationRecord,
    CalculatorState,
    Operation,
)
from utilsuite.domain.entities.conversion import (
    ConversionCategory,
    ConversionRequest,
    ConverterSelection,
)
from utilsuite.domain.entities.note import Note
from utilsuite.domain.entities.task import Priority, Task

__all__ = [
    "CalculationRecord",
    "CalculatorState",
    "ConversionCategory",
    "ConversionRequest",
    "ConverterSelection",
    "Note",
    "Operation",
    "Priority",
    "Task",
]
