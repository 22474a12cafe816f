"""Domain services."""

from utilsuite.domain.services.calculator import ArithmeticEngine, calculate
from utilsuite.domain.services.clock import Clock, utc_now
from utilsuite.domain.services.number_format import (
    format_conversion,
    format_decimal,
    format_result,
)
from utilsuite.domain.services.protocols import HistoryLog
from utilsuite.domain.services.task_ordering import TaskSortOption, sort_tasks
from utilsuite.domain.services.unit_converter import convert, convert_text

__all__ = [
    "ArithmeticEngine",
    "Clock",
    "HistoryLog",
    "TaskSortOption",
    "calculate",
    "convert",
    "convert_text",
    "format_conversion",
    "format_decimal",
    "format_result",
    "sort_tasks",
    "utc_now",
]
