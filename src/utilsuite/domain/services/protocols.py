"""Domain service protocols."""

from typing import Protocol

from utilsuite.domain.entities import CalculationRecord


class HistoryLog(Protocol):
    """Calculation history abstraction.

    The calculator records every completed binary evaluation here. The
    implementation decides capacity and persistence.
    """

    @property
    def entries(self) -> list[CalculationRecord]:
        """Recorded calculations, newest first."""
        ...

    def record(self, expression: str, result: str) -> CalculationRecord:
        """Record a completed calculation.

        Args:
            expression: Evaluated expression, e.g. "5 + 3".
            result: Formatted result, e.g. "8".

        Returns:
            The stored record.
        """
        ...

    def clear(self) -> None:
        """Remove all recorded calculations."""
        ...
