"""Persistence infrastructure."""

from utilsuite.infrastructure.persistence.codecs import (
    CALCULATION_CODEC,
    NOTE_CODEC,
    TASK_CODEC,
    JsonRecordCodec,
)
from utilsuite.infrastructure.persistence.database import DatabaseManager
from utilsuite.infrastructure.persistence.memory_slot import InMemorySlotRepository
from utilsuite.infrastructure.persistence.models import SlotModel
from utilsuite.infrastructure.persistence.slot_repository import SQLiteSlotRepository

__all__ = [
    "CALCULATION_CODEC",
    "DatabaseManager",
    "InMemorySlotRepository",
    "JsonRecordCodec",
    "NOTE_CODEC",
    "SQLiteSlotRepository",
    "SlotModel",
    "TASK_CODEC",
]
