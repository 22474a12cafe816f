"""Application record stores."""

from utilsuite.application.stores.note_store import NoteStore
from utilsuite.application.stores.persisted_collection import PersistedCollection
from utilsuite.application.stores.record_store import RecordStore
from utilsuite.application.stores.task_store import TaskStats, TaskStore

__all__ = [
    "NoteStore",
    "PersistedCollection",
    "RecordStore",
    "TaskStats",
    "TaskStore",
]
