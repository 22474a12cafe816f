"""Domain repositories."""

from utilsuite.domain.repositories.persistent_slot import PersistentSlot
from utilsuite.domain.repositories.record_codec import RecordCodec

__all__ = ["PersistentSlot", "RecordCodec"]
