"""Common fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from utilsuite.infrastructure.persistence import InMemorySlotRepository


class FakeClock:
    """Deterministic clock that advances only when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


class FailingSlot:
    """Slot whose writes always fail; reads return whatever was seeded."""

    def __init__(self, seeded: dict[str, bytes] | None = None) -> None:
        self.seeded = dict(seeded or {})
        self.write_attempts = 0

    def read(self, key: str) -> bytes | None:
        return self.seeded.get(key)

    def write(self, key: str, data: bytes) -> bool:
        self.write_attempts += 1
        return False


@pytest.fixture
def fixed_now() -> datetime:
    """Create a fixed current time for testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now: datetime) -> FakeClock:
    """Create a manually advanced clock."""
    return FakeClock(fixed_now)


@pytest.fixture
def slot() -> InMemorySlotRepository:
    """Create an in-memory slot."""
    return InMemorySlotRepository()


@pytest.fixture
def failing_slot() -> FailingSlot:
    """Create a slot that rejects every write."""
    return FailingSlot()
