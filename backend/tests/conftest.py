"""Root conftest - shared test configuration and in-memory registry fixtures.

Invariants:
    - Tests never touch a real database file unless they create one themselves
    - InMemoryKeyValueStore honours the KeyValueStore contract (copies in and out)
    - Registry fixtures use deterministic ids and a fixed, advancing clock
"""

import copy
import os
from datetime import datetime, timedelta, timezone

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from donorbase.services.donation_registry import DonationRegistry  # noqa: E402
from donorbase.services.donor_registry import DonorRegistry  # noqa: E402


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore used to test registries without SQL."""

    def __init__(self):
        self.data: dict[str, dict] = {}
        self.writes = 0

    async def get(self, key: str) -> dict | None:
        value = self.data.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def insert(self, key: str, value: dict) -> None:
        self.writes += 1
        self.data[key] = copy.deepcopy(value)

    async def remove(self, key: str) -> dict | None:
        self.writes += 1
        return self.data.pop(key, None)

    async def values(self) -> list[dict]:
        return [copy.deepcopy(self.data[k]) for k in sorted(self.data)]


class SequentialIds:
    """Predictable ids: donor-1, donor-2, ..."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


class SteppingClock:
    """Returns a new instant one second later on every call."""

    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def donor_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def donation_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def donor_registry(donor_store, clock):
    return DonorRegistry(donor_store, new_id=SequentialIds("donor"), clock=clock)


@pytest.fixture
def donation_registry(donation_store, clock):
    return DonationRegistry(
        donation_store, new_id=SequentialIds("donation"), clock=clock,
    )
