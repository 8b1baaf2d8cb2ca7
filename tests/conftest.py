"""
Pytest fixtures for Wellness Companion tests.
"""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import wellness_companion.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Load environment variables
load_dotenv()

from wellness_companion.activities import WellnessActivities  # noqa: E402
from wellness_companion.errors import StoreError, StoreErrorKind  # noqa: E402
from wellness_companion.ledger import LedgerStore  # noqa: E402
from wellness_companion.practice import PracticeTracker  # noqa: E402


# ============================================================================
# Test doubles
# ============================================================================

class FakeClock:
    """Settable clock; call it to read the current time."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class FakeLedgerStore(LedgerStore):
    """
    In-memory ledger store.

    Overrides the generic CRUD operations so the typed helpers (and their
    document conversion) still run. Set ``fail_add`` / ``fail_list`` to a
    StoreError to simulate outages, or ``list_gate`` to an asyncio.Event to
    hold list calls until the test releases them.
    """

    def __init__(self):
        super().__init__(client=None)
        self.records = {}
        self.fail_add = None
        self.fail_list = None
        self.list_gate = None
        self.add_calls = 0
        self.list_calls = 0
        self._next_id = 0

    @property
    def configured(self) -> bool:
        return True

    def _bucket(self, identity, kind):
        if not identity:
            raise StoreError(StoreErrorKind.UNAVAILABLE, "no signed-in identity")
        return self.records.setdefault((identity, kind), {})

    async def add(self, identity, kind, document):
        bucket = self._bucket(identity, kind)
        self.add_calls += 1
        if self.fail_add is not None:
            raise self.fail_add
        self._next_id += 1
        record_id = f"doc-{self._next_id}"
        bucket[record_id] = dict(document)
        return record_id

    async def list(self, identity, kind):
        bucket = self._bucket(identity, kind)
        self.list_calls += 1
        if self.list_gate is not None:
            await self.list_gate.wait()
        if self.fail_list is not None:
            raise self.fail_list
        # Read after the gate so writes made while waiting are visible
        records = [(record_id, dict(doc)) for record_id, doc in bucket.items()]
        records.sort(key=lambda record: record[1]["timestamp"], reverse=True)
        return records

    async def delete(self, identity, kind, record_id):
        bucket = self._bucket(identity, kind)
        if record_id not in bucket:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"{kind.value}/{record_id}")
        del bucket[record_id]

    async def update(self, identity, kind, record_id, fields):
        bucket = self._bucket(identity, kind)
        if record_id not in bucket:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"{kind.value}/{record_id}")
        bucket[record_id].update({k: v for k, v in fields.items() if v is not None})


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def clock():
    """Clock fixed at 15:00 UTC on 10 March 2026."""
    return FakeClock(datetime(2026, 3, 10, 15, 0, tzinfo=timezone.utc))


@pytest.fixture
def store():
    return FakeLedgerStore()


@pytest.fixture
def tracker(store, clock):
    """Practice tracker with calendar days in UTC."""
    return PracticeTracker(store, clock=clock, tz=timezone.utc)


@pytest.fixture
def activities(store, tracker):
    return WellnessActivities(store, tracker)


@pytest.fixture
def unavailable():
    return StoreError(StoreErrorKind.UNAVAILABLE, "service unreachable")
