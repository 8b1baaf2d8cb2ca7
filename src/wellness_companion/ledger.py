"""
Remote ledger store backed by Cloud Firestore.

Every record lives under ``users/{uid}/{kind}``. Read and write failures are
translated into StoreError so callers never see Firestore exception types.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, TypeVar

from firebase_admin import firestore
from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions

from .errors import StoreError, StoreErrorKind
from .records import GratitudeEntry, JournalEntry, MoodEntry, PracticeSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordKind(str, Enum):
    """Per-user collections."""

    PRACTICE_SESSIONS = "practiceSessions"
    MOOD_ENTRIES = "moodEntries"
    JOURNAL_ENTRIES = "journalEntries"
    GRATITUDE_ENTRIES = "gratitudeEntries"


def _to_datetime(value: Any) -> Any:
    """Convert a Firestore timestamp into a plain timezone-aware datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return datetime.fromtimestamp(value.timestamp(), tz=timezone.utc)
    return value


def _parse(
    records: List[Tuple[str, Dict[str, Any]]],
    factory: Callable[[str, Dict[str, Any]], T],
    kind: "RecordKind",
) -> List[T]:
    """Build typed records, skipping documents written with missing or unknown fields."""
    parsed = []
    for record_id, data in records:
        try:
            parsed.append(factory(record_id, data))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"[LEDGER] Skipping malformed {kind.value}/{record_id}: {e}")
    return parsed


@contextmanager
def _translate_errors(operation: str, kind: "RecordKind") -> Iterator[None]:
    try:
        yield
    except StoreError:
        raise
    except api_exceptions.NotFound as e:
        raise StoreError(StoreErrorKind.NOT_FOUND, f"{operation} {kind.value}: {e}") from e
    except (api_exceptions.PermissionDenied, api_exceptions.Forbidden) as e:
        raise StoreError(StoreErrorKind.PERMISSION_DENIED, f"{operation} {kind.value}: {e}") from e
    except (api_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError, OSError) as e:
        raise StoreError(StoreErrorKind.UNAVAILABLE, f"{operation} {kind.value}: {e}") from e


class LedgerStore:
    """
    Per-user CRUD over the four ledger collections.

    ``client`` is a Firestore AsyncClient (``firebase_admin.firestore_async``).
    A store built without a client reports every operation as unavailable,
    which is how a missing Firebase configuration surfaces.
    """

    def __init__(self, client=None):
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None

    def _collection(self, identity: Optional[str], kind: RecordKind):
        if not identity:
            raise StoreError(StoreErrorKind.UNAVAILABLE, "no signed-in identity")
        if self._client is None:
            logger.error("[LEDGER] Firestore is not configured")
            raise StoreError(StoreErrorKind.UNAVAILABLE, "Firestore is not configured")
        return self._client.collection("users", identity, kind.value)

    async def add(self, identity: Optional[str], kind: RecordKind, document: Dict[str, Any]) -> str:
        """Create a record and return its durable id."""
        collection = self._collection(identity, kind)
        with _translate_errors("add", kind):
            _, ref = await collection.add(document)
        logger.debug(f"[LEDGER] Added {kind.value}/{ref.id}")
        return ref.id

    async def list(self, identity: Optional[str], kind: RecordKind) -> List[Tuple[str, Dict[str, Any]]]:
        """Return ``(id, document)`` pairs, newest first."""
        collection = self._collection(identity, kind)
        query = collection.order_by("timestamp", direction=firestore.Query.DESCENDING)
        records = []
        with _translate_errors("list", kind):
            async for snapshot in query.stream():
                data = snapshot.to_dict() or {}
                if "timestamp" in data:
                    data["timestamp"] = _to_datetime(data["timestamp"])
                records.append((snapshot.id, data))
        return records

    async def delete(self, identity: Optional[str], kind: RecordKind, record_id: str) -> None:
        """Remove one record; raises NOT_FOUND if it is not in the user's collection."""
        ref = self._collection(identity, kind).document(record_id)
        with _translate_errors("delete", kind):
            snapshot = await ref.get()
            if not snapshot.exists:
                raise StoreError(StoreErrorKind.NOT_FOUND, f"{kind.value}/{record_id}")
            await ref.delete()
        logger.debug(f"[LEDGER] Deleted {kind.value}/{record_id}")

    async def update(
        self,
        identity: Optional[str],
        kind: RecordKind,
        record_id: str,
        fields: Dict[str, Any],
    ) -> None:
        """Replace only the supplied fields; ``None`` values are left untouched.

        Raises NOT_FOUND if the record is not in the user's collection.
        """
        ref = self._collection(identity, kind).document(record_id)
        changes = {key: value for key, value in fields.items() if value is not None}
        with _translate_errors("update", kind):
            if not changes:
                snapshot = await ref.get()
                if not snapshot.exists:
                    raise StoreError(StoreErrorKind.NOT_FOUND, f"{kind.value}/{record_id}")
                return
            await ref.update(changes)

    # Practice sessions

    async def add_practice_session(self, identity: Optional[str], session: PracticeSession) -> str:
        return await self.add(identity, RecordKind.PRACTICE_SESSIONS, session.to_document())

    async def list_practice_sessions(self, identity: Optional[str]) -> List[PracticeSession]:
        records = await self.list(identity, RecordKind.PRACTICE_SESSIONS)
        return _parse(records, PracticeSession.from_document, RecordKind.PRACTICE_SESSIONS)

    # Mood

    async def add_mood_entry(self, identity: Optional[str], entry: MoodEntry) -> str:
        return await self.add(identity, RecordKind.MOOD_ENTRIES, entry.to_document())

    async def list_mood_entries(self, identity: Optional[str]) -> List[MoodEntry]:
        records = await self.list(identity, RecordKind.MOOD_ENTRIES)
        return _parse(records, MoodEntry.from_document, RecordKind.MOOD_ENTRIES)

    async def delete_mood_entry(self, identity: Optional[str], entry_id: str) -> None:
        await self.delete(identity, RecordKind.MOOD_ENTRIES, entry_id)

    # Journal

    async def add_journal_entry(self, identity: Optional[str], entry: JournalEntry) -> str:
        return await self.add(identity, RecordKind.JOURNAL_ENTRIES, entry.to_document())

    async def list_journal_entries(self, identity: Optional[str]) -> List[JournalEntry]:
        records = await self.list(identity, RecordKind.JOURNAL_ENTRIES)
        return _parse(records, JournalEntry.from_document, RecordKind.JOURNAL_ENTRIES)

    async def delete_journal_entry(self, identity: Optional[str], entry_id: str) -> None:
        await self.delete(identity, RecordKind.JOURNAL_ENTRIES, entry_id)

    # Gratitude

    async def add_gratitude_entry(self, identity: Optional[str], entry: GratitudeEntry) -> str:
        return await self.add(identity, RecordKind.GRATITUDE_ENTRIES, entry.to_document())

    async def list_gratitude_entries(self, identity: Optional[str]) -> List[GratitudeEntry]:
        records = await self.list(identity, RecordKind.GRATITUDE_ENTRIES)
        return _parse(records, GratitudeEntry.from_document, RecordKind.GRATITUDE_ENTRIES)

    async def update_gratitude_entry(
        self,
        identity: Optional[str],
        entry_id: str,
        items: Optional[List[str]] = None,
        mood: Optional[int] = None,
        reflection: Optional[str] = None,
        date: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> None:
        await self.update(
            identity,
            RecordKind.GRATITUDE_ENTRIES,
            entry_id,
            {
                "items": items,
                "mood": mood,
                "reflection": reflection,
                "date": date,
                "timestamp": timestamp,
            },
        )

    async def delete_gratitude_entry(self, identity: Optional[str], entry_id: str) -> None:
        await self.delete(identity, RecordKind.GRATITUDE_ENTRIES, entry_id)
