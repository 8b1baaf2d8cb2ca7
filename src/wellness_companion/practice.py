"""
Practice Aggregation Module.

Keeps the signed-in user's practice sessions in memory and derives the
dashboard statistics from them:
- days practicing (distinct local calendar dates)
- total sessions
- minutes practiced today
- the three most recent sessions

New sessions are applied optimistically: a provisional copy goes to the front
of the cache before the remote write is awaited, and stays there until the
next full reload reconciles the cache with the ledger.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from enum import Enum
from typing import Callable, Dict, List, Optional, Set, Union

from .errors import AuthError, StoreError
from .ledger import LedgerStore
from .records import PracticeSession, PracticeTool, new_provisional_id, utcnow

logger = logging.getLogger(__name__)


class TrackerState(str, Enum):
    """Whether the tracker is bound to a signed-in identity."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class PracticeStats:
    """Statistics derived from the cached sessions."""

    days_practicing: int = 0
    total_sessions: int = 0
    minutes_today: int = 0

    def to_dict(self) -> dict:
        return {
            "days_practicing": self.days_practicing,
            "total_sessions": self.total_sessions,
            "minutes_today": self.minutes_today,
        }


def describe_elapsed(timestamp: datetime, now: Optional[datetime] = None) -> str:
    """Human label for how long ago a session happened."""
    now = now or utcnow()
    hours = int((now - timestamp).total_seconds() // 3600)
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours} hours ago"
    days = hours // 24
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"


class PracticeTracker:
    """
    In-memory ledger of practice sessions for the current identity.

    The tracker follows identity changes: a new identity clears the cache and
    reloads it from the ledger store, absence clears it immediately. Statistics
    and the recent-activity view are recomputed from the cache on every call.
    """

    RECENT_LIMIT = 3

    def __init__(
        self,
        store: LedgerStore,
        clock: Optional[Callable[[], datetime]] = None,
        tz: Optional[tzinfo] = None,
    ):
        """
        Initialize the tracker.

        Args:
            store: Ledger store used for durable reads and writes
            clock: Returns the current time (timezone-aware); defaults to UTC now
            tz: Timezone that defines calendar days; defaults to the system zone
        """
        self.store = store
        self._clock = clock or utcnow
        self.tz = tz

        self._identity: Optional[str] = None
        self._sessions: List[PracticeSession] = []
        # provisional id -> durable id, filled in as remote writes complete
        self._confirmed: Dict[str, str] = {}
        # provisional ids whose remote write failed
        self._failed: Set[str] = set()

        self._identity_epoch = 0
        self._load_token = 0
        self.loading = False
        self.last_error: Optional[StoreError] = None

    @property
    def identity(self) -> Optional[str]:
        return self._identity

    @property
    def state(self) -> TrackerState:
        if self._identity is None:
            return TrackerState.UNAUTHENTICATED
        return TrackerState.AUTHENTICATED

    @property
    def sessions(self) -> List[PracticeSession]:
        """Snapshot of the cache, newest first."""
        return list(self._sessions)

    def _clear(self) -> None:
        self._sessions = []
        self._confirmed.clear()
        self._failed.clear()
        self.last_error = None

    async def handle_identity_change(self, identity: Optional[str]) -> None:
        """React to an identity notification from the identity provider."""
        self._identity_epoch += 1
        self._identity = identity
        self._clear()

        if identity is None:
            self._load_token += 1
            self.loading = False
            logger.info("[PRACTICE] Signed out, cleared session cache")
            return

        logger.info("[PRACTICE] Identity changed, loading practice sessions")
        await self.reload()

    async def reload(self) -> None:
        """
        Replace the cache with the ledger's sessions for the current identity.

        Provisional sessions stay in front unless their durable copy is part
        of the loaded list. A session whose write had already failed when the
        reload started is dropped; writes still pending are kept. A list
        failure leaves the cache as it was and records ``last_error``.
        """
        identity = self._identity
        if identity is None:
            return

        self._load_token += 1
        token = self._load_token
        failed_before = set(self._failed)
        self.last_error = None
        self.loading = True

        try:
            loaded = await self.store.list_practice_sessions(identity)
        except StoreError as e:
            if token == self._load_token:
                self.loading = False
                self.last_error = e
            logger.warning(f"[PRACTICE] Could not load practice sessions: {e}")
            return

        if token != self._load_token or identity != self._identity:
            logger.debug("[PRACTICE] Discarding stale reload result")
            return

        loaded_ids = {session.id for session in loaded}
        pending = [
            session for session in self._sessions
            if session.provisional
            and session.id not in failed_before
            and self._confirmed.get(session.id) not in loaded_ids
        ]
        self._failed -= failed_before
        self._confirmed = {
            provisional_id: durable_id
            for provisional_id, durable_id in self._confirmed.items()
            if durable_id not in loaded_ids
        }
        self._sessions = pending + list(loaded)
        self.loading = False
        logger.info(f"[PRACTICE] Loaded {len(loaded)} practice sessions")

    async def add_session(
        self,
        tool: Union[PracticeTool, str],
        tool_name: str,
        duration: int,
    ) -> PracticeSession:
        """
        Record a completed practice session.

        The provisional session is visible to ``get_stats`` before the remote
        write is awaited. A failed write is logged and the provisional session
        stays in the cache until the next reload.

        Raises:
            AuthError: if no identity is signed in
            ValueError: if duration is negative
        """
        identity = self._identity
        if identity is None:
            logger.error("[PRACTICE] No user logged in, session not recorded")
            raise AuthError("auth/no-current-user", "Please log in to track your practice.")

        session = PracticeSession(
            id=new_provisional_id(),
            tool=PracticeTool(tool),
            tool_name=tool_name,
            duration=int(duration),
            timestamp=self._clock(),
            completed=True,
            provisional=True,
        )
        self._sessions.insert(0, session)
        epoch = self._identity_epoch

        try:
            durable_id = await self.store.add_practice_session(identity, session)
        except StoreError as e:
            logger.error(f"[PRACTICE] Error adding practice session ({session.tool.value}): {e}")
            if epoch == self._identity_epoch:
                self._failed.add(session.id)
            return session

        if epoch == self._identity_epoch:
            self._confirmed[session.id] = durable_id
        logger.info(
            f"[PRACTICE] Recorded {session.tool.value} session "
            f"({session.duration} min) as {durable_id}"
        )
        return session

    def _local_date(self, moment: datetime) -> date:
        if moment.tzinfo is None:
            return moment.date()
        return moment.astimezone(self.tz).date()

    def today(self) -> date:
        return self._local_date(self._clock())

    def get_stats(self) -> PracticeStats:
        """Derive statistics from the current cache."""
        today = self.today()
        days = set()
        minutes_today = 0
        for session in self._sessions:
            day = self._local_date(session.timestamp)
            days.add(day)
            if day == today:
                minutes_today += session.duration

        return PracticeStats(
            days_practicing=len(days),
            total_sessions=len(self._sessions),
            minutes_today=minutes_today,
        )

    def get_recent_sessions(self, limit: int = RECENT_LIMIT) -> List[PracticeSession]:
        """Most recent sessions, newest first."""
        return self._sessions[:max(limit, 0)]

    def describe_recent(self) -> List[dict]:
        """Recent sessions with an elapsed-time label for the dashboard."""
        now = self._clock()
        return [
            {**session.to_dict(), "time_ago": describe_elapsed(session.timestamp, now)}
            for session in self.get_recent_sessions()
        ]
