"""
Application context.

Built once at process start and passed to every component that needs the
identity, the ledger or the practice tracker.
"""

import logging
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from .activities import WellnessActivities
from .firebase import firestore_client, initialize_firebase
from .generation import DEFAULT_MODEL, GenerationService
from .identity import FirebaseAuthClient, Identity, IdentityProvider
from .ledger import LedgerStore
from .practice import PracticeTracker

logger = logging.getLogger(__name__)


@dataclass
class WellnessContext:
    """Shared services for one companion process."""

    identity: IdentityProvider
    ledger: LedgerStore
    tracker: PracticeTracker
    activities: WellnessActivities
    generation: GenerationService
    _unsubscribe: List[Callable[[], None]] = field(default_factory=list)

    def __post_init__(self):
        async def follow_identity(identity: Optional[Identity]) -> None:
            await self.tracker.handle_identity_change(identity.uid if identity else None)

        self._unsubscribe.append(self.identity.subscribe(follow_identity))

    async def start(self) -> None:
        await self.identity.start()

    async def close(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe.clear()
        await self.identity.client.close()


def build_context(
    firebase_api_key: Optional[str] = None,
    firebase_project_id: Optional[str] = None,
    firebase_credentials_path: Optional[str] = None,
    gemini_api_key: Optional[str] = None,
    gemini_model: str = DEFAULT_MODEL,
    identity_timeout: float = 10.0,
    timezone_name: Optional[str] = None,
) -> WellnessContext:
    """Wire the Firebase-backed services together."""
    app = initialize_firebase(firebase_project_id, firebase_credentials_path)
    ledger = LedgerStore(firestore_client(app))

    tz: Optional[tzinfo] = ZoneInfo(timezone_name) if timezone_name else None
    tracker = PracticeTracker(ledger, tz=tz)

    if not gemini_api_key:
        logger.error("[GEMINI] Gemini API key not configured, chat replies disabled")

    return WellnessContext(
        identity=IdentityProvider(FirebaseAuthClient(firebase_api_key, app=app, timeout=identity_timeout)),
        ledger=ledger,
        tracker=tracker,
        activities=WellnessActivities(ledger, tracker),
        generation=GenerationService(gemini_api_key, model=gemini_model),
    )
