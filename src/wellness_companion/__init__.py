"""
Wellness Companion core.

Identity, the per-user ledger, practice aggregation, guided activities and
companion reply generation.
"""

from .context import WellnessContext, build_context
from .errors import (
    AuthError,
    GenerationErrorKind,
    GenerationServiceError,
    StoreError,
    StoreErrorKind,
    WellnessError,
)
from .identity import Identity, IdentityProvider
from .ledger import LedgerStore, RecordKind
from .practice import PracticeStats, PracticeTracker, TrackerState
from .records import PracticeSession, PracticeTool

__all__ = [
    "WellnessContext",
    "build_context",
    "AuthError",
    "GenerationErrorKind",
    "GenerationServiceError",
    "StoreError",
    "StoreErrorKind",
    "WellnessError",
    "Identity",
    "IdentityProvider",
    "LedgerStore",
    "RecordKind",
    "PracticeStats",
    "PracticeTracker",
    "TrackerState",
    "PracticeSession",
    "PracticeTool",
]
