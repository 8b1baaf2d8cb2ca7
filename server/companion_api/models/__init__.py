"""Pydantic models for companion API requests and responses."""
from .practice import (
    PracticeSessionOut,
    PracticeSessionCreate,
    PracticeStatsOut,
    BreathingCompletion,
    GroundingCompletion,
    MeditationCompletion,
)
from .entries import (
    MoodEntryIn,
    MoodEntryOut,
    JournalEntryIn,
    JournalEntryOut,
    GratitudeEntryIn,
    GratitudeEntryOut,
)
from .auth import (
    SignInRequest,
    SignUpRequest,
    FederatedSignInRequest,
    RestoreSessionRequest,
    IdentityOut,
    SessionStatus,
)
from .support import SupportCategoryOut, ContactRequestIn, ContactRequestAck
from .generation import GenerationRequest, GenerationResponse, GenerationFailure

__all__ = [
    "PracticeSessionOut",
    "PracticeSessionCreate",
    "PracticeStatsOut",
    "BreathingCompletion",
    "GroundingCompletion",
    "MeditationCompletion",
    "MoodEntryIn",
    "MoodEntryOut",
    "JournalEntryIn",
    "JournalEntryOut",
    "GratitudeEntryIn",
    "GratitudeEntryOut",
    "SignInRequest",
    "SignUpRequest",
    "FederatedSignInRequest",
    "RestoreSessionRequest",
    "IdentityOut",
    "SessionStatus",
    "SupportCategoryOut",
    "ContactRequestIn",
    "ContactRequestAck",
    "GenerationRequest",
    "GenerationResponse",
    "GenerationFailure",
]
