"""
Error taxonomy for the wellness companion.

Every failure that crosses a component boundary is one of:
- AuthError: identity provider failures, keyed by a Firebase-style reason code
- StoreError: ledger store failures (unavailable, not found, permission denied)
- GenerationServiceError: chat / emoji generation failures with an HTTP status
"""

from enum import Enum
from typing import Optional

DEFAULT_AUTH_MESSAGE = "An error occurred. Please try again."

# Reason code -> sentence shown to the user on the form that triggered it
AUTH_ERROR_MESSAGES = {
    "auth/user-not-found": "No account found with this email address.",
    "auth/wrong-password": "Incorrect password.",
    "auth/invalid-credential": "Incorrect email or password.",
    "auth/invalid-email": "Invalid email address.",
    "auth/user-disabled": "This account has been disabled.",
    "auth/too-many-requests": "Too many failed attempts. Please try again later.",
    "auth/email-already-in-use": "An account with this email already exists.",
    "auth/weak-password": "Password is too weak. Please choose a stronger password.",
    "auth/operation-not-allowed": "Email/password accounts are not enabled.",
    "auth/network-request-failed": "Network error. Please check your connection and try again.",
    "auth/configuration-not-found": "Sign-in is not configured. Please contact support.",
    "auth/invalid-id-token": "Your session has expired. Please sign in again.",
    "auth/no-current-user": "Please log in to continue.",
}


def auth_error_message(code: Optional[str]) -> str:
    """Map an auth reason code to a short human-readable sentence."""
    return AUTH_ERROR_MESSAGES.get(code or "", DEFAULT_AUTH_MESSAGE)


class WellnessError(Exception):
    """Base class for all companion errors."""


class AuthError(WellnessError):
    """Failure reported by the identity provider."""

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        self.user_message = message or auth_error_message(code)
        super().__init__(f"{code}: {self.user_message}")


class StoreErrorKind(str, Enum):
    """Why a ledger store operation failed."""

    UNAVAILABLE = "unavailable"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"


class StoreError(WellnessError):
    """Failure reported by the remote ledger store."""

    def __init__(self, kind: StoreErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)


class GenerationErrorKind(str, Enum):
    """Why a generation request failed."""

    UNCONFIGURED = "unconfigured"
    INVALID_INPUT = "invalid_input"
    UPSTREAM_AUTH = "upstream_auth"
    UPSTREAM_QUOTA = "upstream_quota"
    UNKNOWN = "unknown"


GENERATION_STATUS_CODES = {
    GenerationErrorKind.UNCONFIGURED: 500,
    GenerationErrorKind.INVALID_INPUT: 400,
    GenerationErrorKind.UPSTREAM_AUTH: 401,
    GenerationErrorKind.UPSTREAM_QUOTA: 429,
    GenerationErrorKind.UNKNOWN: 500,
}


class GenerationServiceError(WellnessError):
    """Failure of the chat / emoji generation contract."""

    def __init__(self, kind: GenerationErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return GENERATION_STATUS_CODES[self.kind]
