"""Request dependencies and error translation."""
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from wellness_companion import AuthError, StoreError, StoreErrorKind, WellnessContext

log = logging.getLogger(__name__)

AUTH_STATUS_CODES = {
    "auth/invalid-email": 400,
    "auth/weak-password": 400,
    "auth/email-already-in-use": 409,
    "auth/user-disabled": 403,
    "auth/operation-not-allowed": 403,
    "auth/too-many-requests": 429,
    "auth/network-request-failed": 503,
    "auth/configuration-not-found": 503,
}

STORE_STATUS_CODES = {
    StoreErrorKind.UNAVAILABLE: 503,
    StoreErrorKind.NOT_FOUND: 404,
    StoreErrorKind.PERMISSION_DENIED: 403,
}

STORE_MESSAGES = {
    StoreErrorKind.UNAVAILABLE: "Your data could not be saved right now. Please try again.",
    StoreErrorKind.NOT_FOUND: "Entry not found.",
    StoreErrorKind.PERMISSION_DENIED: "You do not have access to this entry.",
}


def get_context(request: Request) -> WellnessContext:
    """The context built at start-up."""
    return request.app.state.context


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    status_code = AUTH_STATUS_CODES.get(exc.code, 401)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.user_message, "code": exc.code},
    )


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    log.error(f"[API] {request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=STORE_STATUS_CODES[exc.kind],
        content={"detail": STORE_MESSAGES[exc.kind], "code": exc.kind.value},
    )
