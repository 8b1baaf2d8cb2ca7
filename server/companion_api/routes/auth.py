"""Authentication API routes.

Errors are raised as AuthError and rendered by the app-level handler as
``{"detail": <sentence>, "code": <reason code>}``.
"""
from fastapi import APIRouter, Depends

from wellness_companion import WellnessContext

from ..deps import get_context
from ..models.auth import (
    FederatedSignInRequest,
    IdentityOut,
    RestoreSessionRequest,
    SessionStatus,
    SignInRequest,
    SignUpRequest,
)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _status(ctx: WellnessContext) -> SessionStatus:
    identity = ctx.identity.current
    return SessionStatus(
        ready=ctx.identity.ready,
        authenticated=identity is not None,
        user=IdentityOut.model_validate(identity) if identity else None,
    )


@router.get("/me", response_model=SessionStatus)
async def get_session(ctx: WellnessContext = Depends(get_context)):
    """Current identity, if any."""
    return _status(ctx)


@router.post("/signin", response_model=SessionStatus)
async def sign_in(body: SignInRequest, ctx: WellnessContext = Depends(get_context)):
    await ctx.identity.sign_in(body.email, body.password)
    return _status(ctx)


@router.post("/signup", response_model=SessionStatus)
async def sign_up(body: SignUpRequest, ctx: WellnessContext = Depends(get_context)):
    await ctx.identity.sign_up(body.email, body.password, body.name)
    return _status(ctx)


@router.post("/federated", response_model=SessionStatus)
async def federated_sign_in(body: FederatedSignInRequest, ctx: WellnessContext = Depends(get_context)):
    """Sign in with an ID token from a federated provider (Google by default)."""
    await ctx.identity.sign_in_with_federated_provider(body.id_token, body.provider_id)
    return _status(ctx)


@router.post("/restore", response_model=SessionStatus)
async def restore_session(body: RestoreSessionRequest, ctx: WellnessContext = Depends(get_context)):
    await ctx.identity.restore_session(body.id_token)
    return _status(ctx)


@router.post("/signout", response_model=SessionStatus)
async def sign_out(ctx: WellnessContext = Depends(get_context)):
    """
    Sign out. The local session is always cleared; a failed remote sign-out
    is still reported as an error.
    """
    await ctx.identity.sign_out()
    return _status(ctx)
