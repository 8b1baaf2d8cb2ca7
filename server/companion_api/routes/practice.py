"""Practice statistics and session API routes."""
from fastapi import APIRouter, Depends

from wellness_companion import PracticeTracker, WellnessContext

from ..deps import get_context
from ..models.practice import (
    PracticeSessionCreate,
    PracticeSessionOut,
    PracticeStatsOut,
)

router = APIRouter(prefix="/api/practice", tags=["Practice"])


def _stats(tracker: PracticeTracker) -> PracticeStatsOut:
    stats = tracker.get_stats()
    return PracticeStatsOut(
        days_practicing=stats.days_practicing,
        total_sessions=stats.total_sessions,
        minutes_today=stats.minutes_today,
        loading=tracker.loading,
        available=tracker.last_error is None,
    )


@router.get("/stats", response_model=PracticeStatsOut)
async def get_practice_stats(ctx: WellnessContext = Depends(get_context)):
    """Days practicing, total sessions and minutes today."""
    return _stats(ctx.tracker)


@router.get("/recent", response_model=list[PracticeSessionOut])
async def get_recent_sessions(ctx: WellnessContext = Depends(get_context)):
    """The three most recent sessions, newest first."""
    return [PracticeSessionOut.model_validate(item) for item in ctx.tracker.describe_recent()]


@router.get("/sessions", response_model=list[PracticeSessionOut])
async def get_sessions(ctx: WellnessContext = Depends(get_context)):
    return [PracticeSessionOut.model_validate(s) for s in ctx.tracker.sessions]


@router.post("/sessions", response_model=PracticeSessionOut, status_code=201)
async def add_session(body: PracticeSessionCreate, ctx: WellnessContext = Depends(get_context)):
    """Record a completed session. The response is the provisional session."""
    session = await ctx.tracker.add_session(body.tool, body.tool_name, body.duration)
    return PracticeSessionOut.model_validate(session)


@router.post("/reload", response_model=PracticeStatsOut)
async def reload_sessions(ctx: WellnessContext = Depends(get_context)):
    await ctx.tracker.reload()
    return _stats(ctx.tracker)

