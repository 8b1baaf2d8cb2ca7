"""Guided practice tool API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from wellness_companion import WellnessContext
from wellness_companion.catalog import catalog_dict

from ..deps import get_context
from ..models.practice import (
    BreathingCompletion,
    GroundingCompletion,
    MeditationCompletion,
    PracticeSessionOut,
)

router = APIRouter(prefix="/api/tools", tags=["Tools"])


@router.get("/catalog")
async def get_catalog():
    """Journal prompts, meditations, grounding steps, breathing phases and mood scales."""
    return catalog_dict()


@router.post("/breathing/complete", response_model=Optional[PracticeSessionOut])
async def complete_breathing(body: BreathingCompletion, ctx: WellnessContext = Depends(get_context)):
    """Returns null when no full breathing cycle was completed."""
    try:
        session = await ctx.activities.complete_breathing(body.started_at, body.ended_at, body.cycles)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PracticeSessionOut.model_validate(session) if session else None


@router.post("/grounding/complete", response_model=PracticeSessionOut)
async def complete_grounding(body: GroundingCompletion, ctx: WellnessContext = Depends(get_context)):
    session = await ctx.activities.complete_grounding(body.seconds_spent)
    return PracticeSessionOut.model_validate(session)


@router.post("/meditation/complete", response_model=PracticeSessionOut)
async def complete_meditation(body: MeditationCompletion, ctx: WellnessContext = Depends(get_context)):
    try:
        session = await ctx.activities.complete_meditation(body.meditation_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return PracticeSessionOut.model_validate(session)
