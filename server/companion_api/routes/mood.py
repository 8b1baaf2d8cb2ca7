"""Mood tracker API routes."""
from fastapi import APIRouter, Depends, HTTPException, Response

from wellness_companion import WellnessContext

from ..deps import get_context
from ..models.entries import MoodEntryIn, MoodEntryOut

router = APIRouter(prefix="/api/mood", tags=["Mood"])


@router.get("", response_model=list[MoodEntryOut])
async def get_mood_entries(ctx: WellnessContext = Depends(get_context)):
    """Mood check-ins, newest first. Empty when signed out or the ledger is unavailable."""
    entries = await ctx.activities.list_mood_entries()
    return [MoodEntryOut.model_validate(e) for e in entries]


@router.post("", response_model=MoodEntryOut, status_code=201)
async def create_mood_entry(body: MoodEntryIn, ctx: WellnessContext = Depends(get_context)):
    """Save a mood check-in; counts as a 2 minute practice session."""
    try:
        entry = await ctx.activities.record_mood(body.mood, body.energy, body.factors, body.notes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MoodEntryOut.model_validate(entry)


@router.delete("/{entry_id}", status_code=204)
async def delete_mood_entry(entry_id: str, ctx: WellnessContext = Depends(get_context)):
    await ctx.activities.delete_mood_entry(entry_id)
    return Response(status_code=204)
