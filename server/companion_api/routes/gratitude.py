"""Gratitude log API routes."""
from fastapi import APIRouter, Depends, HTTPException, Response

from wellness_companion import WellnessContext

from ..deps import get_context
from ..models.entries import GratitudeEntryIn, GratitudeEntryOut

router = APIRouter(prefix="/api/gratitude", tags=["Gratitude"])


@router.get("", response_model=list[GratitudeEntryOut])
async def get_gratitude_entries(ctx: WellnessContext = Depends(get_context)):
    entries = await ctx.activities.list_gratitude_entries()
    return [GratitudeEntryOut.model_validate(e) for e in entries]


@router.post("", response_model=GratitudeEntryOut, status_code=201)
async def create_gratitude_entry(body: GratitudeEntryIn, ctx: WellnessContext = Depends(get_context)):
    """Save a new gratitude entry; counts as a 3 minute practice session."""
    try:
        entry = await ctx.activities.save_gratitude_entry(body.items, body.mood, body.reflection)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GratitudeEntryOut.model_validate(entry)


@router.patch("/{entry_id}", response_model=GratitudeEntryOut)
async def update_gratitude_entry(
    entry_id: str,
    body: GratitudeEntryIn,
    ctx: WellnessContext = Depends(get_context),
):
    """Edit an existing entry. Edits are not practice sessions."""
    try:
        entry = await ctx.activities.save_gratitude_entry(
            body.items, body.mood, body.reflection, entry_id=entry_id
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GratitudeEntryOut.model_validate(entry)


@router.delete("/{entry_id}", status_code=204)
async def delete_gratitude_entry(entry_id: str, ctx: WellnessContext = Depends(get_context)):
    await ctx.activities.delete_gratitude_entry(entry_id)
    return Response(status_code=204)
