"""Guided journaling API routes."""
from fastapi import APIRouter, Depends, HTTPException, Response

from wellness_companion import WellnessContext

from ..deps import get_context
from ..models.entries import JournalEntryIn, JournalEntryOut

router = APIRouter(prefix="/api/journal", tags=["Journal"])


@router.get("", response_model=list[JournalEntryOut])
async def get_journal_entries(ctx: WellnessContext = Depends(get_context)):
    entries = await ctx.activities.list_journal_entries()
    return [JournalEntryOut.model_validate(e) for e in entries]


@router.post("", response_model=JournalEntryOut, status_code=201)
async def create_journal_entry(body: JournalEntryIn, ctx: WellnessContext = Depends(get_context)):
    """Save a journal entry; counts as a 5 minute practice session."""
    try:
        entry = await ctx.activities.save_journal_entry(body.prompt, body.category, body.entry)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return JournalEntryOut.model_validate(entry)


@router.delete("/{entry_id}", status_code=204)
async def delete_journal_entry(entry_id: str, ctx: WellnessContext = Depends(get_context)):
    await ctx.activities.delete_journal_entry(entry_id)
    return Response(status_code=204)
