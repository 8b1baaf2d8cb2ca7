"""
Wellness activities.

Completion rules for each tool, and the entry CRUD used by the mood tracker,
journal and gratitude log. Completed activities are reported to the practice
tracker; entries are persisted through the ledger store.

Listing degrades to an empty list when the ledger is unavailable. Saving and
deleting raise, so the initiating request can show the failure.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from .catalog import get_meditation
from .errors import AuthError, StoreError
from .ledger import LedgerStore
from .practice import PracticeTracker
from .records import (
    GratitudeEntry,
    JournalEntry,
    MoodEntry,
    PracticeSession,
    PracticeTool,
    count_words,
)

logger = logging.getLogger(__name__)

MOOD_CHECK_IN_MINUTES = 2
JOURNAL_MINUTES = 5
GRATITUDE_MINUTES = 3


def _check_scale(name: str, value: int, low: int = 1, high: int = 5) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


class WellnessActivities:
    """Tool completions and entry bookkeeping for the signed-in user."""

    def __init__(self, ledger: LedgerStore, tracker: PracticeTracker):
        self.ledger = ledger
        self.tracker = tracker

    def _require_identity(self, action: str) -> str:
        identity = self.tracker.identity
        if identity is None:
            raise AuthError("auth/no-current-user", f"Please log in to save your {action}.")
        return identity

    def _today(self) -> str:
        return self.tracker.today().isoformat()

    # Guided practices

    async def complete_breathing(
        self,
        started_at: datetime,
        ended_at: datetime,
        cycles: int,
    ) -> Optional[PracticeSession]:
        """Record a breathing session; nothing is recorded before the first full cycle."""
        if cycles <= 0:
            logger.debug("[ACTIVITY] Breathing stopped before a full cycle, not recorded")
            return None
        elapsed = (ended_at - started_at).total_seconds()
        if elapsed < 0:
            raise ValueError("ended_at must not be before started_at")
        duration = round(elapsed / 60)
        return await self.tracker.add_session(PracticeTool.BREATHING, "Breathing Exercise", duration)

    async def complete_grounding(self, seconds_spent: float) -> PracticeSession:
        if seconds_spent < 0:
            raise ValueError("seconds_spent must be >= 0")
        duration = round(seconds_spent / 60)
        return await self.tracker.add_session(PracticeTool.GROUNDING, "5-4-3-2-1 Grounding", duration)

    async def complete_meditation(self, meditation_id: str) -> PracticeSession:
        meditation = get_meditation(meditation_id)
        if meditation is None:
            raise ValueError(f"Unknown meditation: {meditation_id}")
        return await self.tracker.add_session(PracticeTool.MEDITATION, meditation.title, meditation.duration)

    # Mood

    async def record_mood(
        self,
        mood: int,
        energy: int,
        factors: Optional[List[str]] = None,
        notes: str = "",
    ) -> MoodEntry:
        identity = self._require_identity("mood entry")
        _check_scale("mood", mood)
        _check_scale("energy", energy)

        entry = MoodEntry(
            date=self._today(),
            mood=mood,
            energy=energy,
            factors=list(factors or []),
            notes=notes,
        )
        try:
            entry_id = await self.ledger.add_mood_entry(identity, entry)
        except StoreError as e:
            logger.error(f"[ACTIVITY] Error adding mood entry: {e}")
            raise

        await self.tracker.add_session(PracticeTool.MOOD, "Mood Check-in", MOOD_CHECK_IN_MINUTES)
        return replace(entry, id=entry_id)

    async def list_mood_entries(self) -> List[MoodEntry]:
        identity = self.tracker.identity
        if identity is None:
            return []
        try:
            return await self.ledger.list_mood_entries(identity)
        except StoreError as e:
            logger.warning(f"[ACTIVITY] Error loading mood entries: {e}")
            return []

    async def delete_mood_entry(self, entry_id: str) -> None:
        identity = self._require_identity("mood entry")
        await self.ledger.delete_mood_entry(identity, entry_id)

    # Journal

    async def save_journal_entry(self, prompt: str, category: str, text: str) -> JournalEntry:
        identity = self._require_identity("journal entry")
        if not text.strip():
            raise ValueError("Journal entry is empty")

        entry = JournalEntry(
            date=self._today(),
            prompt=prompt,
            category=category,
            entry=text,
            word_count=count_words(text),
        )
        try:
            entry_id = await self.ledger.add_journal_entry(identity, entry)
        except StoreError as e:
            logger.error(f"[ACTIVITY] Error adding journal entry: {e}")
            raise

        await self.tracker.add_session(PracticeTool.JOURNAL, "Guided Journaling", JOURNAL_MINUTES)
        return replace(entry, id=entry_id)

    async def list_journal_entries(self) -> List[JournalEntry]:
        identity = self.tracker.identity
        if identity is None:
            return []
        try:
            return await self.ledger.list_journal_entries(identity)
        except StoreError as e:
            logger.warning(f"[ACTIVITY] Error loading journal entries: {e}")
            return []

    async def delete_journal_entry(self, entry_id: str) -> None:
        identity = self._require_identity("journal entry")
        await self.ledger.delete_journal_entry(identity, entry_id)

    # Gratitude

    async def save_gratitude_entry(
        self,
        items: List[str],
        mood: int = 5,
        reflection: str = "",
        entry_id: Optional[str] = None,
    ) -> GratitudeEntry:
        """
        Create a gratitude entry, or update ``entry_id`` when given.

        Only new entries count as a practice session.
        """
        identity = self._require_identity("gratitude entry")
        kept = [item.strip() for item in items if item.strip()]
        if not kept:
            raise ValueError("Please add at least one thing you're grateful for.")
        _check_scale("mood", mood)

        entry = GratitudeEntry(
            date=self._today(),
            items=kept,
            mood=mood,
            reflection=reflection,
        )

        try:
            if entry_id:
                await self.ledger.update_gratitude_entry(
                    identity,
                    entry_id,
                    items=entry.items,
                    mood=entry.mood,
                    reflection=entry.reflection,
                    date=entry.date,
                    timestamp=entry.timestamp,
                )
                return replace(entry, id=entry_id)

            new_id = await self.ledger.add_gratitude_entry(identity, entry)
        except StoreError as e:
            logger.error(f"[ACTIVITY] Error saving gratitude entry: {e}")
            raise

        await self.tracker.add_session(PracticeTool.GRATITUDE, "Gratitude Practice", GRATITUDE_MINUTES)
        return replace(entry, id=new_id)

    async def list_gratitude_entries(self) -> List[GratitudeEntry]:
        identity = self.tracker.identity
        if identity is None:
            return []
        try:
            return await self.ledger.list_gratitude_entries(identity)
        except StoreError as e:
            logger.warning(f"[ACTIVITY] Error loading gratitude entries: {e}")
            return []

    async def delete_gratitude_entry(self, entry_id: str) -> None:
        identity = self._require_identity("gratitude entry")
        await self.ledger.delete_gratitude_entry(identity, entry_id)
