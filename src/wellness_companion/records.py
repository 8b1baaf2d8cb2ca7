"""
Ledger record types.

Documents are stored with the camelCase field names the web client has always
written, so records created by either client stay readable.
"""

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

PROVISIONAL_ID_PREFIX = "local-"


class PracticeTool(str, Enum):
    """Wellness tools that report practice sessions."""

    BREATHING = "breathing"
    MOOD = "mood"
    JOURNAL = "journal"
    GROUNDING = "grounding"
    MEDITATION = "meditation"
    GRATITUDE = "gratitude"
    SUPPORT = "support"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_provisional_id() -> str:
    """Locally unique id used until the next reload replaces the record."""
    return f"{PROVISIONAL_ID_PREFIX}{uuid.uuid4().hex}"


def count_words(text: str) -> int:
    return len([word for word in re.split(r"\s+", text.strip()) if word])


@dataclass(frozen=True)
class PracticeSession:
    """One completed use of a wellness tool."""

    id: str
    tool: PracticeTool
    tool_name: str
    duration: int  # minutes
    timestamp: datetime
    completed: bool = True
    provisional: bool = False  # True until confirmed by a reload

    def __post_init__(self):
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0, got {self.duration}")

    def to_document(self) -> Dict[str, Any]:
        return {
            "tool": self.tool.value,
            "toolName": self.tool_name,
            "duration": self.duration,
            "timestamp": self.timestamp,
            "completed": self.completed,
        }

    @classmethod
    def from_document(cls, record_id: str, data: Dict[str, Any]) -> "PracticeSession":
        return cls(
            id=record_id,
            tool=PracticeTool(data["tool"]),
            tool_name=data.get("toolName", ""),
            duration=int(data.get("duration") or 0),
            timestamp=data["timestamp"],
            completed=bool(data.get("completed", True)),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "tool": self.tool.value,
            "tool_name": self.tool_name,
            "duration": self.duration,
            "timestamp": self.timestamp.isoformat(),
            "completed": self.completed,
            "provisional": self.provisional,
        }


@dataclass
class MoodEntry:
    """Mood check-in."""

    date: str
    mood: int
    energy: int
    factors: List[str] = field(default_factory=list)
    notes: str = ""
    timestamp: datetime = field(default_factory=utcnow)
    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "mood": self.mood,
            "energy": self.energy,
            "factors": list(self.factors),
            "notes": self.notes,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_document(cls, record_id: str, data: Dict[str, Any]) -> "MoodEntry":
        return cls(
            id=record_id,
            date=data.get("date", ""),
            mood=int(data.get("mood") or 0),
            energy=int(data.get("energy") or 0),
            factors=list(data.get("factors") or []),
            notes=data.get("notes") or "",
            timestamp=data["timestamp"],
        )


@dataclass
class JournalEntry:
    """Guided journaling entry."""

    date: str
    prompt: str
    category: str
    entry: str
    word_count: int = 0
    timestamp: datetime = field(default_factory=utcnow)
    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "prompt": self.prompt,
            "category": self.category,
            "entry": self.entry,
            "wordCount": self.word_count,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_document(cls, record_id: str, data: Dict[str, Any]) -> "JournalEntry":
        return cls(
            id=record_id,
            date=data.get("date", ""),
            prompt=data.get("prompt") or "",
            category=data.get("category") or "",
            entry=data.get("entry") or "",
            word_count=int(data.get("wordCount") or 0),
            timestamp=data["timestamp"],
        )


@dataclass
class GratitudeEntry:
    """Gratitude log entry."""

    date: str
    items: List[str]
    mood: int = 5
    reflection: str = ""
    timestamp: datetime = field(default_factory=utcnow)
    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "items": list(self.items),
            "mood": self.mood,
            "reflection": self.reflection,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_document(cls, record_id: str, data: Dict[str, Any]) -> "GratitudeEntry":
        return cls(
            id=record_id,
            date=data.get("date", ""),
            items=list(data.get("items") or []),
            mood=int(data.get("mood") or 0),
            reflection=data.get("reflection") or "",
            timestamp=data["timestamp"],
        )
