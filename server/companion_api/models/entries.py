"""Mood, journal and gratitude entry models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MoodEntryIn(BaseModel):
    mood: int = Field(ge=1, le=5)
    energy: int = Field(ge=1, le=5)
    factors: list[str] = []
    notes: str = ""


class MoodEntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    date: str
    mood: int
    energy: int
    factors: list[str]
    notes: str
    timestamp: datetime


class JournalEntryIn(BaseModel):
    prompt: str = ""
    category: str = ""
    entry: str = Field(min_length=1)


class JournalEntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: Optional[str] = None
    date: str
    prompt: str
    category: str
    entry: str
    word_count: int = Field(serialization_alias="wordCount")
    timestamp: datetime


class GratitudeEntryIn(BaseModel):
    items: list[str] = Field(min_length=1)
    mood: int = Field(default=5, ge=1, le=5)
    reflection: str = ""


class GratitudeEntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    date: str
    items: list[str]
    mood: int
    reflection: str
    timestamp: datetime
