"""Practice session data models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wellness_companion.records import PracticeTool


class PracticeSessionOut(BaseModel):
    """A cached practice session."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    tool: PracticeTool
    tool_name: str = Field(serialization_alias="toolName")
    duration: int
    timestamp: datetime
    completed: bool
    provisional: bool = False
    time_ago: Optional[str] = Field(default=None, serialization_alias="timeAgo")


class PracticeSessionCreate(BaseModel):
    """A completed session reported by a tool."""

    model_config = ConfigDict(populate_by_name=True)

    tool: PracticeTool
    tool_name: str = Field(min_length=1, validation_alias="toolName")
    duration: int = Field(ge=0)


class PracticeStatsOut(BaseModel):
    """Dashboard statistics."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    days_practicing: int = Field(serialization_alias="daysPracticing")
    total_sessions: int = Field(serialization_alias="totalSessions")
    minutes_today: int = Field(serialization_alias="minutesToday")
    loading: bool = False
    available: bool = True


class BreathingCompletion(BaseModel):
    started_at: datetime
    ended_at: datetime
    cycles: int = Field(ge=0)


class GroundingCompletion(BaseModel):
    seconds_spent: float = Field(ge=0)


class MeditationCompletion(BaseModel):
    meditation_id: str
