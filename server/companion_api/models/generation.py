"""Generation contract models."""
from typing import Optional

from pydantic import BaseModel


class GenerationRequest(BaseModel):
    """Both fields are optional here so missing ones produce the contract's 400."""

    message: Optional[str] = None
    type: Optional[str] = None


class GenerationResponse(BaseModel):
    response: str


class GenerationFailure(BaseModel):
    error: str
