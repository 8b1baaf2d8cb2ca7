"""Companion chat generation route.

Contract: ``{message, type}`` in, ``{response}`` or ``{error}`` out.
"""
import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from wellness_companion import GenerationServiceError, WellnessContext

from ..deps import get_context
from ..models.generation import GenerationRequest, GenerationResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Companion"])


@router.post("/gemini", response_model=GenerationResponse)
async def generate_reply(request: Request, ctx: WellnessContext = Depends(get_context)):
    """Chat reply from Gemini, or a canned reply for an emoji check-in."""
    try:
        body = GenerationRequest.model_validate(await request.json())
    except (json.JSONDecodeError, ValidationError):
        log.error("[GEMINI] Malformed request body")
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required fields: message and type"},
        )

    try:
        text = await ctx.generation.respond(body.message, body.type)
    except GenerationServiceError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})

    return GenerationResponse(response=text)
