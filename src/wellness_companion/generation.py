"""
Companion reply generation.

Two request types:
- chat: the message is wrapped in the companion persona prompt and sent to Gemini
- emoji: one of five canned replies keyed by emoji; Gemini is never called
"""

import logging
from enum import Enum
from typing import Optional

from google import genai
from google.genai import errors as genai_errors

from .errors import GenerationErrorKind, GenerationServiceError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"


class GenerationType(str, Enum):
    CHAT = "chat"
    EMOJI = "emoji"


EMOJI_RESPONSES = {
    "😊": "Good to hear you're feeling good! It's wonderful to see positive energy. Keep spreading that joy!",
    "😐": "It's okay to feel neutral sometimes. Every emotion is valid. How about we chat to explore what's on your mind?",
    "😟": "I can sense you might be feeling a bit worried. It's completely normal to feel this way. Would you like to talk about what's on your mind?",
    "😢": "It's alright to feel low sometimes. Your feelings are valid and you're not alone. Chat with us to feel better, maybe?",
    "😡": "I understand you're feeling frustrated or angry. These emotions are natural. Let's talk through what's bothering you.",
}

DEFAULT_EMOJI_RESPONSE = "Thank you for sharing how you feel. We're here to listen and support you."

CHAT_PROMPT = """You are DilSe AI, a compassionate mental health companion for students and young adults. You provide empathetic, supportive responses that help users explore their feelings without judgment. Keep responses concise (1-2 sentences), warm, and encouraging.

User message: "{message}"

Respond as DilSe AI:"""


def emoji_response(message: str) -> str:
    return EMOJI_RESPONSES.get(message, DEFAULT_EMOJI_RESPONSE)


def _classify_upstream_error(error: Exception) -> GenerationServiceError:
    text = str(error)
    code = getattr(error, "code", None) if isinstance(error, genai_errors.APIError) else None

    if code in (401, 403) or "API key" in text:
        return GenerationServiceError(GenerationErrorKind.UPSTREAM_AUTH, "Invalid API key")
    if code == 429 or "quota" in text.lower():
        return GenerationServiceError(GenerationErrorKind.UPSTREAM_QUOTA, "API quota exceeded")
    return GenerationServiceError(GenerationErrorKind.UNKNOWN, "Failed to generate response")


class GenerationService:
    """Answers chat and emoji requests for the companion."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        client: Optional[genai.Client] = None,
    ):
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def respond(self, message: Optional[str], request_type: Optional[str]) -> str:
        """
        Produce a reply for the given message.

        Raises:
            GenerationServiceError: with the kind that determines the HTTP status
        """
        logger.info(f"[GEMINI] Received request: type={request_type}, has_api_key={self.configured}")

        if not self.configured:
            logger.error("[GEMINI] Gemini API key not configured")
            raise GenerationServiceError(
                GenerationErrorKind.UNCONFIGURED, "Gemini API key not configured"
            )

        if not message or not request_type:
            logger.error("[GEMINI] Missing required fields")
            raise GenerationServiceError(
                GenerationErrorKind.INVALID_INPUT, "Missing required fields: message and type"
            )

        if request_type == GenerationType.EMOJI.value:
            return emoji_response(message)

        if request_type != GenerationType.CHAT.value:
            logger.error(f"[GEMINI] Invalid type: {request_type}")
            raise GenerationServiceError(
                GenerationErrorKind.INVALID_INPUT, 'Invalid type. Must be "chat" or "emoji"'
            )

        prompt = CHAT_PROMPT.format(message=message)
        try:
            response = await self._get_client().aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            logger.error(f"[GEMINI] API error: {e}")
            raise _classify_upstream_error(e) from e

        text = response.text or ""
        logger.debug(f"[GEMINI] Response: {text}")
        return text
