"""API route modules."""
from .auth import router as auth_router
from .practice import router as practice_router
from .tools import router as tools_router
from .mood import router as mood_router
from .journal import router as journal_router
from .gratitude import router as gratitude_router
from .support import router as support_router
from .generation import router as generation_router

__all__ = [
    "auth_router",
    "practice_router",
    "tools_router",
    "mood_router",
    "journal_router",
    "gratitude_router",
    "support_router",
    "generation_router",
]
