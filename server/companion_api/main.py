"""Wellness Companion API - FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wellness_companion import AuthError, StoreError, WellnessContext, build_context
from wellness_companion.firebase import check_configuration

from .config import get_settings
from .deps import auth_error_handler, store_error_handler
from .routes import (
    auth,
    generation,
    gratitude,
    journal,
    mood,
    practice,
    support,
    tools,
)

log = logging.getLogger(__name__)

settings = get_settings()


def create_app(context: Optional[WellnessContext] = None) -> FastAPI:
    """
    Build the API.

    Without ``context`` the services are wired from settings at start-up and
    closed at shutdown. A given context is used as-is and left to the caller.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if context is not None:
            yield
            return

        ctx = build_context(
            firebase_api_key=settings.firebase_api_key,
            firebase_project_id=settings.firebase_project_id,
            firebase_credentials_path=settings.firebase_credentials_path,
            gemini_api_key=settings.gemini_api_key,
            gemini_model=settings.gemini_model,
            identity_timeout=settings.identity_timeout,
            timezone_name=settings.timezone,
        )
        app.state.context = ctx
        await ctx.start()
        log.info("[API] Wellness Companion API started")
        try:
            yield
        finally:
            await ctx.close()
            log.info("[API] Wellness Companion API stopped")

    app = FastAPI(
        title="Wellness Companion API",
        description="Practice tracking, journaling and companion chat for one signed-in user",
        version="1.0.0",
        lifespan=lifespan,
    )
    if context is not None:
        app.state.context = context

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)

    # Include routers
    app.include_router(auth.router)
    app.include_router(practice.router)
    app.include_router(tools.router)
    app.include_router(mood.router)
    app.include_router(journal.router)
    app.include_router(gratitude.router)
    app.include_router(support.router)
    app.include_router(generation.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for the API."""
        return {
            "status": "healthy",
            "service": "companion-api",
            "firebase": check_configuration(
                settings.firebase_api_key,
                settings.firebase_project_id,
                settings.firebase_credentials_path,
            ),
            "gemini": bool(settings.gemini_api_key),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.companion_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
