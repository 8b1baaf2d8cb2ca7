"""Wellness Companion API - FastAPI application."""
