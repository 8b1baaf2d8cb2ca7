"""Wellness Companion API server."""
