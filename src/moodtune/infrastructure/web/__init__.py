"""HTTP API (FastAPI)."""

from moodtune.infrastructure.web.app import create_app

__all__ = ["create_app"]
