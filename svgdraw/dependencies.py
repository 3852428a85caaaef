"""FastAPI dependency injection."""

from __future__ import annotations

from svgdraw.config import settings


def get_settings():
    return settings
