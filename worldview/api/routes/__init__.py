"""API routers."""

from . import cache, health, location, research

__all__ = ["cache", "health", "location", "research"]
