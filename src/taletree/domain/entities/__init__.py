"""Runtime entity exports."""

from .hero import DEFAULT_HERO_HEALTH, Hero

__all__ = [
    "DEFAULT_HERO_HEALTH",
    "Hero",
]
