"""Repository exports."""

from .story_repo import StoryRepository

__all__ = [
    "StoryRepository",
]
