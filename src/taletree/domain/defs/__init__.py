"""Domain definition exports."""

from .story_def import StoryNode, choice_index, choice_letter

__all__ = [
    "StoryNode",
    "choice_index",
    "choice_letter",
]
