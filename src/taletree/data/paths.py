"""Helpers for resolving data file locations."""
from __future__ import annotations

from pathlib import Path

STORY_FILENAME = "story.json"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_story_path(path: Path | str | None = None) -> Path:
    """Return the story document to load, defaulting to the bundled one."""
    if path is not None:
        return Path(path)
    return get_repo_root() / "data" / STORY_FILENAME
