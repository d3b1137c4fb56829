"""Data layer utilities for loading story documents."""

from .errors import DataError, DataLoadError, DataValidationError
from .paths import get_repo_root, get_story_path

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "get_repo_root",
    "get_story_path",
]
