"""Base repository implementation for JSON story documents."""
from __future__ import annotations

from pathlib import Path
from typing import Generic, TypeVar

from taletree.data.errors import DataValidationError
from taletree.data.json_loader import load_json
from taletree.data import paths

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._loaded: T | None = None

    @property
    def file_path(self) -> Path:
        return paths.get_story_path(self._path)

    def _load_raw(self) -> dict[str, object]:
        raw = load_json(self.file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {self.file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> T:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def load(self) -> T:
        """Return the parsed document, reading it from disk on first use."""
        if self._loaded is None:
            self._loaded = self._build(self._load_raw())
        return self._loaded

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        # bool is an int subclass; JSON true/false is never a valid health value
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value
