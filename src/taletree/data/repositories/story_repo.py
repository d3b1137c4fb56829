"""Repository for the story tree document."""
from __future__ import annotations

import logging
from typing import List, Tuple

from taletree.data.errors import DataValidationError
from taletree.data.repositories.base import RepositoryBase
from taletree.domain.defs import StoryNode

logger = logging.getLogger(__name__)


class StoryRepository(RepositoryBase[StoryNode]):
    """Loads the story tree and validates its structure.

    Each node is ``{"hint": str, "enemyHealth": int, "choices": [...]}``.
    ``enemyHealth`` defaults to 0 and ``choices`` to an empty list.
    """

    def _build(self, raw: dict[str, object]) -> StoryNode:
        root, root_choices = self._parse_node(raw, "root")
        pending: List[Tuple[StoryNode, List[object], str]] = [(root, root_choices, "root")]
        node_count = 1
        while pending:
            parent, raw_choices, parent_ctx = pending.pop()
            for index, entry in enumerate(raw_choices):
                child_ctx = f"{parent_ctx}.choices[{index}]"
                child, child_choices = self._parse_node(entry, child_ctx)
                parent.choices.append(child)
                pending.append((child, child_choices, child_ctx))
                node_count += 1
        logger.debug("Loaded %d story nodes from %s", node_count, self.file_path)
        return root

    def _parse_node(self, payload: object, context: str) -> Tuple[StoryNode, List[object]]:
        node_data = self._require_mapping(payload, f"story node '{context}'")
        hint = self._require_str(node_data.get("hint"), f"{context}.hint")
        enemy_health = 0
        if "enemyHealth" in node_data:
            enemy_health = self._require_int(node_data["enemyHealth"], f"{context}.enemyHealth")
        raw_choices = node_data.get("choices")
        if raw_choices is None:
            raw_choices = []
        if not isinstance(raw_choices, list):
            raise DataValidationError(f"{context}.choices must be a list if provided.")
        return StoryNode(hint=hint, enemy_health=enemy_health), raw_choices
