"""Story tree structures used by the runtime."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

FIRST_CHOICE_LETTER = "A"
LAST_CHOICE_LETTER = "Z"


def choice_letter(index: int) -> str:
    """Return the letter a player types to pick the choice at ``index``."""
    return chr(ord(FIRST_CHOICE_LETTER) + index)


def choice_index(token: str) -> int | None:
    """Map an uppercase letter token to a choice index, or None if it is not one."""
    if len(token) != 1 or not FIRST_CHOICE_LETTER <= token <= LAST_CHOICE_LETTER:
        return None
    return ord(token) - ord(FIRST_CHOICE_LETTER)


@dataclass(slots=True, eq=False)
class StoryNode:
    """One node of the story tree.

    ``enemy_health`` is live combat state: battles decrement it in place, so a
    node keeps whatever health its last battle left it with.
    """

    hint: str
    enemy_health: int = 0
    choices: List["StoryNode"] = field(default_factory=list)

    @property
    def is_ending(self) -> bool:
        return not self.choices

    @property
    def has_enemy(self) -> bool:
        return self.enemy_health > 0

    def choice_letters(self) -> List[str]:
        # Choices past the last letter cannot be typed.
        count = min(len(self.choices), ord(LAST_CHOICE_LETTER) - ord(FIRST_CHOICE_LETTER) + 1)
        return [choice_letter(index) for index in range(count)]
