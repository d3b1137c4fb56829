"""Hero runtime entity."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HERO_HEALTH = 100


@dataclass(slots=True)
class Hero:
    """The player character. Health is uncapped and may go negative."""

    health: int = DEFAULT_HERO_HEALTH

    @property
    def is_alive(self) -> bool:
        return self.health > 0
