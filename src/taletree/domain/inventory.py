"""Hero inventory structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

SWORD_NAME = "Sword"
HEALTH_POTION_NAME = "Health Potion"


@dataclass(slots=True)
class InventoryItem:
    """Carried item with flat combat modifiers."""

    name: str
    damage_bonus: int = 0
    armor_bonus: int = 0
    health_bonus: int = 0


def make_sword() -> InventoryItem:
    """Return a fresh copy of the sword found by random events."""
    return InventoryItem(name=SWORD_NAME, damage_bonus=10, armor_bonus=0, health_bonus=0)


@dataclass(slots=True)
class Inventory:
    """Ordered item list; order drives display and the potion search."""

    items: List[InventoryItem] = field(default_factory=list)

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def add(self, item: InventoryItem) -> None:
        self.items.append(item)

    def remove_at(self, index: int) -> InventoryItem:
        if not 0 <= index < len(self.items):
            raise IndexError(f"Inventory index {index} is out of range.")
        return self.items.pop(index)

    def total_damage_bonus(self) -> int:
        return sum(item.damage_bonus for item in self.items)

    def total_armor_bonus(self) -> int:
        return sum(item.armor_bonus for item in self.items)
