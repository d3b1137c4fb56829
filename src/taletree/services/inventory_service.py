"""Inventory actions available from any story node."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from taletree.domain.entities import Hero
from taletree.domain.inventory import HEALTH_POTION_NAME, Inventory, InventoryItem

logger = logging.getLogger(__name__)

POTION_HEAL_AMOUNT = 20


@dataclass(slots=True)
class InventoryEvent:
    """Base inventory event."""


@dataclass(slots=True)
class PotionUsedEvent(InventoryEvent):
    amount: int
    hero_health: int


@dataclass(slots=True)
class PotionMissingEvent(InventoryEvent):
    pass


@dataclass(slots=True)
class InventoryShownEvent(InventoryEvent):
    """Snapshot of the inventory at the moment it was opened."""

    items: Tuple[InventoryItem, ...]


class InventoryService:
    """Application service for potion use and inventory display."""

    def stock(self, inventory: Inventory, items: Iterable[InventoryItem]) -> None:
        """Add starting items, copying them so templates are never shared."""
        for item in items:
            inventory.add(replace(item))

    def use_health_potion(self, inventory: Inventory, hero: Hero) -> InventoryEvent:
        """Spend one charge of the first charged Health Potion, if any."""
        for item in inventory:
            if item.name == HEALTH_POTION_NAME and item.health_bonus > 0:
                item.health_bonus -= 1
                hero.health += POTION_HEAL_AMOUNT
                logger.debug("Potion used, %d charges left, hero at %d", item.health_bonus, hero.health)
                return PotionUsedEvent(amount=POTION_HEAL_AMOUNT, hero_health=hero.health)
        return PotionMissingEvent()

    def show(self, inventory: Inventory) -> InventoryShownEvent:
        items: List[InventoryItem] = [replace(item) for item in inventory]
        return InventoryShownEvent(items=tuple(items))
