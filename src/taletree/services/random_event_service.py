"""Random events triggered by non-combat choices."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from taletree.core.rng import RNG
from taletree.domain.inventory import Inventory, make_sword

logger = logging.getLogger(__name__)

OUTCOME_FIND_SWORD = 0
OUTCOME_LOSE_ITEM = 1
OUTCOME_NOTHING = 2
_OUTCOME_COUNT = 3


@dataclass(slots=True)
class RandomEvent:
    """Base random event."""


@dataclass(slots=True)
class ItemFoundEvent(RandomEvent):
    item_name: str


@dataclass(slots=True)
class ItemLostEvent(RandomEvent):
    item_name: str


@dataclass(slots=True)
class NothingHappensEvent(RandomEvent):
    pass


@dataclass(slots=True)
class RandomEventResult:
    """Outcome drawn and the events it reported (possibly none)."""

    outcome: int
    events: List[RandomEvent] = field(default_factory=list)


class RandomEventService:
    """Draws one of three fixed inventory outcomes."""

    def trigger(self, inventory: Inventory, rng: RNG) -> RandomEventResult:
        """Reseed ``rng`` and apply a uniformly drawn outcome to ``inventory``."""
        rng.reseed()
        outcome = rng.randrange(_OUTCOME_COUNT)
        result = RandomEventResult(outcome=outcome)
        if outcome == OUTCOME_FIND_SWORD:
            sword = make_sword()
            inventory.add(sword)
            result.events.append(ItemFoundEvent(item_name=sword.name))
        elif outcome == OUTCOME_LOSE_ITEM:
            # An empty inventory makes this outcome a silent no-op.
            if inventory:
                lost = inventory.remove_at(rng.randrange(len(inventory)))
                result.events.append(ItemLostEvent(item_name=lost.name))
        else:
            result.events.append(NothingHappensEvent())
        logger.debug("Random event outcome %d, inventory size now %d", outcome, len(inventory))
        return result
