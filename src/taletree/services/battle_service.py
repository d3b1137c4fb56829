"""Battle service resolving fixed-damage exchanges against a story node's enemy."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from taletree.core.rng import RNG
from taletree.core.types import Victor
from taletree.domain.defs import StoryNode
from taletree.domain.entities import Hero
from taletree.domain.inventory import Inventory
from taletree.services.errors import BattleStalemateError

logger = logging.getLogger(__name__)

BASE_PLAYER_DAMAGE = 2
ENEMY_DAMAGE_MIN = 1
ENEMY_DAMAGE_MAX = 10


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    enemy_health: int


@dataclass(slots=True)
class ExchangeResolvedEvent(BattleEvent):
    """One round in which both sides landed a blow."""

    player_damage: int
    enemy_damage: int
    hero_health: int


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    victor: Victor


@dataclass(slots=True)
class BattleResult:
    """Summary of a finished battle."""

    victor: Victor
    total_damage: int
    total_armor: int
    enemy_damage: int
    events: List[BattleEvent] = field(default_factory=list)

    @property
    def exchanges(self) -> int:
        return sum(1 for event in self.events if isinstance(event, ExchangeResolvedEvent))


class BattleService:
    """Runs a battle to completion in one call."""

    def fight(self, node: StoryNode, inventory: Inventory, hero: Hero, rng: RNG) -> BattleResult:
        """Fight the enemy guarding ``node``, mutating its health and the hero's.

        Armor is summed and reported but does not reduce damage taken.
        """
        total_damage = BASE_PLAYER_DAMAGE + inventory.total_damage_bonus()
        total_armor = inventory.total_armor_bonus()
        rng.reseed()
        enemy_damage = rng.randint(ENEMY_DAMAGE_MIN, ENEMY_DAMAGE_MAX)
        if total_damage <= 0 and enemy_damage <= 0 and node.enemy_health > 0 and hero.is_alive:
            raise BattleStalemateError(
                f"Neither side can deal damage (hero {total_damage}, enemy {enemy_damage})."
            )
        events: List[BattleEvent] = [BattleStartedEvent(enemy_health=node.enemy_health)]
        logger.debug(
            "Battle start: enemy %d hp, hero %d hp, deals %d, takes %d",
            node.enemy_health,
            hero.health,
            total_damage,
            enemy_damage,
        )

        while node.enemy_health > 0 and hero.health > 0:
            node.enemy_health -= total_damage
            if node.enemy_health > 0:
                hero.health -= enemy_damage
                events.append(
                    ExchangeResolvedEvent(
                        player_damage=total_damage,
                        enemy_damage=enemy_damage,
                        hero_health=hero.health,
                    )
                )

        victor: Victor = "enemy" if hero.health <= 0 else "hero"
        events.append(BattleResolvedEvent(victor=victor))
        logger.debug("Battle over: victor=%s enemy=%d hero=%d", victor, node.enemy_health, hero.health)
        return BattleResult(
            victor=victor,
            total_damage=total_damage,
            total_armor=total_armor,
            enemy_damage=enemy_damage,
            events=events,
        )
