"""Story navigation services."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from taletree.core.rng import RNG
from taletree.domain.defs import StoryNode, choice_index
from taletree.domain.entities import DEFAULT_HERO_HEALTH, Hero
from taletree.domain.inventory import InventoryItem
from taletree.domain.state import GameState
from taletree.services.battle_service import BattleResult, BattleService
from taletree.services.errors import SessionEndedError
from taletree.services.inventory_service import InventoryService
from taletree.services.random_event_service import RandomEventService

logger = logging.getLogger(__name__)

POTION_TOKEN = "H"
INVENTORY_TOKEN = "I"


@dataclass(slots=True)
class StoryNodeView:
    """Data returned to the presentation layer for rendering."""

    hint: str
    choices: List[str]
    is_ending: bool
    commands_available: bool = True


@dataclass(slots=True)
class StoryEvent:
    """Base class for story events."""


@dataclass(slots=True)
class InvalidChoiceEvent(StoryEvent):
    token: str


@dataclass(slots=True)
class EnemyEncounteredEvent(StoryEvent):
    enemy_health: int


@dataclass(slots=True)
class StepResult:
    """Result returned after applying one input token."""

    events: List[object] = field(default_factory=list)
    node_view: StoryNodeView | None = None
    battle: BattleResult | None = None
    moved: bool = False


class StoryService:
    """Application service that walks the story tree one token at a time."""

    def __init__(
        self,
        *,
        battle_service: BattleService | None = None,
        random_event_service: RandomEventService | None = None,
        inventory_service: InventoryService | None = None,
        starting_health: int = DEFAULT_HERO_HEALTH,
    ) -> None:
        self._battle_service = battle_service or BattleService()
        self._random_event_service = random_event_service or RandomEventService()
        self._inventory_service = inventory_service or InventoryService()
        self._starting_health = starting_health

    def start_session(
        self,
        root: StoryNode,
        rng: RNG | None = None,
        starting_items: Iterable[InventoryItem] = (),
    ) -> GameState:
        """Create a fresh session positioned at the root node."""
        state = GameState(
            root=root,
            current_node=root,
            rng=rng or RNG(),
            hero=Hero(health=self._starting_health),
        )
        self._inventory_service.stock(state.inventory, starting_items)
        logger.debug("Session started, hero at %d, %d starting items", state.hero.health, len(state.inventory))
        return state

    def get_current_node_view(self, state: GameState) -> StoryNodeView:
        """Return the view model for the currently active node."""
        node = state.current_node
        shadowed = any(choice_index(token) < len(node.choices) for token in (POTION_TOKEN, INVENTORY_TOKEN))
        return StoryNodeView(
            hint=node.hint,
            choices=node.choice_letters(),
            is_ending=node.is_ending,
            commands_available=not shadowed,
        )

    def submit(self, state: GameState, token: str) -> StepResult:
        """Apply one input token and return what happened.

        Choice letters are checked before the potion and inventory commands,
        so at a node with eight or more choices 'H' and 'I' pick children.
        """
        node = state.current_node
        if node.is_ending:
            raise SessionEndedError("The story has already ended.")

        result = StepResult()
        state.steps_taken += 1
        index = choice_index(token)
        if index is not None and 0 <= index < len(node.choices):
            self._choose(state, node.choices[index], result)
        elif token == POTION_TOKEN:
            result.events.append(self._inventory_service.use_health_potion(state.inventory, state.hero))
        elif token == INVENTORY_TOKEN:
            result.events.append(self._inventory_service.show(state.inventory))
        else:
            result.events.append(InvalidChoiceEvent(token=token))
        result.node_view = self.get_current_node_view(state)
        return result

    def _choose(self, state: GameState, selected: StoryNode, result: StepResult) -> None:
        if selected.has_enemy:
            result.events.append(EnemyEncounteredEvent(enemy_health=selected.enemy_health))
            battle = self._battle_service.fight(selected, state.inventory, state.hero, state.rng)
            result.events.extend(battle.events)
            result.battle = battle
        else:
            random_result = self._random_event_service.trigger(state.inventory, state.rng)
            result.events.extend(random_result.events)
        # Defeat does not stop the story; the hero moves on either way.
        state.current_node = selected
        result.moved = True
        logger.debug("Entered node %r (ending=%s)", selected.hint[:40], selected.is_ending)
