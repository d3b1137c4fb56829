"""Domain-level session state."""
from __future__ import annotations

from dataclasses import dataclass, field

from taletree.core.rng import RNG
from taletree.domain.defs import StoryNode
from taletree.domain.entities import Hero
from taletree.domain.inventory import Inventory


@dataclass
class GameState:
    """Everything one play session mutates."""

    root: StoryNode
    current_node: StoryNode
    rng: RNG
    hero: Hero = field(default_factory=Hero)
    inventory: Inventory = field(default_factory=Inventory)
    steps_taken: int = 0
