"""Service layer exports."""

from .errors import BattleStalemateError, SessionEndedError
from .battle_service import (
    BattleResolvedEvent,
    BattleResult,
    BattleService,
    BattleStartedEvent,
    ExchangeResolvedEvent,
)
from .inventory_service import (
    InventoryService,
    InventoryShownEvent,
    PotionMissingEvent,
    PotionUsedEvent,
)
from .random_event_service import (
    ItemFoundEvent,
    ItemLostEvent,
    NothingHappensEvent,
    RandomEventService,
)
from .story_service import (
    EnemyEncounteredEvent,
    InvalidChoiceEvent,
    StepResult,
    StoryNodeView,
    StoryService,
)

__all__ = [
    "BattleStalemateError",
    "SessionEndedError",
    "BattleResolvedEvent",
    "BattleResult",
    "BattleService",
    "BattleStartedEvent",
    "ExchangeResolvedEvent",
    "InventoryService",
    "InventoryShownEvent",
    "PotionMissingEvent",
    "PotionUsedEvent",
    "ItemFoundEvent",
    "ItemLostEvent",
    "NothingHappensEvent",
    "RandomEventService",
    "EnemyEncounteredEvent",
    "InvalidChoiceEvent",
    "StepResult",
    "StoryNodeView",
    "StoryService",
]
