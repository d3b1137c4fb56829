from taletree.core.rng import RNG
from taletree.domain.inventory import Inventory, InventoryItem, make_sword
from taletree.services.random_event_service import (
    OUTCOME_FIND_SWORD,
    OUTCOME_LOSE_ITEM,
    OUTCOME_NOTHING,
    ItemFoundEvent,
    ItemLostEvent,
    NothingHappensEvent,
    RandomEventService,
)
from tests.helpers.scripted_rng import ScriptedRNG


def _three_items() -> Inventory:
    return Inventory(
        [
            make_sword(),
            InventoryItem(name="Shield", armor_bonus=5),
            InventoryItem(name="Health Potion", health_bonus=1),
        ]
    )


def test_find_sword_appends_sword_to_empty_inventory() -> None:
    inventory = Inventory()
    rng = ScriptedRNG(randranges=[OUTCOME_FIND_SWORD])

    result = RandomEventService().trigger(inventory, rng)

    assert result.outcome == OUTCOME_FIND_SWORD
    assert list(inventory) == [make_sword()]
    assert result.events == [ItemFoundEvent(item_name="Sword")]
    assert rng.reseed_count == 1


def test_find_sword_appends_after_existing_items() -> None:
    inventory = _three_items()

    RandomEventService().trigger(inventory, ScriptedRNG(randranges=[OUTCOME_FIND_SWORD]))

    assert len(inventory) == 4
    assert list(inventory)[-1] == make_sword()


def test_lose_item_removes_selected_index() -> None:
    inventory = _three_items()
    rng = ScriptedRNG(randranges=[OUTCOME_LOSE_ITEM, 1])

    result = RandomEventService().trigger(inventory, rng)

    assert [item.name for item in inventory] == ["Sword", "Health Potion"]
    assert result.events == [ItemLostEvent(item_name="Shield")]
    assert rng.exhausted


def test_lose_item_on_empty_inventory_is_silent() -> None:
    inventory = Inventory()
    rng = ScriptedRNG(randranges=[OUTCOME_LOSE_ITEM])

    result = RandomEventService().trigger(inventory, rng)

    assert len(inventory) == 0
    assert result.outcome == OUTCOME_LOSE_ITEM
    assert result.events == []
    assert rng.exhausted


def test_nothing_happens_leaves_inventory_alone() -> None:
    inventory = _three_items()

    result = RandomEventService().trigger(inventory, ScriptedRNG(randranges=[OUTCOME_NOTHING]))

    assert len(inventory) == 3
    assert result.events == [NothingHappensEvent()]


def test_inventory_size_changes_by_outcome_with_real_rng() -> None:
    service = RandomEventService()
    for seed in range(30):
        inventory = _three_items()
        result = service.trigger(inventory, RNG(seed_source=lambda seed=seed: seed))
        expected = {OUTCOME_FIND_SWORD: 4, OUTCOME_LOSE_ITEM: 2, OUTCOME_NOTHING: 3}[result.outcome]
        assert len(inventory) == expected


def test_draws_repeat_within_same_clock_tick() -> None:
    service = RandomEventService()
    rng = RNG(seed_source=lambda: 1700000000)

    outcomes = {service.trigger(Inventory(), rng).outcome for _ in range(5)}

    assert len(outcomes) == 1
