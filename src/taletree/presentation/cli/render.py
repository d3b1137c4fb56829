"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, Sequence

from taletree.domain.inventory import InventoryItem

ENDING_BANNER = "=== End of the game ==="


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"=== {title} ===")


def render_hint(hint: str) -> None:
    print(hint)


def render_choices(choices: Sequence[str], *, show_commands: bool = True) -> None:
    """Display the letters accepted at the current node."""
    if not choices:
        return
    line = f"Choices: {', '.join(choices)}"
    if show_commands:
        line += "  (H: use potion, I: inventory)"
    print(line)


def render_inventory(items: Iterable[InventoryItem]) -> None:
    """Print every item with its bonuses, one block per item."""
    render_heading("Inventory")
    for item in items:
        print(f"Item: {item.name}")
        print(f"Damage Bonus: {item.damage_bonus}")
        print(f"Armor Bonus: {item.armor_bonus}")
        print(f"Health Bonus: {item.health_bonus}")
        print()


def render_ending() -> None:
    print(ENDING_BANNER)


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)
