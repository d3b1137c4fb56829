"""Console-driven UI loop for taletree."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Sequence

from taletree.core.log import setup_logging
from taletree.data import DataError
from taletree.data.repositories import StoryRepository
from taletree.domain.defs import StoryNode
from taletree.domain.state import GameState
from taletree.presentation.cli.config import CliConfig, apply_environment, load_config
from taletree.presentation.cli.render import (
    render_choices,
    render_ending,
    render_hint,
    render_inventory,
    render_lines,
)
from taletree.services import (
    BattleResolvedEvent,
    BattleStartedEvent,
    EnemyEncounteredEvent,
    ExchangeResolvedEvent,
    InvalidChoiceEvent,
    InventoryShownEvent,
    ItemFoundEvent,
    ItemLostEvent,
    NothingHappensEvent,
    PotionMissingEvent,
    PotionUsedEvent,
    StoryNodeView,
    StoryService,
)
from taletree.services.story_tree_validator import format_issue, has_errors, validate_story_tree

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_INTERRUPTED = 130

PromptFn = Callable[[str], str]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive CLI session and return the process exit code."""
    args = _build_parser().parse_args(argv)
    config = _resolve_config(args)
    setup_logging(config.log_level)

    try:
        root = _load_story(config.story_path)
    except DataError as exc:
        logger.error("Story load failed: %s", exc)
        print(f"Unable to load story: {exc}", file=sys.stderr)
        return EXIT_LOAD_FAILED

    if args.validate:
        return _run_validation(root)

    story_service = StoryService(starting_health=config.starting_health)
    state = story_service.start_session(root, starting_items=config.starting_items)
    try:
        return run_story_loop(story_service, state)
    except KeyboardInterrupt:
        print()
        logger.info("Session interrupted after %d steps", state.steps_taken)
        return EXIT_INTERRUPTED


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taletree", description="Play a choice-driven story tree.")
    parser.add_argument("story", nargs="?", type=Path, help="Story JSON file (defaults to the bundled story).")
    parser.add_argument("--config", type=Path, help="Path to a config.json file.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-level", help="Logging level name, e.g. INFO.")
    parser.add_argument("--validate", action="store_true", help="Check the story tree and exit.")
    return parser


def _resolve_config(args: argparse.Namespace) -> CliConfig:
    config = apply_environment(load_config(args.config))
    if args.story is not None:
        config.story_path = args.story
    if args.log_level:
        config.log_level = args.log_level.upper()
    if args.debug:
        config.log_level = "DEBUG"
    return config


def _load_story(story_path: Path | None) -> StoryNode:
    repo = StoryRepository(story_path)
    logger.info("Loading story from %s", repo.file_path)
    return repo.load()


def _run_validation(root: StoryNode) -> int:
    issues = validate_story_tree(root)
    if not issues:
        print("Story tree OK.")
        return EXIT_OK
    render_lines(format_issue(issue) for issue in issues)
    return EXIT_LOAD_FAILED if has_errors(issues) else EXIT_OK


def run_story_loop(story_service: StoryService, state: GameState, prompt: PromptFn | None = None) -> int:
    """Show the current node and apply input until an ending is reached."""
    read = prompt or input
    while True:
        node_view = story_service.get_current_node_view(state)
        _render_node_view(node_view)
        if node_view.is_ending:
            render_ending()
            logger.info("Story ended after %d steps, hero at %d", state.steps_taken, state.hero.health)
            return EXIT_OK
        try:
            token = _prompt_token(read)
        except EOFError:
            print()
            print("Goodbye!")
            return EXIT_OK
        result = story_service.submit(state, token)
        _render_events(result.events)


def _render_node_view(node_view: StoryNodeView) -> None:
    render_hint(node_view.hint)
    render_choices(node_view.choices, show_commands=node_view.commands_available)


def _prompt_token(prompt: PromptFn) -> str:
    """Return the first whitespace-delimited token, skipping blank lines."""
    while True:
        tokens = prompt("> ").split()
        if tokens:
            return tokens[0]


def _render_events(events: List[object]) -> None:
    for event in events:
        if isinstance(event, EnemyEncounteredEvent):
            print("Engaging in battle with the enemy!")
        elif isinstance(event, BattleStartedEvent):
            logger.debug("Enemy starts with %d health", event.enemy_health)
        elif isinstance(event, ExchangeResolvedEvent):
            print(f"You attacked the enemy and dealt {event.player_damage} damage.")
            print(f"The enemy attacked you and dealt {event.enemy_damage} damage.")
            print(f"Your health: {event.hero_health}")
        elif isinstance(event, BattleResolvedEvent):
            print("Enemy defeated!" if event.victor == "hero" else "You lost the battle!")
        elif isinstance(event, ItemFoundEvent):
            print(f"You found a {event.item_name.lower()} and added it to your inventory!")
        elif isinstance(event, ItemLostEvent):
            print("You lost a random item from your inventory!")
        elif isinstance(event, NothingHappensEvent):
            print("Nothing happens.")
        elif isinstance(event, PotionUsedEvent):
            print("You used a health potion and restored some health!")
        elif isinstance(event, PotionMissingEvent):
            print("You don't have any health potions!")
        elif isinstance(event, InventoryShownEvent):
            render_inventory(event.items)
        elif isinstance(event, InvalidChoiceEvent):
            print("Invalid choice. Please try again.")
        else:
            print(f"- {event}")
