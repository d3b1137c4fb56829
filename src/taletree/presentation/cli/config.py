"""CLI configuration loading.

Settings come from a per-user ``config.json``; missing or corrupt files fall
back to defaults. Environment variables override the file and command line
flags override both.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping

from taletree.domain.entities import DEFAULT_HERO_HEALTH
from taletree.domain.inventory import InventoryItem

logger = logging.getLogger(__name__)

_DEFAULT_LOG_LEVEL = "WARNING"
DEBUG_ENV_VAR = "TALETREE_DEBUG"
STORY_ENV_VAR = "TALETREE_STORY"


@dataclass
class CliConfig:
    """Resolved settings for one CLI run."""

    story_path: Path | None = None
    log_level: str = _DEFAULT_LOG_LEVEL
    starting_health: int = DEFAULT_HERO_HEALTH
    starting_items: List[InventoryItem] = field(default_factory=list)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Taletree"
        return Path.home() / "Taletree"
    return Path.home() / ".config" / "taletree"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_item(value: object) -> InventoryItem | None:
    if not isinstance(value, dict):
        return None
    name = value.get("name")
    if not isinstance(name, str) or not name:
        return None
    bonuses = {}
    for key, attr in (("damageBonus", "damage_bonus"), ("armorBonus", "armor_bonus"), ("healthBonus", "health_bonus")):
        raw = value.get(key, 0)
        if not _is_int(raw):
            return None
        bonuses[attr] = raw
    return InventoryItem(name=name, **bonuses)


def _parse_items(value: object) -> List[InventoryItem]:
    if not isinstance(value, list):
        return []
    items: List[InventoryItem] = []
    for entry in value:
        item = _parse_item(entry)
        if item is None:
            logger.warning("Ignoring malformed starting item in config: %r", entry)
            continue
        items.append(item)
    return items


def load_config(path: Path | None = None) -> CliConfig:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return CliConfig()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return CliConfig()
    if not isinstance(raw, dict):
        return CliConfig()

    config = CliConfig()
    story_path = raw.get("story_path")
    if isinstance(story_path, str) and story_path:
        config.story_path = Path(story_path).expanduser()
    log_level = raw.get("log_level")
    if isinstance(log_level, str) and log_level:
        config.log_level = log_level.upper()
    starting_health = raw.get("starting_health")
    if _is_int(starting_health):
        config.starting_health = starting_health
    config.starting_items = _parse_items(raw.get("starting_items"))
    return config


def apply_environment(config: CliConfig, environ: Mapping[str, str] | None = None) -> CliConfig:
    """Overlay environment variables onto ``config`` in place."""
    env = os.environ if environ is None else environ
    if env.get(DEBUG_ENV_VAR) == "1":
        config.log_level = "DEBUG"
    story_path = env.get(STORY_ENV_VAR)
    if story_path:
        config.story_path = Path(story_path).expanduser()
    return config
