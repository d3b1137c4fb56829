"""Static story tree validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from taletree.domain.defs import StoryNode, choice_index
from taletree.services.story_service import INVENTORY_TOKEN, POTION_TOKEN

Severity = str

MAX_CHOICES = 26


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def has_errors(issues: List[Issue]) -> bool:
    return any(issue.severity == "ERROR" for issue in issues)


def validate_story_tree(root: StoryNode) -> list[Issue]:
    """Walk the whole tree and report authoring problems in depth-first order."""
    issues: list[Issue] = []
    shadow_threshold = min(choice_index(POTION_TOKEN), choice_index(INVENTORY_TOKEN)) + 1
    pending: List[Tuple[StoryNode, str]] = [(root, "root")]
    while pending:
        node, path = pending.pop()
        if not node.hint.strip():
            issues.append(
                Issue(
                    severity="WARNING",
                    code="EMPTY_HINT",
                    message="Story node has no hint text.",
                    context={"node": path},
                )
            )
        if node.enemy_health < 0:
            issues.append(
                Issue(
                    severity="WARNING",
                    code="NEGATIVE_ENEMY_HEALTH",
                    message="Negative enemy health is treated as no battle.",
                    context={"node": path, "enemy_health": str(node.enemy_health)},
                )
            )
        count = len(node.choices)
        if count > MAX_CHOICES:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="TOO_MANY_CHOICES",
                    message=f"Only {MAX_CHOICES} choices can be addressed by letter.",
                    context={"node": path, "choices": str(count)},
                )
            )
        if count >= shadow_threshold:
            issues.append(
                Issue(
                    severity="WARNING",
                    code="SHADOWED_CHOICE",
                    message=(
                        f"'{POTION_TOKEN}' or '{INVENTORY_TOKEN}' selects a choice here, "
                        "hiding the potion or inventory command."
                    ),
                    context={"node": path, "choices": str(count)},
                )
            )
        for index in reversed(range(count)):
            pending.append((node.choices[index], f"{path}.choices[{index}]"))
    return issues
