from pathlib import Path

import pytest

from taletree.data.errors import DataLoadError, DataValidationError
from taletree.data.repositories import StoryRepository
from tests.helpers.story_builders import write_story


def test_story_repository_builds_tree_in_order(tmp_path: Path) -> None:
    story_file = write_story(
        tmp_path / "story.json",
        {
            "hint": "Crossroads",
            "enemyHealth": 0,
            "choices": [
                {"hint": "North", "enemyHealth": 15, "choices": [{"hint": "Castle", "enemyHealth": 0}]},
                {"hint": "South", "enemyHealth": 0},
            ],
        },
    )
    root = StoryRepository(story_file).load()

    assert root.hint == "Crossroads"
    assert [child.hint for child in root.choices] == ["North", "South"]
    assert root.choices[0].enemy_health == 15
    assert root.choices[0].choices[0].hint == "Castle"
    assert root.choices[1].is_ending


def test_missing_enemy_health_and_choices_default(tmp_path: Path) -> None:
    story_file = write_story(tmp_path / "story.json", {"hint": "Alone"})
    root = StoryRepository(story_file).load()

    assert root.enemy_health == 0
    assert root.choices == []


def test_null_choices_treated_as_leaf(tmp_path: Path) -> None:
    story_file = write_story(tmp_path / "story.json", {"hint": "Alone", "enemyHealth": 0, "choices": None})
    assert StoryRepository(story_file).load().is_ending


def test_load_is_cached(tmp_path: Path) -> None:
    repo = StoryRepository(write_story(tmp_path / "story.json", {"hint": "Once"}))
    assert repo.load() is repo.load()


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="not found"):
        StoryRepository(tmp_path / "nope.json").load()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    story_file = tmp_path / "story.json"
    story_file.write_text("{ not json", encoding="utf-8")
    with pytest.raises(DataLoadError, match="Invalid JSON"):
        StoryRepository(story_file).load()


def test_top_level_must_be_object(tmp_path: Path) -> None:
    story_file = write_story(tmp_path / "story.json", [{"hint": "x"}])
    with pytest.raises(DataValidationError, match="top-level object"):
        StoryRepository(story_file).load()


def test_bad_hint_reports_node_path(tmp_path: Path) -> None:
    story_file = write_story(
        tmp_path / "story.json",
        {"hint": "Root", "choices": [{"hint": "ok"}, {"hint": 42}]},
    )
    with pytest.raises(DataValidationError, match=r"root\.choices\[1\]\.hint"):
        StoryRepository(story_file).load()


@pytest.mark.parametrize("bad_value", ["ten", True, 1.5])
def test_enemy_health_must_be_integer(tmp_path: Path, bad_value: object) -> None:
    story_file = write_story(tmp_path / "story.json", {"hint": "Root", "enemyHealth": bad_value})
    with pytest.raises(DataValidationError, match="enemyHealth"):
        StoryRepository(story_file).load()


def test_choices_must_be_list(tmp_path: Path) -> None:
    story_file = write_story(tmp_path / "story.json", {"hint": "Root", "choices": {"hint": "x"}})
    with pytest.raises(DataValidationError, match="choices must be a list"):
        StoryRepository(story_file).load()


def test_choice_entries_must_be_objects(tmp_path: Path) -> None:
    story_file = write_story(tmp_path / "story.json", {"hint": "Root", "choices": ["north"]})
    with pytest.raises(DataValidationError, match="must be an object"):
        StoryRepository(story_file).load()


def test_bundled_story_loads() -> None:
    root = StoryRepository().load()

    assert root.hint
    assert len(root.choices) == 2


def test_deeply_nested_document_raises_load_error(tmp_path: Path) -> None:
    depth = 50_000
    story_file = tmp_path / "story.json"
    story_file.write_text(
        '{"hint": "x", "choices": [' * depth + '{"hint": "x"}' + "]}" * depth,
        encoding="utf-8",
    )

    with pytest.raises(DataLoadError, match="nested too deeply"):
        StoryRepository(story_file).load()
