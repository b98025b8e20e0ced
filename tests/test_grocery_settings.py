# tests/test_grocery_settings.py

from __future__ import annotations

from pathlib import Path

from listkeeper.config import Settings
from listkeeper.grocery.settings import (
    GroceryPaths,
    load_grocery_paths,
    read_grocery_paths,
    save_grocery_paths,
)


def test_defaults_come_from_settings(settings: Settings) -> None:
    paths = GroceryPaths.defaults(settings)
    assert paths.types_file == settings.data_dir / "groceryTypes.json"
    assert paths.list_file == settings.data_dir / "groceryList.txt"


def test_saved_paths_are_read_back(tmp_path: Path, settings: Settings) -> None:
    types_file = tmp_path / "mytypes.json"
    list_file = tmp_path / "mylist.txt"
    types_file.write_text("x", encoding="utf-8")
    list_file.write_text("x", encoding="utf-8")

    paths = GroceryPaths(types_file, list_file)
    save_grocery_paths(settings.grocery_settings_file, paths)

    lines = settings.grocery_settings_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "GroceryManager Settings 2024"
    assert read_grocery_paths(settings.grocery_settings_file, GroceryPaths.defaults(settings)) == paths


def test_default_paths_are_usable_before_the_files_exist(settings: Settings) -> None:
    defaults = GroceryPaths.defaults(settings)
    save_grocery_paths(settings.grocery_settings_file, defaults)
    assert read_grocery_paths(settings.grocery_settings_file, defaults) == defaults


def test_unusable_settings_file_is_repaired(tmp_path: Path, settings: Settings) -> None:
    defaults = GroceryPaths.defaults(settings)
    settings_file = settings.grocery_settings_file
    settings_file.parent.mkdir(parents=True)

    # wrong marker
    settings_file.write_text("Other\na\nb\n", encoding="utf-8")
    assert read_grocery_paths(settings_file, defaults) is None
    assert load_grocery_paths(settings_file, defaults) == defaults
    assert read_grocery_paths(settings_file, defaults) == defaults

    # path that no longer exists
    save_grocery_paths(settings_file, GroceryPaths(tmp_path / "gone.json", defaults.list_file))
    assert load_grocery_paths(settings_file, defaults) == defaults

    # too short
    settings_file.write_text("GroceryManager Settings 2024\n", encoding="utf-8")
    assert load_grocery_paths(settings_file, defaults) == defaults


def test_missing_settings_file_is_created(settings: Settings) -> None:
    defaults = GroceryPaths.defaults(settings)
    assert load_grocery_paths(settings.grocery_settings_file, defaults) == defaults
    assert settings.grocery_settings_file.is_file()


def test_with_paths_only_accept_existing_files(tmp_path: Path, settings: Settings) -> None:
    paths = GroceryPaths.defaults(settings)
    existing = tmp_path / "weekly.txt"
    existing.write_text("x", encoding="utf-8")

    assert paths.with_list_file(tmp_path / "nope.txt") == paths
    assert paths.with_list_file(existing).list_file == existing
    assert paths.with_types_file(str(existing)).types_file == existing
    assert paths.with_list_file(existing).types_file == paths.types_file
