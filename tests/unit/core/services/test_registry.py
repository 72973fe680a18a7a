from __future__ import annotations

"""
Unit tests for Component Discovery and the Registry.

Verifies:
1. Component file name validation.
2. Recursive directory discovery keyed by file stem.
3. Registry lookup, insertion and the uninitialized state.
"""

from pathlib import Path

import pytest

from verif.core.services.registry import (
    ComponentRegistry,
    component_file_name_or_raise,
    is_component_file,
    read_dir_deep,
    read_dir_deep_as_paths,
)
from verif.domain.errors import InvalidComponentFileError, RegistryNotInitializedError


# -----------------------------------------------------------------------------
# File name validation
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("path", ["App.vue", "pages/index.vue", "/abs/Deep/Card.vue"])
def test_is_component_file_accepts_vue_files(path: str) -> None:
    assert is_component_file(path) is True


@pytest.mark.parametrize("path", ["App.js", "App.vue.bak", "vue", "components/", "App.VUE"])
def test_is_component_file_rejects_other_files(path: str) -> None:
    assert is_component_file(path) is False


def test_component_file_name_or_raise() -> None:
    assert component_file_name_or_raise("pages/index.vue") == "pages/index.vue"

    with pytest.raises(InvalidComponentFileError) as exc:
        component_file_name_or_raise("pages/index.js")
    assert "pages/index.js should be a vue file." in str(exc.value)


# -----------------------------------------------------------------------------
# Directory discovery
# -----------------------------------------------------------------------------

def test_read_dir_deep_maps_stems_to_paths(write_component, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Files are keyed by their stem in original case, paths joined from the given root."""
    write_component("components/App.vue", "<div/>")
    write_component("components/atoms/Button.vue", "<button/>")
    (tmp_path / "components" / "README.md").write_text("# docs", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = read_dir_deep("components")

    assert result == {
        "App": "components/App.vue",
        "Button": "components/atoms/Button.vue",
    }


def test_read_dir_deep_later_duplicate_overwrites(write_component, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_component("components/a/Card.vue", "<div/>")
    write_component("components/b/Card.vue", "<div/>")
    monkeypatch.chdir(tmp_path)

    assert read_dir_deep("components") == {"Card": "components/b/Card.vue"}


def test_read_dir_deep_as_paths_sorted_walk(write_component, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_component("views/users/list.vue", "<div/>")
    write_component("views/about.vue", "<div/>")
    write_component("views/index.vue", "<div/>")
    monkeypatch.chdir(tmp_path)

    assert read_dir_deep_as_paths("views/") == [
        "views/about.vue",
        "views/index.vue",
        "views/users/list.vue",
    ]


def test_read_dir_deep_as_paths_edge_inputs(write_component, tmp_path: Path) -> None:
    """A single component file yields itself and a missing directory yields nothing."""
    file_path = str(write_component("Single.vue", "<div/>"))

    assert read_dir_deep_as_paths(file_path) == [file_path]
    assert read_dir_deep_as_paths(str(tmp_path / "missing")) == []


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------

def test_registry_get_unknown_key_returns_none() -> None:
    registry = ComponentRegistry({"App": "components/App.vue"})

    assert registry.get("App") == "components/App.vue"
    assert registry.get("Missing") is None


def test_registry_set_and_set_all_overwrite() -> None:
    registry = ComponentRegistry({"App": "components/App.vue"})

    registry.set("App", "other/App.vue")
    registry.set_all({"Card": "components/Card.vue", "App": "final/App.vue"})

    assert registry.get("App") == "final/App.vue"
    assert registry.get("Card") == "components/Card.vue"
    assert len(registry) == 2
    assert "Card" in registry
    assert sorted(registry.keys()) == ["App", "Card"]


def test_uninitialized_registry_rejects_lookups() -> None:
    registry = ComponentRegistry()

    with pytest.raises(RegistryNotInitializedError):
        registry.get("App")

    assert "App" not in registry
    assert len(registry) == 0


def test_uninitialized_registry_becomes_usable_after_set() -> None:
    registry = ComponentRegistry()
    registry.set("pages/index.vue", "pages/index.vue")

    assert registry.get("pages/index.vue") == "pages/index.vue"


def test_registries_do_not_share_state() -> None:
    first = ComponentRegistry({})
    second = ComponentRegistry({})

    first.set("App", "components/App.vue")

    assert second.get("App") is None


def test_from_directory(write_component, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_component("components/App.vue", "<div/>")
    monkeypatch.chdir(tmp_path)

    registry = ComponentRegistry.from_directory("components")

    assert registry.get("App") == "components/App.vue"


def test_from_missing_directory_is_initialized_but_empty(tmp_path: Path) -> None:
    registry = ComponentRegistry.from_directory(str(tmp_path / "nope"))

    assert registry.get("App") is None
