from __future__ import annotations

"""
Unit tests for the Visual Graph Printer.

Verifies that cytoscape elements are persisted as JSON and that the
completion handler runs before the preview callback.
"""

import json
from pathlib import Path
from typing import List

from verif.core.printers.visual_graph_printer import VisualGraphPrinter, write_elements
from verif.core.services.registry import ComponentRegistry
from verif.domain.graph_models import Node

REGISTRY = {
    "App": "components/App.vue",
    "Button": "components/Button.vue",
    "pages/index.vue": "pages/index.vue",
    "pages/about.vue": "pages/about.vue",
}


def test_write_elements_creates_directory(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out"

    path = write_elements([{"data": {"id": "a"}}], str(target))

    assert Path(path) == target / "elements.json"
    assert json.loads(Path(path).read_text(encoding="utf-8")) == [{"data": {"id": "a"}}]


def test_print_writes_elements_without_preview(tmp_path: Path) -> None:
    printer = VisualGraphPrinter(ComponentRegistry(REGISTRY), str(tmp_path))

    printer.print(Node("pages/index.vue", {"App": Node("App")}))

    data = json.loads((tmp_path / "elements.json").read_text(encoding="utf-8"))
    assert data == [
        {"data": {"id": "pages/index.vue-components/App.vue", "source": "pages/index.vue", "target": "components/App.vue"}},
        {"data": {"id": "components/App.vue"}},
        {"data": {"id": "pages/index.vue"}},
    ]
    assert printer.elements_path == str(tmp_path / "elements.json")


def test_print_all_runs_handler_then_preview(tmp_path: Path) -> None:
    events: List[str] = []
    printer = VisualGraphPrinter(
        ComponentRegistry(REGISTRY),
        str(tmp_path),
        preview=lambda path: events.append(f"preview:{Path(path).name}"),
    )
    printer.on_completed(lambda: events.append("completed"))

    printer.print_all([
        Node("pages/index.vue", {"App": Node("App", {"Button": Node("Button")})}),
        Node("pages/about.vue", {"App": Node("App", {"Button": Node("Button")})}),
    ])

    assert events == ["completed", "preview:elements.json"]
    ids = [e["data"]["id"] for e in json.loads((tmp_path / "elements.json").read_text(encoding="utf-8"))]
    assert ids.count("components/App.vue") == 1
    assert "pages/about.vue-components/App.vue" in ids


def test_print_overwrites_previous_elements(tmp_path: Path) -> None:
    (tmp_path / "elements.json").write_text("stale", encoding="utf-8")
    printer = VisualGraphPrinter(ComponentRegistry(REGISTRY), str(tmp_path))

    printer.print(Node("pages/index.vue"))

    assert json.loads((tmp_path / "elements.json").read_text(encoding="utf-8")) == [
        {"data": {"id": "pages/index.vue"}}
    ]
