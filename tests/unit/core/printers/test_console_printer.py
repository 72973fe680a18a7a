from __future__ import annotations

"""
Unit tests for the Console Tree Printer.
"""

import io

from verif.core.printers.console_printer import ConsolePrinter
from verif.core.services.registry import ComponentRegistry
from verif.domain.graph_models import Node


def make_printer(entries, stream=None) -> ConsolePrinter:
    return ConsolePrinter(ComponentRegistry(entries), stream=stream or io.StringIO())


def test_create_lines_single_child() -> None:
    printer = make_printer({"App": "components/App.vue", "pages/index.vue": "pages/index.vue"})
    root = Node("pages/index.vue", {"App": Node("App")})

    assert printer.create_lines(root) == [
        "pages/index.vue",
        "  └── components/App.vue",
    ]


def test_create_lines_indents_by_depth() -> None:
    printer = make_printer({
        "App": "components/App.vue",
        "Button": "components/atoms/Button.vue",
        "Header": "components/Header.vue",
        "pages/index.vue": "pages/index.vue",
    })
    root = Node("pages/index.vue", {
        "App": Node("App", {"Button": Node("Button")}),
        "Header": Node("Header"),
    })

    assert printer.create_lines(root) == [
        "pages/index.vue",
        "  └── components/App.vue",
        "    └── components/atoms/Button.vue",
        "  └── components/Header.vue",
    ]


def test_create_lines_falls_back_to_node_name() -> None:
    printer = make_printer({})
    assert printer.create_lines(Node("pages/missing.vue")) == ["pages/missing.vue"]


def test_print_writes_lines_and_runs_handler() -> None:
    stream = io.StringIO()
    printer = make_printer({"App": "components/App.vue", "pages/index.vue": "pages/index.vue"}, stream)
    calls = []

    printer.on_completed(lambda: calls.append("done")).print(Node("pages/index.vue", {"App": Node("App")}))

    assert stream.getvalue() == "pages/index.vue\n  └── components/App.vue\n"
    assert calls == ["done"]


def test_print_all_writes_every_tree_once_then_runs_handler() -> None:
    stream = io.StringIO()
    printer = make_printer({
        "App": "components/App.vue",
        "pages/index.vue": "pages/index.vue",
        "pages/about.vue": "pages/about.vue",
    }, stream)
    calls = []
    printer.on_completed(lambda: calls.append(stream.getvalue()))

    printer.print_all([
        Node("pages/about.vue", {"App": Node("App")}),
        Node("pages/index.vue", {"App": Node("App")}),
    ])

    expected = (
        "pages/about.vue\n  └── components/App.vue\n"
        "pages/index.vue\n  └── components/App.vue\n"
    )
    assert stream.getvalue() == expected
    assert calls == [expected]


def test_print_without_handler() -> None:
    stream = io.StringIO()
    make_printer({"pages/index.vue": "pages/index.vue"}, stream).print(Node("pages/index.vue"))

    assert stream.getvalue() == "pages/index.vue\n"
