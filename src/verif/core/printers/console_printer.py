from __future__ import annotations

"""
Console Tree Printer.

Writes one line per node: the root label unindented, every descendant
prefixed by two spaces per depth level and a tree connector.
"""

from typing import List

from verif.core.printers.base import Printer
from verif.domain import constants as const
from verif.domain.graph_models import Node


class ConsolePrinter(Printer):

    def print(self, node: Node) -> None:
        self._write_lines(self.create_lines(node))
        self._run_if_handler_present()

    def print_all(self, nodes: List[Node]) -> None:
        for node in nodes:
            self._write_lines(self.create_lines(node))
        self._run_if_handler_present()

    def create_lines(self, node: Node, depth: int = 0) -> List[str]:
        """
        Format a tree as indented lines, children in edge order.

        Args:
            node: Tree root.
            depth: Nesting level of the root.

        Returns:
            List[str]: Rendered lines.
        """
        label = self.registry.get(node.name) or node.name
        if depth > 0:
            lines = [f"{const.TREE_INDENT * depth}{const.TREE_CONNECTOR}{label}"]
        else:
            lines = [label]

        for child in node.edges.values():
            lines.extend(self.create_lines(child, depth + 1))
        return lines

    def _write_lines(self, lines: List[str]) -> None:
        self._write("\n".join(lines) + "\n")
