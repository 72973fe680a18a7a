from __future__ import annotations

"""
Visual Graph Printer.

Writes cytoscape element definitions as JSON and hands the file over to a
preview callback (normally the local HTTP server).
"""

import json
import logging
import os
from typing import Any, Callable, List, Optional, TextIO

from verif.core.graph.generator import GraphGenerator
from verif.core.graph.strategies import OutputKind
from verif.core.printers.base import Printer
from verif.core.services.registry import ComponentRegistry
from verif.domain import constants as const
from verif.domain.graph_models import Node
from verif.infra.fs import write_text

logger = logging.getLogger(__name__)

PreviewCallback = Callable[[str], None]


def write_elements(elements: List[Any], output_dir: str) -> str:
    """
    Persist graph elements as a JSON array, replacing any previous file.

    Args:
        elements: Cytoscape element definitions.
        output_dir: Destination directory.

    Returns:
        str: Path of the written file.
    """
    path = os.path.join(output_dir, const.ELEMENTS_FILENAME)
    write_text(path, json.dumps(elements, ensure_ascii=False))
    logger.debug(f"Graph elements written to {path}")
    return path


class VisualGraphPrinter(Printer):

    def __init__(
            self,
            registry: ComponentRegistry,
            output_dir: str,
            preview: Optional[PreviewCallback] = None,
            stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(registry, stream)
        self.output_dir = output_dir
        self.preview = preview
        self.generator = GraphGenerator(registry, OutputKind.CYTOSCAPE)
        self.elements_path: Optional[str] = None

    def print(self, node: Node) -> None:
        self._publish(self.create_graph_elements(node))

    def print_all(self, nodes: List[Node]) -> None:
        self._publish(self.generator.generate_all(nodes))

    def create_graph_elements(self, node: Node) -> List[Any]:
        return self.generator.generate(node)

    def _publish(self, elements: List[Any]) -> None:
        self.elements_path = write_elements(elements, self.output_dir)
        self._run_if_handler_present()
        if self.preview:
            self.preview(self.elements_path)
