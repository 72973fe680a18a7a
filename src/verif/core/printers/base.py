from __future__ import annotations

"""
Printer Interface.

Printers render loaded dependency trees. They resolve labels through the
registry of the run and notify an optional completion handler once output
has been produced.
"""

import sys
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, TextIO

from verif.core.services.registry import ComponentRegistry
from verif.domain.graph_models import Node

CompletedHandler = Callable[[], None]


class Printer(ABC):
    """
    Abstract base class for output renderers.
    """

    def __init__(self, registry: ComponentRegistry, stream: Optional[TextIO] = None) -> None:
        self.registry = registry
        self._stream = stream
        self._completed_handler: Optional[CompletedHandler] = None

    @abstractmethod
    def print(self, node: Node) -> None:
        """
        Render the tree of a single root.

        Args:
            node: Expanded root node.
        """

    @abstractmethod
    def print_all(self, nodes: List[Node]) -> None:
        """
        Render the trees of several roots as one output.

        Args:
            nodes: Expanded root nodes.
        """

    def on_completed(self, handler: CompletedHandler) -> "Printer":
        """Register a callback run after the output is produced."""
        self._completed_handler = handler
        return self

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stdout (tests, pipes) is honoured
        return self._stream or sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _run_if_handler_present(self) -> None:
        if self._completed_handler:
            self._completed_handler()
