from __future__ import annotations

"""
Base Definitions for Graph Output Strategies.

Every strategy derives element ids with the same rule (node id = label,
edge id = '<source>-<target>') so deduplication behaves identically
whatever the record shape.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class OutputKind(str, Enum):
    """Record shapes the graph generator can emit."""
    OBJECT = "object"
    CYTOSCAPE = "cytoscape"


def node_id(name: str) -> str:
    return name


def edge_id(source: str, target: str) -> str:
    return f"{source}-{target}"


class GraphStrategy(ABC):
    """
    Abstract factory for node and edge records of one output shape.
    """

    kind: OutputKind

    @abstractmethod
    def create_node_def(self, name: str) -> Any:
        """
        Create the record representing a component.

        Args:
            name: Resolved component file label.
        """

    @abstractmethod
    def create_edge_def(self, source: str, target: str) -> Any:
        """
        Create the record representing a dependency between two components.

        Args:
            source: Label of the depending component.
            target: Label of the component depended upon.
        """

    @abstractmethod
    def get_id(self, element: Any) -> str:
        """Return the identity used for deduplication."""
