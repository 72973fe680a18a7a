from __future__ import annotations

"""
Dependency Graph Data Models.

Defines the in-memory vertex used during graph construction and the flat
element records (node and edge definitions) shared by every output format.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Union

# -----------------------------------------------------------------------------
# GRAPH CONSTRUCTION
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    A component occurrence in the dependency tree of one root.

    Children are owned exclusively by their parent: the same component
    referenced from two parents yields two independent Node instances.

    Attributes:
        name: Registry key the node resolves through.
        edges: Child key to child Node mapping.
    """
    name: str
    edges: Dict[str, "Node"] = field(default_factory=dict)

    def add_edges(self, edges: Mapping[str, "Node"]) -> None:
        """
        Merge children into the node without replacing existing ones.

        Args:
            edges: Candidate children keyed by component key.
        """
        for key, child in edges.items():
            if key not in self.edges:
                self.edges[key] = child

    def has_edges(self) -> bool:
        return len(self.edges) > 0


@dataclass(frozen=True)
class CycleRecord:
    """
    A reference cycle detected while expanding a root.

    Attributes:
        path: Resolved labels from the first repeated component back to itself.
    """
    path: List[str]

    def describe(self) -> str:
        return " -> ".join(self.path)

# -----------------------------------------------------------------------------
# GRAPH ELEMENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NodeDef:
    """Node definition keyed by the resolved file label."""
    id: str
    name: str


@dataclass(frozen=True)
class EdgeDef:
    """Edge definition from a parent label to a child label."""
    id: str
    source: str
    target: str


GraphElement = Union[NodeDef, EdgeDef]


def is_edge_def(element: GraphElement) -> bool:
    """Discriminate edge records by the presence of both endpoints."""
    return hasattr(element, "source") and hasattr(element, "target")

# -----------------------------------------------------------------------------
# REPORTING
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ComponentStatistics:
    """
    Degree metrics of a single component label.

    Attributes:
        name: Resolved component file label.
        indegree: Number of edges pointing at the component.
        outdegree: Number of edges leaving the component.
    """
    name: str
    indegree: int
    outdegree: int
