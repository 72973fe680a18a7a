from __future__ import annotations

from typing import Dict, Type

from .base import GraphStrategy, OutputKind, edge_id, node_id
from .cytoscape import CytoscapeElement, CytoscapeGraphStrategy
from .object_strategy import ObjectGraphStrategy

_STRATEGIES: Dict[OutputKind, Type[GraphStrategy]] = {
    OutputKind.OBJECT: ObjectGraphStrategy,
    OutputKind.CYTOSCAPE: CytoscapeGraphStrategy,
}


def get_strategy(kind: OutputKind) -> GraphStrategy:
    """Instantiate the strategy registered for an output kind."""
    return _STRATEGIES[OutputKind(kind)]()


__all__ = [
    "GraphStrategy",
    "OutputKind",
    "ObjectGraphStrategy",
    "CytoscapeGraphStrategy",
    "CytoscapeElement",
    "get_strategy",
    "node_id",
    "edge_id",
]
