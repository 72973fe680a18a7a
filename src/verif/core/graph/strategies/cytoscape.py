from __future__ import annotations

"""
Cytoscape Graph Strategy.

Emits element definitions in the JSON shape the cytoscape.js renderer
expects: every record wraps its fields in a 'data' mapping.
"""

from typing import Any, Dict

from verif.core.graph.strategies.base import GraphStrategy, OutputKind, edge_id, node_id

CytoscapeElement = Dict[str, Dict[str, Any]]


class CytoscapeGraphStrategy(GraphStrategy):
    kind = OutputKind.CYTOSCAPE

    def create_node_def(self, name: str) -> CytoscapeElement:
        return {"data": {"id": node_id(name)}}

    def create_edge_def(self, source: str, target: str) -> CytoscapeElement:
        return {
            "data": {
                "id": edge_id(source, target),
                "source": source,
                "target": target,
            }
        }

    def get_id(self, element: CytoscapeElement) -> str:
        return str(element.get("data", {}).get("id", ""))
