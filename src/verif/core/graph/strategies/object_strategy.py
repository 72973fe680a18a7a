from __future__ import annotations

"""
Object Graph Strategy.

Emits the generic NodeDef/EdgeDef records consumed by the statistics report.
"""

from verif.core.graph.strategies.base import GraphStrategy, OutputKind, edge_id, node_id
from verif.domain.graph_models import EdgeDef, GraphElement, NodeDef


class ObjectGraphStrategy(GraphStrategy):
    kind = OutputKind.OBJECT

    def create_node_def(self, name: str) -> GraphElement:
        return NodeDef(id=node_id(name), name=name)

    def create_edge_def(self, source: str, target: str) -> GraphElement:
        return EdgeDef(id=edge_id(source, target), source=source, target=target)

    def get_id(self, element: GraphElement) -> str:
        return element.id
