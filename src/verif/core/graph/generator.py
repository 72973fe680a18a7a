from __future__ import annotations

"""
Graph Element Generator.

Flattens Node trees into node and edge records of a chosen output shape.
A resolution cache, passed explicitly through the recursion, guarantees
that each component label and each parent/child pair is emitted once per
generation pass, and that a shared subtree is expanded only the first time
it is met.
"""

import logging
from typing import Any, Iterable, List, Optional, Set, Union

from verif.core.graph.strategies import GraphStrategy, OutputKind, get_strategy
from verif.core.services.registry import ComponentRegistry
from verif.domain.graph_models import Node

logger = logging.getLogger(__name__)


class ResolutionCache:
    """
    Ids of the elements already emitted during one generation pass.

    Element equality is decided by id only.
    """

    def __init__(self, strategy: GraphStrategy) -> None:
        self._strategy = strategy
        self._resolved_ids: Set[str] = set()

    def mark_as_resolved(self, *elements: Any) -> None:
        for element in elements:
            self._resolved_ids.add(self._strategy.get_id(element))

    def already_resolved(self, element: Any) -> bool:
        return self._strategy.get_id(element) in self._resolved_ids

    def __len__(self) -> int:
        return len(self._resolved_ids)


class GraphGenerator:
    """
    Produces graph elements for one output kind.

    Labels are the file paths the registry maps node names to, so two
    nodes naming the same component collapse into one node record.
    """

    def __init__(
            self,
            registry: ComponentRegistry,
            output: Union[OutputKind, GraphStrategy] = OutputKind.OBJECT,
    ) -> None:
        self.registry = registry
        self.strategy = output if isinstance(output, GraphStrategy) else get_strategy(output)

    def new_cache(self) -> ResolutionCache:
        return ResolutionCache(self.strategy)

    def generate(self, node: Node, cache: Optional[ResolutionCache] = None) -> List[Any]:
        """
        Create the elements of a single tree.

        Children come first: each edge record is followed by the child's
        own elements, and the node record closes its branch.

        Args:
            node: Root of the tree.
            cache: Resolution cache to share with other calls.

        Returns:
            List[Any]: Deduplicated node and edge records.
        """
        return self._generate(node, cache if cache is not None else self.new_cache())

    def generate_all(self, nodes: Iterable[Node], cache: Optional[ResolutionCache] = None) -> List[Any]:
        """
        Create the elements of several trees with one shared cache.

        Args:
            nodes: Root nodes, processed in order.
            cache: Resolution cache to share with other calls.

        Returns:
            List[Any]: Deduplicated node and edge records of every tree.
        """
        cache = cache if cache is not None else self.new_cache()
        elements: List[Any] = []
        for node in nodes:
            elements.extend(self._generate(node, cache))
        logger.debug(f"Generated {len(elements)} graph elements ({self.strategy.kind.value})")
        return elements

    def label_of(self, node: Node) -> str:
        """Resolved file label of a node, or its own name when unregistered."""
        return self.registry.get(node.name) or node.name

    def _generate(self, node: Node, cache: ResolutionCache) -> List[Any]:
        label = self.label_of(node)
        node_def = self.strategy.create_node_def(label)
        if cache.already_resolved(node_def):
            return []
        cache.mark_as_resolved(node_def)

        elements: List[Any] = []
        for child in node.edges.values():
            edge_def = self.strategy.create_edge_def(label, self.label_of(child))
            if not cache.already_resolved(edge_def):
                cache.mark_as_resolved(edge_def)
                elements.append(edge_def)
            elements.extend(self._generate(child, cache))

        elements.append(node_def)
        return elements
