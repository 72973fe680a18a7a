from __future__ import annotations

"""
Graph Statistics.

Computes in-degree and out-degree per component label from a flat element
sequence.
"""

from typing import Callable, Dict, Iterable, List, TypeVar

from verif.domain.graph_models import ComponentStatistics, EdgeDef, GraphElement, is_edge_def

T = TypeVar("T")
K = TypeVar("K")


def group_by(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Group items by a derived key, preserving first-seen key order.

    Args:
        items: Items to group.
        key: Function computing the grouping key of an item.
    """
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def create_component_statistics(elements: Iterable[GraphElement]) -> List[ComponentStatistics]:
    """
    Build one degree record per label that takes part in at least one edge.

    Labels present only as isolated node definitions are left out.

    Args:
        elements: Node and edge records from the object strategy.

    Returns:
        List[ComponentStatistics]: Records in first-seen label order
            (targets first, then sources).
    """
    edges: List[EdgeDef] = [e for e in elements if is_edge_def(e)]  # type: ignore[misc]
    by_target = group_by(edges, lambda e: e.target)
    by_source = group_by(edges, lambda e: e.source)

    labels = list(dict.fromkeys(list(by_target) + list(by_source)))

    return [
        ComponentStatistics(
            name=label,
            indegree=len(by_target.get(label, [])),
            outdegree=len(by_source.get(label, [])),
        )
        for label in labels
    ]
