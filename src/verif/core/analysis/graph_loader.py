from __future__ import annotations

"""
Dependency Graph Loader.

Expands a root Node into its component dependency tree. Each component's
template is compiled, every tag it contains is matched against the
registry, and resolved tags become child nodes that are expanded in turn.
"""

import logging
from typing import Dict, List, Optional, Protocol

from verif.core.analysis.naming import candidate_keys
from verif.core.analysis.sfc_parser import VueTemplateParser
from verif.core.services.registry import ComponentRegistry
from verif.domain import constants as const
from verif.domain.graph_models import CycleRecord, Node
from verif.domain.markup_models import ComponentDescriptor, MarkupElement
from verif.infra.fs import read_text

logger = logging.getLogger(__name__)


class MarkupParser(Protocol):
    """Capability surface the loader needs from a template parser."""

    def parse_component(self, source: str) -> ComponentDescriptor: ...

    def compile_template(self, template_source: str) -> Optional[MarkupElement]: ...


class GraphLoader:
    """
    Recursive graph builder bound to one registry.

    Reference cycles are cut: a component already on the active expansion
    path is attached as an edge but not expanded again, and the cycle is
    recorded in `cycles`.
    """

    def __init__(self, registry: ComponentRegistry, parser: Optional[MarkupParser] = None) -> None:
        self.registry = registry
        self.parser: MarkupParser = parser or VueTemplateParser()
        self.cycles: List[CycleRecord] = []

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def load(self, node: Node) -> None:
        """
        Expand a node and all of its descendants in place.

        Unresolvable nodes and components without template markup are left
        without edges. Read and parse failures propagate.

        Args:
            node: The node to expand.
        """
        self._load(node, [])

    def resolve_key(self, tag: str) -> Optional[str]:
        """
        Find the registry key a markup reference resolves through.

        UpperCamelCase, kebab-case and the raw spelling are tried in that
        order, so `<app>` resolves to 'App' even when 'app' is registered too.

        Args:
            tag: Tag name found in markup.

        Returns:
            Optional[str]: Matching registry key, or None.
        """
        for key in candidate_keys(tag):
            if self.registry.get(key):
                return key
        return None

    def search_file_path(self, tag: str) -> Optional[str]:
        """Resolve a markup reference to the file path of its component."""
        key = self.resolve_key(tag)
        return self.registry.get(key) if key else None

    def node_file_path(self, node: Node) -> Optional[str]:
        """
        File path of a node.

        Node names are registry keys already (entry point paths or keys
        resolved from markup), so the exact key is looked up first.
        """
        return self.registry.get(node.name) or self.search_file_path(node.name)

    def collect_tags(self, root: MarkupElement) -> List[str]:
        """
        List the root tag and every descendant tag in depth-first pre-order.

        Members of a conditional chain are visited once each; the owner
        element, which heads its own branch list, is not revisited.
        """
        tags: List[str] = []
        self._traverse(root, tags)
        return tags

    # -------------------------------------------------------------------------
    # RECURSION
    # -------------------------------------------------------------------------

    def _load(self, node: Node, active_path: List[str]) -> None:
        file_path = self.node_file_path(node)
        if not file_path:
            logger.warning(f"{node.name} does not found in directory")
            return

        if file_path in active_path:
            cycle = active_path[active_path.index(file_path):] + [file_path]
            record = CycleRecord(path=cycle)
            self.cycles.append(record)
            logger.warning(f"Reference cycle skipped: {record.describe()}")
            return

        root = self._compile(file_path)
        if root is None:
            return

        edges: Dict[str, Node] = {}
        for tag in self.collect_tags(root):
            if tag in const.RESERVED_TAGS:
                continue
            key = self.resolve_key(tag)
            if key is None:
                logger.debug(f"<{tag}> in {file_path} is not a known component")
                continue
            if key not in edges:
                edges[key] = Node(key)

        if not edges:
            return

        node.add_edges(edges)
        active_path.append(file_path)
        try:
            for child in list(node.edges.values()):
                self._load(child, active_path)
        finally:
            active_path.pop()

    def _compile(self, file_path: str) -> Optional[MarkupElement]:
        source = read_text(file_path)
        descriptor = self.parser.parse_component(source)
        if descriptor.template_source is None:
            logger.debug(f"{file_path} has no template block")
            return None
        return self.parser.compile_template(descriptor.template_source)

    def _traverse(self, element: MarkupElement, tags: List[str]) -> None:
        tags.append(element.tag)
        for child in element.children:
            self._traverse(child, tags)
        for branch in element.branches:
            if branch is element:
                continue
            self._traverse(branch, tags)
