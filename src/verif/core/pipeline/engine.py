from __future__ import annotations

"""
Graph Loading Pipeline.

Coordinates a complete analysis run:
1. Validates the entry point file names.
2. Builds the component registry from the components directory.
3. Registers every entry point under its own path.
4. Expands each entry point into its dependency tree.
"""

import logging
import os
from typing import List, Optional

from verif.core.analysis.graph_loader import GraphLoader, MarkupParser
from verif.core.services.registry import (
    ComponentRegistry,
    component_file_name_or_raise,
    read_dir_deep_as_paths,
)
from verif.domain.errors import RootNotFoundError
from verif.domain.graph_models import Node
from verif.domain.pipeline_models import GraphResult

logger = logging.getLogger(__name__)


def load_graph(
        page_file: str,
        components_dir: str,
        *,
        parser: Optional[MarkupParser] = None,
) -> GraphResult:
    """
    Load the dependency graph of a single entry point.

    Args:
        page_file: Entry point component file.
        components_dir: Directory scanned for components.
        parser: Optional markup parser replacing the default one.

    Returns:
        GraphResult: One root, the registry and any detected cycles.

    Raises:
        InvalidComponentFileError: If page_file is not a component file.
        RootNotFoundError: If page_file does not exist.
    """
    component_file_name_or_raise(page_file)
    _require_file(page_file)

    registry = ComponentRegistry.from_directory(components_dir)
    # Entry points may share a stem (several index.vue), so they are keyed by path
    registry.set(page_file, page_file)

    loader = GraphLoader(registry, parser)
    root = Node(page_file)
    loader.load(root)

    if root.has_edges():
        logger.info(f"Graph loaded for {page_file}: {len(root.edges)} direct dependencies")
    else:
        logger.info(f"{page_file} has no component dependencies")
    return GraphResult(roots=[root], registry=registry, cycles=list(loader.cycles))


def load_all_graphs(
        views_dir: str,
        components_dir: str,
        *,
        parser: Optional[MarkupParser] = None,
) -> GraphResult:
    """
    Load one dependency graph per component file found under views_dir.

    Args:
        views_dir: Directory whose component files are the entry points.
        components_dir: Directory scanned for components.
        parser: Optional markup parser replacing the default one.

    Returns:
        GraphResult: Roots in sorted walk order, the shared registry and
            any detected cycles.

    Raises:
        RootNotFoundError: If views_dir does not exist.
    """
    if not os.path.exists(views_dir):
        raise RootNotFoundError(views_dir)

    registry = ComponentRegistry.from_directory(components_dir)
    loader = GraphLoader(registry, parser)

    root_paths = read_dir_deep_as_paths(views_dir)
    if not root_paths:
        logger.warning(f"No component files found under {views_dir}")

    roots: List[Node] = []
    for entry in root_paths:
        registry.set(entry, component_file_name_or_raise(entry))
        root = Node(entry)
        loader.load(root)
        roots.append(root)

    logger.info(f"Graphs loaded for {len(roots)} entry points under {views_dir}")
    return GraphResult(roots=roots, registry=registry, cycles=list(loader.cycles))


def _require_file(path: str) -> None:
    if not os.path.isfile(path):
        logger.error(f"Root component not found: {path}")
        raise RootNotFoundError(path)
