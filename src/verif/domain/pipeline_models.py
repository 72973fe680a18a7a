from __future__ import annotations

"""
Pipeline Domain Data Models.

Carries the outcome of a graph loading run from the pipeline engine to the
interface layers (CLI, printers).
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from verif.domain.graph_models import CycleRecord, Node

if TYPE_CHECKING:
    from verif.core.services.registry import ComponentRegistry


@dataclass(frozen=True)
class GraphResult:
    """
    Loaded dependency graphs and the registry they resolve through.

    Attributes:
        roots: One expanded Node per entry point.
        registry: Registry shared by the loader and the printers.
        cycles: Reference cycles reported while loading.
    """
    roots: List[Node]
    registry: "ComponentRegistry"
    cycles: List[CycleRecord] = field(default_factory=list)
