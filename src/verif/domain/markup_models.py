from __future__ import annotations

"""
Markup Boundary Models.

The only surface of the template parser the graph loader depends on: a
descriptor holding the raw template source and a tree of elements exposing
tag, children and conditional branches.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ComponentDescriptor:
    """
    Sections extracted from a single-file component.

    Attributes:
        template_source: Inner content of the template block, or None.
    """
    template_source: Optional[str] = None


@dataclass
class MarkupElement:
    """
    One element of a compiled template.

    Attributes:
        tag: Tag name in its original case.
        children: Ordered child elements.
        branches: Members of a v-if/v-else-if/v-else chain owned by this
                  element. When present, the first branch is the element itself.
    """
    tag: str
    children: List["MarkupElement"] = field(default_factory=list)
    branches: List["MarkupElement"] = field(default_factory=list)
