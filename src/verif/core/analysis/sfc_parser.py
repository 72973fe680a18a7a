from __future__ import annotations

"""
Single-File Component Parser.

Adapts component source text to the markup boundary used by the graph
loader: the template block is located first, then compiled into a tree of
MarkupElement objects with v-if/v-else-if/v-else chains folded into their
owning element, the way the Vue compiler exposes them.
"""

import logging
import re
from html.parser import HTMLParser
from typing import Dict, List, Optional, Tuple

from verif.domain import constants as const
from verif.domain.errors import TemplateParseError
from verif.domain.markup_models import ComponentDescriptor, MarkupElement

logger = logging.getLogger(__name__)

# Top-level block delimiters and comments, in source order
_BLOCK_TOKEN_RX = re.compile(
    r"<!--.*?-->|<(/?)(template|script|style)\b[^>]*?(/?)>",
    re.IGNORECASE | re.DOTALL,
)
_RAW_TAG_NAME_RX = re.compile(r"<\s*([^\s/>]+)")

_IF = "if"
_ELSE_IF = "else-if"
_ELSE = "else"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class VueTemplateParser:
    """
    Markup parser backing the graph loader.

    Any object exposing parse_component and compile_template with the same
    signatures can stand in for it.
    """

    def parse_component(self, source: str) -> ComponentDescriptor:
        """
        Extract the first top-level template block of a component.

        Args:
            source: Raw single-file component text.

        Returns:
            ComponentDescriptor: Template content, or None when absent.

        Raises:
            TemplateParseError: If the template block is never closed.
        """
        return ComponentDescriptor(template_source=_extract_template(source))

    def compile_template(self, template_source: str) -> Optional[MarkupElement]:
        """
        Build the element tree of a template.

        Args:
            template_source: Inner content of a template block.

        Returns:
            Optional[MarkupElement]: The root element, a fragment wrapping
                several roots, or None for an empty template.

        Raises:
            TemplateParseError: If a stray </template> end tag is found.
        """
        builder = _TemplateTreeBuilder()
        builder.feed(template_source)
        builder.close()

        roots = builder.roots
        if not roots:
            return None
        if len(roots) == 1:
            return roots[0]
        return MarkupElement(tag=const.FRAGMENT_TAG, children=roots)


_default_parser = VueTemplateParser()


def parse_component(source: str) -> ComponentDescriptor:
    return _default_parser.parse_component(source)


def compile_template(template_source: str) -> Optional[MarkupElement]:
    return _default_parser.compile_template(template_source)


# -----------------------------------------------------------------------------
# BLOCK EXTRACTION
# -----------------------------------------------------------------------------

def _extract_template(source: str) -> Optional[str]:
    """Return the inner text of the first top-level template block."""
    depth = 0
    start = 0
    raw_block: Optional[str] = None

    for match in _BLOCK_TOKEN_RX.finditer(source):
        name = match.group(2)
        if name is None:
            continue  # comment

        name = name.lower()
        closing = match.group(1) == "/"
        self_closing = match.group(3) == "/"

        # Inside <script>/<style>: only their own end tag matters
        if raw_block is not None:
            if closing and name == raw_block:
                raw_block = None
            continue

        if name != "template":
            if depth == 0 and not closing and not self_closing:
                raw_block = name
            continue

        if closing:
            if depth == 0:
                raise TemplateParseError("Unexpected </template> outside of a template block.")
            depth -= 1
            if depth == 0:
                return source[start:match.start()]
            continue

        if self_closing:
            if depth == 0:
                return ""
            continue

        if depth == 0:
            start = match.end()
        depth += 1

    if depth > 0:
        raise TemplateParseError("Template block is missing its closing </template> tag.")
    return None


# -----------------------------------------------------------------------------
# TREE BUILDING
# -----------------------------------------------------------------------------

class _TemplateTreeBuilder(HTMLParser):
    """
    HTMLParser subclass assembling MarkupElement trees.

    HTMLParser lower-cases tag names, so the original spelling is recovered
    from the raw start tag text to keep PascalCase component references.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._container = MarkupElement(tag="")
        self._stack: List[MarkupElement] = [self._container]
        self._conditions: Dict[int, str] = {}

    @property
    def roots(self) -> List[MarkupElement]:
        return self._container.children

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        element = self._open_element(tag, attrs)
        if tag not in const.VOID_ELEMENTS:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self._open_element(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        for index in range(len(self._stack) - 1, 0, -1):
            if self._stack[index].tag.lower() == tag:
                # Elements left open inside are closed implicitly
                closed = self._stack[index:]
                del self._stack[index:]
                for element in closed:
                    self._fold_conditions(element.children)
                return

        if tag in const.VOID_ELEMENTS:
            return
        if tag == "template":
            raise TemplateParseError("Unexpected closing tag </template> in template.")
        # Stray end tags are dropped, as the Vue compiler does
        logger.warning(f"Stray end tag </{tag}> ignored.")

    def close(self) -> None:
        super().close()
        for element in self._stack:
            self._fold_conditions(element.children)
        del self._stack[1:]

    def _open_element(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> MarkupElement:
        element = MarkupElement(tag=self._original_tag_name(tag))
        condition = _condition_kind(attrs)
        if condition:
            self._conditions[id(element)] = condition
        self._stack[-1].children.append(element)
        return element

    def _original_tag_name(self, fallback: str) -> str:
        raw = self.get_starttag_text() or ""
        match = _RAW_TAG_NAME_RX.match(raw)
        if match and match.group(1).lower() == fallback:
            return match.group(1)
        return fallback

    def _fold_conditions(self, children: List[MarkupElement]) -> None:
        """Move v-else-if/v-else siblings into the branches of their v-if owner."""
        folded: List[MarkupElement] = []
        owner: Optional[MarkupElement] = None

        for child in children:
            kind = self._conditions.get(id(child))
            if kind in (_ELSE_IF, _ELSE) and owner is not None:
                owner.branches.append(child)
                if kind == _ELSE:
                    owner = None
                continue

            if kind in (_ELSE_IF, _ELSE):
                logger.debug(f"<{child.tag}> has v-{kind} without a preceding v-if")

            if kind == _IF:
                child.branches = [child]
                owner = child
            else:
                owner = None
            folded.append(child)

        children[:] = folded


def _condition_kind(attrs: List[Tuple[str, Optional[str]]]) -> Optional[str]:
    names = {name for name, _ in attrs}
    if "v-if" in names:
        return _IF
    if "v-else-if" in names:
        return _ELSE_IF
    if "v-else" in names:
        return _ELSE
    return None
