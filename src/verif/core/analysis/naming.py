from __future__ import annotations

"""
Component Name Conversions.

Component references appear in markup as PascalCase, kebab-case or in the
exact spelling of the file. These helpers produce the candidate registry
keys tried, in order, when resolving a tag.
"""

import re
from typing import List

_HYPHENATE_RX = re.compile(r"\B([A-Z])")


def to_upper_camel_case(name: str) -> str:
    """
    Convert a name to UpperCamelCase.

    Splits on hyphens and upper-cases the first letter of every segment,
    leaving the rest of each segment untouched ('add-card-button' ->
    'AddCardButton', 'AddCardButton' unchanged).
    """
    return "".join(segment[:1].upper() + segment[1:] for segment in name.split("-"))


def to_kebab_case(name: str) -> str:
    """
    Convert a name to kebab-case.

    Inserts a hyphen before every uppercase letter that does not start a
    word, then lower-cases ('AddCardButton' -> 'add-card-button').
    """
    return _HYPHENATE_RX.sub(r"-\1", name).lower()


def candidate_keys(tag: str) -> List[str]:
    """Registry keys to try for a tag: camel, kebab, then the raw name."""
    candidates: List[str] = []
    for key in (to_upper_camel_case(tag), to_kebab_case(tag), tag):
        if key not in candidates:
            candidates.append(key)
    return candidates
