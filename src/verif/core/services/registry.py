from __future__ import annotations

"""
Component Discovery and Registry Service.

Maps component keys (file stems for discovered components, original paths
for entry points) to component file paths. A registry is owned by a single
run and handed explicitly to the loader and the printers.
"""

import logging
import os
from typing import Dict, Iterable, List, Mapping, Optional

from verif.domain import constants as const
from verif.domain.errors import InvalidComponentFileError, RegistryNotInitializedError

logger = logging.getLogger(__name__)

ComponentDictionary = Dict[str, str]


# ==============================================================================
# FILE NAME VALIDATION
# ==============================================================================

def is_component_file(path: str) -> bool:
    """Return True when the path names a single-file component."""
    return os.path.splitext(path)[1] == const.COMPONENT_EXTENSION


def component_file_name_or_raise(path: str) -> str:
    """
    Assert that a path names a component file.

    Raises:
        InvalidComponentFileError: If the extension is not recognized.
    """
    if is_component_file(path):
        return path
    raise InvalidComponentFileError(path)


# ==============================================================================
# DIRECTORY DISCOVERY
# ==============================================================================

def read_dir_deep(path: str) -> ComponentDictionary:
    """
    Walk a directory and map every component file stem to its path.

    Paths are built by joining with '/' from the given root, so a registry
    seeded from 'components' yields labels such as 'components/atoms/Button.vue'.
    A later file with the same stem overwrites an earlier one.

    Args:
        path: Directory (or single component file) to scan.

    Returns:
        ComponentDictionary: Stem to file path mapping.
    """
    results: ComponentDictionary = {}
    for file_path in read_dir_deep_as_paths(path):
        stem = os.path.splitext(file_path.split("/")[-1])[0]
        if stem in results:
            logger.debug(f"Component '{stem}' redefined by {file_path}")
        results[stem] = file_path
    return results


def read_dir_deep_as_paths(path: str) -> List[str]:
    """
    Collect component file paths below a directory in sorted walk order.

    Args:
        path: Directory (or single component file) to scan.

    Returns:
        List[str]: Component file paths joined with '/'.
    """
    if is_component_file(path) and os.path.isfile(path):
        return [path]
    if not os.path.isdir(path):
        return []

    found: List[str] = []
    for entry in sorted(os.listdir(path)):
        found.extend(read_dir_deep_as_paths(f"{path.rstrip('/')}/{entry}"))
    return found


# ==============================================================================
# REGISTRY
# ==============================================================================

class ComponentRegistry:
    """
    Lookup table from component keys to component file paths.

    Unknown keys resolve to None. A registry built without entries
    (entries=None) is uninitialized and rejects lookups until an entry is set.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._components: Optional[ComponentDictionary] = (
            dict(entries) if entries is not None else None
        )

    @classmethod
    def from_directory(cls, components_dir: str) -> "ComponentRegistry":
        """
        Populate a registry by scanning a components directory.

        Args:
            components_dir: Root directory to scan recursively.
        """
        entries = read_dir_deep(components_dir)
        logger.debug(f"Registry: {len(entries)} components discovered in {components_dir}")
        return cls(entries)

    def get(self, key: str) -> Optional[str]:
        """
        Look up a component path.

        Raises:
            RegistryNotInitializedError: If the registry was never populated.
        """
        if self._components is None:
            raise RegistryNotInitializedError()
        return self._components.get(key)

    def set(self, key: str, file_path: str) -> None:
        """Register or overwrite a single entry."""
        if self._components is None:
            self._components = {}
        self._components[key] = file_path

    def set_all(self, entries: Mapping[str, str]) -> None:
        """Merge entries, overwriting existing keys."""
        if self._components is None:
            self._components = {}
        self._components.update(entries)

    def keys(self) -> Iterable[str]:
        return list(self._components or {})

    def __contains__(self, key: object) -> bool:
        return bool(self._components) and key in self._components  # type: ignore[operator]

    def __len__(self) -> int:
        return len(self._components or {})
