from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Factories writing single-file components into temporary directories.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


ComponentWriter = Callable[..., Path]


def vue_source(template: Optional[str], script: str = "export default {}") -> str:
    """Assemble a single-file component with an optional template block."""
    parts = []
    if template is not None:
        parts.append(f"<template>\n{template}\n</template>")
    parts.append(f"<script>\n{script}\n</script>")
    return "\n\n".join(parts) + "\n"


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def write_component(tmp_path: Path) -> ComponentWriter:
    """
    Return a factory writing a component below tmp_path.

    Usage:
        write_component("components/App.vue", "<div><Button/></div>")
    """

    def _write(relative_path: str, template: Optional[str] = None, *, raw: Optional[str] = None) -> Path:
        target = tmp_path / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(raw if raw is not None else vue_source(template), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def sample_app(tmp_path: Path, write_component: ComponentWriter, monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    """
    Create a small application and chdir into it.

    Structure:
    /pages
      index.vue            -> <App/>
      about.vue            -> <app/> <Card/>
    /components
      App.vue              -> <Button/> <LinkButton/> <card-list/>
      atoms/Button.vue     -> <button/>
      atoms/LinkButton.vue -> <a/>
      CardList.vue         -> <Card v-for/>
      Card.vue             -> <div/>
    """
    write_component("pages/index.vue", "<div><App/></div>")
    write_component("pages/about.vue", "<main><app></app><Card/></main>")
    write_component(
        "components/App.vue",
        "<div>\n  <Button/>\n  <LinkButton/>\n  <card-list></card-list>\n</div>",
    )
    write_component("components/atoms/Button.vue", "<button><slot/></button>")
    write_component("components/atoms/LinkButton.vue", "<a href='#'><slot/></a>")
    write_component("components/CardList.vue", "<ul><Card v-for='c in cards' :key='c.id'/></ul>")
    write_component("components/Card.vue", "<div class='card'>card</div>")

    monkeypatch.chdir(tmp_path)
    return {
        "root": str(tmp_path),
        "pages": "pages",
        "components": "components",
    }
