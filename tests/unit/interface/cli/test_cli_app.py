from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs `main()` in-process against a temporary component tree and checks
rendering, exit codes and configuration merging.
"""

import json
from pathlib import Path
from typing import Dict
from unittest.mock import patch

import pytest

from verif.interface.cli import app as cli_app


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the root logger untouched by in-process CLI runs."""
    with patch.object(cli_app, "configure_logging"):
        yield


def test_load_stdout_prints_tree(sample_app: Dict[str, str], capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_app.main(["load", "pages/index.vue", "components", "-f", "stdout", "--use-defaults"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == [
        "pages/index.vue",
        "  └── components/App.vue",
        "    └── components/atoms/Button.vue",
        "    └── components/atoms/LinkButton.vue",
        "    └── components/CardList.vue",
        "      └── components/Card.vue",
        "Analysis succeeded for: pages/index.vue",
    ]


def test_load_all_report(sample_app: Dict[str, str], capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_app.main(["load-all", "pages", "components", "--format", "stats", "--use-defaults"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Node degrees:")
    assert "components/App.vue" in out
    assert "Total edges: 7" in out
    assert out.rstrip().endswith("Analysis succeeded for: pages")


def test_graph_without_server_writes_elements(
        sample_app: Dict[str, str],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
) -> None:
    out_dir = tmp_path / "graph-out"

    with patch.object(cli_app, "run_server") as server:
        code = cli_app.main([
            "load", "pages/index.vue", "components",
            "--output-dir", str(out_dir), "--no-serve", "--use-defaults",
        ])

    assert code == 0
    server.assert_not_called()
    elements = json.loads((out_dir / "elements.json").read_text(encoding="utf-8"))
    assert {"data": {"id": "pages/index.vue"}} in elements
    assert "Analysis succeeded for: pages/index.vue" in capsys.readouterr().out


def test_graph_with_server_starts_preview(sample_app: Dict[str, str], tmp_path: Path) -> None:
    out_dir = tmp_path / "graph-out"

    with patch.object(cli_app, "run_server") as server:
        code = cli_app.main([
            "load", "pages/index.vue", "components",
            "--output-dir", str(out_dir), "--port", "40000", "--use-defaults",
        ])

    assert code == 0
    server.assert_called_once_with(str(out_dir / "elements.json"), host="127.0.0.1", port=40000)


def test_invalid_format_exit_code(sample_app: Dict[str, str], capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_app.main(["load", "pages/index.vue", "components", "-f", "html", "--use-defaults"])

    assert code == 2
    assert "Invalid printer type: html" in capsys.readouterr().err


def test_non_component_root_exit_code(sample_app: Dict[str, str], capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_app.main(["load", "pages/index.js", "components", "-f", "stdout", "--use-defaults"])

    assert code == 2
    assert "pages/index.js should be a vue file." in capsys.readouterr().err


def test_unexpected_failure_exit_code(sample_app: Dict[str, str], capsys: pytest.CaptureFixture[str]) -> None:
    with patch.object(cli_app, "load_graph", side_effect=RuntimeError("boom")):
        code = cli_app.main(["load", "pages/index.vue", "components", "-f", "stdout", "--use-defaults"])

    assert code == 1
    assert "boom" in capsys.readouterr().err


def test_interrupt_exit_code(sample_app: Dict[str, str]) -> None:
    with patch.object(cli_app, "load_all_graphs", side_effect=KeyboardInterrupt):
        code = cli_app.main(["load-all", "pages", "components", "-f", "stdout", "--use-defaults"])

    assert code == 130


def test_persisted_config_is_used(sample_app: Dict[str, str], capsys: pytest.CaptureFixture[str]) -> None:
    persisted = {"format": "report", "serve": False}

    with patch.object(cli_app, "load_config", return_value=persisted):
        code = cli_app.main(["load", "pages/index.vue", "components"])

    assert code == 0
    assert capsys.readouterr().out.startswith("Node degrees:")


def test_merge_config_ignores_none_and_unknown_keys() -> None:
    merged = cli_app._merge_config(
        {"format": "graph", "port": 1},
        {"format": None, "port": 2, "unknown": True},
    )

    assert merged == {"format": "graph", "port": 2}


def test_save_config_persists_effective_settings(sample_app: Dict[str, str]) -> None:
    with patch.object(cli_app, "save_config") as saver:
        code = cli_app.main([
            "load", "pages/index.vue", "components",
            "-f", "stdout", "--port", "4000", "--use-defaults", "--save-config",
        ])

    assert code == 0
    saved = saver.call_args[0][0]
    assert saved["format"] == "stdout"
    assert saved["port"] == 4000


def test_saved_one_shot_flags_can_be_reverted(sample_app: Dict[str, str]) -> None:
    persisted = {"format": "stdout", "serve": False, "log_level": "DEBUG"}

    with patch.object(cli_app, "load_config", return_value=persisted), \
            patch.object(cli_app, "save_config") as saver:
        code = cli_app.main([
            "load", "pages/index.vue", "components",
            "--serve", "--log-level", "info", "--save-config",
        ])

    assert code == 0
    saved = saver.call_args[0][0]
    assert saved["serve"] is True
    assert saved["log_level"] == "INFO"


def test_persisted_log_level_reconfigures_logging(sample_app: Dict[str, str]) -> None:
    persisted = {"format": "stdout", "log_level": "debug"}

    with patch.object(cli_app, "load_config", return_value=persisted):
        code = cli_app.main(["load", "pages/index.vue", "components"])

    assert code == 0
    calls = cli_app.configure_logging.call_args_list
    assert len(calls) == 2
    assert calls[1].args[0].level == "DEBUG"
    assert calls[1].kwargs == {"force": True}


def test_matching_settings_keep_bootstrap_logging(sample_app: Dict[str, str]) -> None:
    code = cli_app.main(["load", "pages/index.vue", "components", "-f", "stdout", "--use-defaults"])

    assert code == 0
    assert cli_app.configure_logging.call_count == 1
