from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and merging
of configuration sources (defaults, persistent storage, and CLI overrides),
graph loading, and rendering through the selected printer.
"""

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from verif.core.pipeline.engine import load_all_graphs, load_graph
from verif.core.pipeline.validator import validate_config
from verif.core.printers import PrinterFormat, create_printer
from verif.domain.config import get_default_config, load_config, save_config
from verif.domain.errors import VerifError
from verif.domain.pipeline_models import GraphResult
from verif.infra.fs import get_default_output_dir, normalize_path
from verif.infra.logging import LoggingConfig, configure_logging, get_logger
from verif.interface.cli import args as cli_args
from verif.interface.server.app import run_server

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 invalid input,
            130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, stdout is reserved for output)
    bootstrap_log = LoggingConfig(
        level="DEBUG" if args.debug else (args.log_level or "INFO"),
        console=True,
        log_file=args.log_file or None,
    )
    configure_logging(bootstrap_log)

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Default vs Persistent state)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config()

    # 4. Map and merge command-line overrides
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    # 5. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    _reconfigure_logging(clean_conf, bootstrap_log)

    if args.save_config:
        save_config(clean_conf)
        logger.info("Effective configuration saved as the new defaults.")

    # 6. Analysis and rendering phase
    try:
        # An explicit --format is validated as given, config values are already normalized
        printer_format = PrinterFormat(args.format or clean_conf["format"])
        return _run_command(args, clean_conf, printer_format)
    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except VerifError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        logger.critical(f"Analysis failed: {e}", exc_info=True)
        print(f"ERROR: Analysis failed: {e}", file=sys.stderr)
        return 1

# -----------------------------------------------------------------------------
# COMMAND DISPATCH
# -----------------------------------------------------------------------------

def _run_command(
        args: argparse.Namespace,
        cfg: Dict[str, Any],
        printer_format: PrinterFormat,
) -> int:
    if args.command == "load":
        target = args.page_file
        logger.info(f'Exploring "{target}" dependencies from "{args.components_dir}"')
        result = load_graph(target, args.components_dir)
    else:
        target = args.views_dir
        logger.info(f'Traversing "{target}" associated with "{args.components_dir}"')
        result = load_all_graphs(target, args.components_dir)

    _report_cycles(result)

    printer = create_printer(
        result.registry,
        printer_format,
        output_dir=normalize_path(cfg.get("output_dir"), get_default_output_dir()),
        preview=_build_preview(cfg) if cfg["serve"] else None,
    )
    printer.on_completed(lambda: print(f"Analysis succeeded for: {target}"))

    if args.command == "load":
        printer.print(result.roots[0])
    else:
        printer.print_all(result.roots)
    return 0


def _build_preview(cfg: Dict[str, Any]) -> Callable[[str], None]:
    host = cfg["host"]
    port = cfg["port"]

    def _serve(elements_path: str) -> None:
        print(f"Graph preview available at http://{host}:{port}/ (Ctrl+C to stop)")
        try:
            run_server(elements_path, host=host, port=port)
        except KeyboardInterrupt:
            logger.info("Preview server stopped.")

    return _serve


def _report_cycles(result: GraphResult) -> None:
    if result.cycles:
        logger.warning(f"{len(result.cycles)} reference cycle(s) were cut during loading.")

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged and None means "not given".

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "format", "output_dir", "host", "port", "serve", "log_level", "log_file",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _reconfigure_logging(cfg: Dict[str, Any], bootstrap: LoggingConfig) -> None:
    """Apply persisted logging preferences when they differ from the bootstrap."""
    effective = LoggingConfig.from_settings(cfg)
    if effective == bootstrap:
        return
    configure_logging(effective, force=True)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
