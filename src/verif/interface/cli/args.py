from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema: the `load` and `load-all`
sub-commands and the options they share. Provides logic to translate raw
argparse namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from verif import __version__
from verif.domain import constants as const
from verif.infra.logging import get_default_log_path

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the verif CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=const.APP_NAME,
        description="Components dependencies analyzer for Vue single-file components.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    shared = _build_shared_options()
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    load = sub.add_parser(
        "load",
        parents=[shared],
        help="Load dependency graph from a single Vue file source.",
    )
    load.add_argument(
        "page_file",
        help="Root file name to load. Loading starts from this file.",
    )
    load.add_argument(
        "components_dir",
        help="Directory scanned for components.",
    )

    load_all = sub.add_parser(
        "load-all",
        parents=[shared],
        help="Load all dependency graphs from a directory.",
    )
    load_all.add_argument(
        "views_dir",
        help="Directory whose component files are the starting points of the graphs.",
    )
    load_all.add_argument(
        "components_dir",
        help="Directory scanned for components.",
    )

    return p


def _build_shared_options() -> argparse.ArgumentParser:
    shared = argparse.ArgumentParser(add_help=False)

    # --- Output ---
    shared.add_argument(
        "-f", "--format",
        dest="format",
        default=None,
        help=f'Output format: "graph", "stdout" or "report" (default "{const.DEFAULT_FORMAT}").',
    )
    shared.add_argument(
        "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory receiving the visual graph files.",
    )

    # --- Preview server ---
    shared.add_argument(
        "--host",
        dest="host",
        default=None,
        help=f"Interface the preview server binds (default {const.DEFAULT_HOST}).",
    )
    shared.add_argument(
        "--port",
        dest="port",
        type=int,
        default=None,
        help=f"Port of the preview server (default {const.DEFAULT_PORT}).",
    )
    serve = shared.add_mutually_exclusive_group()
    serve.add_argument(
        "--serve",
        dest="serve",
        action="store_const",
        const=True,
        default=None,
        help="Start the preview server after writing the graph files (default).",
    )
    serve.add_argument(
        "--no-serve",
        dest="serve",
        action="store_const",
        const=False,
        help="Write the graph files without starting the preview server.",
    )

    # --- Configuration and Diagnostic Tools ---
    shared.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration file.",
    )
    verbosity = shared.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG (same as --log-level DEBUG).",
    )
    verbosity.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=const.LOG_LEVELS,
        default=None,
        help="Minimum severity of log records (default INFO).",
    )
    shared.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=get_default_log_path(),
        default=None,
        help=(
            "Also write logs to a rotated file (default location when no path is given, "
            'an empty path "" turns file logging off).'
        ),
    )
    shared.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the new defaults.",
    )
    return shared

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["format"] = args.format
    overrides["output_dir"] = args.output_dir
    overrides["host"] = args.host
    overrides["port"] = args.port
    overrides["log_file"] = args.log_file
    overrides["serve"] = args.serve
    overrides["log_level"] = "DEBUG" if args.debug else args.log_level

    return overrides
