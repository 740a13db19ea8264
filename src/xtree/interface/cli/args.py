from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages and
defaults, and translates raw argparse namespaces into configuration
overrides.
"""

import argparse
from typing import Any, Dict

from xtree.core.validator import parse_depth
from xtree.domain.constants import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    DEFAULT_DEPTH,
    DEFAULT_DIRECTORY,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the xtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} {APP_VERSION}\n{APP_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Search Target ---
    p.add_argument(
        "search",
        nargs="?",
        default="",
        help="Search term to filter directory names (if provided)",
    )
    p.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_DIRECTORY,
        help="Directory to generate tree from (default: current directory)",
    )

    # --- Traversal ---
    # Kept as a raw string so invalid values can fall back silently.
    p.add_argument(
        "-d", "--depth",
        dest="depth",
        default=None,
        metavar="N",
        help=f"Maximum depth of directory tree (default: {DEFAULT_DEPTH})",
    )
    p.add_argument(
        "--unsorted",
        action="store_true",
        help="Keep filesystem enumeration order instead of sorting by name.",
    )

    # --- Rendering ---
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Do not highlight matches with ANSI color codes.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective options as new defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace, default_depth: int = DEFAULT_DEPTH) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options explicitly given on the command line produce an override.
    A depth that is not a non-negative integer maps to 'default_depth'.

    Args:
        args: Parsed command-line arguments.
        default_depth: Depth substituted for unparsable values.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.depth is not None:
        depth = parse_depth(args.depth)
        overrides["max_depth"] = default_depth if depth is None else depth

    if args.unsorted:
        overrides["sort_entries"] = False
    if args.no_color:
        overrides["color"] = False

    return overrides
