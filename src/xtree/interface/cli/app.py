from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration resolution
(defaults, persisted file and command-line overrides), logging bootstrap,
the filtered scan and rendering of the resulting tree to stdout.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from xtree.core.analysis.tree_builder import build_filtered_tree
from xtree.core.analysis.tree_renderer import render_tree
from xtree.core.validator import validate_config
from xtree.domain.config import get_default_config, load_config, save_config
from xtree.domain.constants import NO_MATCH_MESSAGE
from xtree.infra.fs import display_name
from xtree.infra.logging import LoggingConfig, configure_logging, get_logger
from xtree.interface.cli import args as cli_args

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
        int: Process exit code (0 on every documented path, 130 on interrupt).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # Nothing to search for and no configuration task: show usage only
    if not args.search and not (args.dump_config or args.save_config):
        parser.print_help()
        print()
        return 0

    # 2. Resolve configuration (defaults < persisted file < CLI overrides)
    base_conf, warnings = validate_config(get_default_config() if args.use_defaults else load_config())
    overrides = cli_args.args_to_overrides(args, default_depth=base_conf["max_depth"])
    conf, override_warnings = validate_config(_merge_config(base_conf, overrides))
    warnings.extend(override_warnings)

    # 3. Logging bootstrap (stderr, keeps stdout for the tree)
    configure_logging(LoggingConfig.from_settings(conf, debug=args.debug))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # Short-circuit if configuration dump is requested
    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        try:
            path = save_config(conf)
            logger.info(f"Configuration saved to {path}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")
        if not args.search:
            return 0

    # 4. Scan and render
    term_lower = args.search.lower()
    logger.debug(f"Searching '{args.directory}' for '{args.search}' with {conf}")

    try:
        tree = build_filtered_tree(
            args.directory,
            term_lower,
            conf["max_depth"],
            sort_entries=conf["sort_entries"],
        )

        if tree is None:
            print(NO_MATCH_MESSAGE)
            return 0

        lines: List[str] = []
        render_tree(tree, term_lower, lines, color=conf["color"])

        print(display_name(tree.name))
        print("\n".join(lines))
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only keys already present in the base are merged; None never overrides.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
