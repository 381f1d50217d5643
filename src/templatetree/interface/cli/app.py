from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of scan
options (built-in defaults, user config file, command-line additions),
dispatch to the scanner or persistence adapter, and result rendering.
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from templatetree.core.analysis.tree_renderer import count_nodes, render_tree_lines
from templatetree.core.pipeline.stages.validator import validate_options
from templatetree.core.services.persistence import (
    read_template_structure,
    save_template_structure,
)
from templatetree.core.services.scanner import scan_template_directory
from templatetree.core.services.serializer import dumps_tree
from templatetree.domain.config import (
    ScanOptions,
    build_scan_options,
    get_default_config,
    load_config,
)
from templatetree.infra.fs import normalize_path
from templatetree.infra.logging import LoggingConfig, configure_logging, get_logger
from templatetree.interface.cli import args as cli_args

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
        int: Process exit code (0 success, 1 failure, 2 usage, 130 interrupted).
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
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug(f"CLI command '{args.command}' initiated.")

    try:
        if args.command == "load":
            return _run_load(args)

        options = resolve_scan_options(args)
        if args.dump_config:
            print(json.dumps(options.to_dict(), ensure_ascii=False, indent=2))
            return 0

        if args.command == "scan":
            return _run_scan(args, options)
        return _run_save(args, options)

    except KeyboardInterrupt:
        logger.warning("Operation interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

# -----------------------------------------------------------------------------
# OPTION RESOLUTION
# -----------------------------------------------------------------------------

def resolve_scan_options(args: argparse.Namespace) -> ScanOptions:
    """
    Combine config-file rules with command-line additions into ScanOptions.

    List options accumulate (defaults, then config file, then CLI);
    an explicit ``--max-file-size`` wins over the config file.

    Args:
        args: Parsed ``scan``/``save`` arguments.

    Returns:
        ScanOptions: Effective options for the run.
    """
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    overrides = cli_args.args_to_overrides(args)

    clean_base, warnings = validate_options(base_conf)
    for w in warnings:
        logger.warning(f"Config file constraint: {w}")

    clean_cli, warnings = validate_options(overrides)
    for w in warnings:
        logger.warning(f"Argument constraint: {w}")

    return build_scan_options(**_merge_options(clean_base, clean_cli))


def _merge_options(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Append override lists to base lists; override the size when given."""
    out = dict(base)
    for key in ("ignore_file_names", "ignore_folder_names", "ignore_patterns"):
        out[key] = list(base.get(key) or []) + list(overrides.get(key) or [])
    if overrides.get("max_file_size") is not None:
        out["max_file_size"] = overrides["max_file_size"]
    return out

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _run_scan(args: argparse.Namespace, options: ScanOptions) -> int:
    tree = asyncio.run(scan_template_directory(normalize_path(args.template_path, "."), options))
    print(dumps_tree(tree))
    return 0


def _run_save(args: argparse.Namespace, options: ScanOptions) -> int:
    template_path = normalize_path(args.template_path, ".")
    output_path = normalize_path(args.output_path, "template.json")

    try:
        asyncio.run(save_template_structure(template_path, output_path, options))
    except OSError as e:
        logger.error(f"Cannot write template document '{output_path}': {e}")
        print(f"ERROR: cannot write '{output_path}': {e}", file=sys.stderr)
        return 1

    print(f"Template structure written to: {output_path}")
    return 0


def _run_load(args: argparse.Namespace) -> int:
    tree = asyncio.run(read_template_structure(normalize_path(args.document_path, "template.json")))

    if args.json_output:
        print(dumps_tree(tree))
    elif args.print_tree:
        print("\n".join(render_tree_lines(tree)))
    else:
        folders, files = count_nodes(tree)
        print(f"Template: {tree.folder_name}")
        print(f"Folders: {folders}")
        print(f"Files: {files}")
    return 0

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
