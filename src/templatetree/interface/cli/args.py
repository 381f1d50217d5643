from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (``scan``, ``save`` and ``load``
sub-commands) and translates parsed namespaces into raw option overrides
for the validation stage.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the templatetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    diagnostics = argparse.ArgumentParser(add_help=False)
    diagnostics.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    diagnostics.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this (rotating) log file.",
    )

    filtering = argparse.ArgumentParser(add_help=False)
    filtering.add_argument(
        "--ignore-file",
        dest="ignore_file_names",
        action="append",
        default=None,
        metavar="NAME",
        help="File name to skip, added to the defaults. Repeatable or comma separated.",
    )
    filtering.add_argument(
        "--ignore-folder",
        dest="ignore_folder_names",
        action="append",
        default=None,
        metavar="NAME",
        help="Directory name to prune, added to the defaults. Repeatable or comma separated.",
    )
    filtering.add_argument(
        "--ignore-pattern",
        dest="ignore_patterns",
        action="append",
        default=None,
        metavar="REGEX",
        help="Regex searched against file names, added to the defaults. Repeatable.",
    )
    filtering.add_argument(
        "--max-file-size",
        dest="max_file_size",
        type=int,
        default=None,
        metavar="BYTES",
        help="Replace content of larger files by a size marker (0 disables the cap).",
    )
    filtering.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON config file with additional ignore rules.",
    )
    filtering.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the user config file and use built-in rules only.",
    )
    filtering.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective scan options as JSON and exit.",
    )

    p = argparse.ArgumentParser(
        prog="templatetree",
        description="Convert a directory tree into a JSON template structure and back.",
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    scan = sub.add_parser(
        "scan",
        parents=[filtering, diagnostics],
        help="Scan a directory and print the template structure as JSON.",
    )
    scan.add_argument("template_path", help="Directory to scan.")

    save = sub.add_parser(
        "save",
        parents=[filtering, diagnostics],
        help="Scan a directory and save the template structure to a JSON document.",
    )
    save.add_argument("template_path", help="Directory to scan.")
    save.add_argument("output_path", help="Destination JSON document.")

    load = sub.add_parser(
        "load",
        parents=[diagnostics],
        help="Read a saved template structure.",
    )
    load.add_argument("document_path", help="JSON document to read.")
    load.add_argument(
        "--print-tree",
        action="store_true",
        help="Render the loaded structure as an ASCII tree.",
    )
    load.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the loaded structure as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into raw option additions.

    Args:
        args: Parsed command-line arguments of a ``scan`` or ``save`` command.

    Returns:
        Dict[str, Any]: Option overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["ignore_file_names"] = _split_csv(args.ignore_file_names)
    overrides["ignore_folder_names"] = _split_csv(args.ignore_folder_names)
    # Regexes may legitimately contain commas, so they are never split
    overrides["ignore_patterns"] = list(args.ignore_patterns or [])
    overrides["max_file_size"] = args.max_file_size

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(values: Optional[List[str]]) -> List[str]:
    """
    Flatten repeated flag values, splitting each on commas.
    """
    if not values:
        return []
    out: List[str] = []
    for value in values:
        out.extend(x.strip() for x in value.split(",") if x.strip())
    return out
