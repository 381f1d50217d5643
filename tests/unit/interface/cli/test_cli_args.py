from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Sub-command routing and positional arguments.
2. Mapping of repeated / comma-separated flags to option overrides.
3. Handling of boolean flags (store_true).
"""

import pytest

from templatetree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_scan_positional_and_defaults():
    args = parse_args(["scan", "/templates/react"])
    overrides = args_to_overrides(args)

    assert args.command == "scan"
    assert args.template_path == "/templates/react"
    assert args.debug is False
    assert overrides == {
        "ignore_file_names": [],
        "ignore_folder_names": [],
        "ignore_patterns": [],
        "max_file_size": None,
    }


def test_save_requires_output_path():
    args = parse_args(["save", "/in", "/out/doc.json"])
    assert args.template_path == "/in"
    assert args.output_path == "/out/doc.json"

    with pytest.raises(SystemExit):
        parse_args(["save", "/in"])


def test_repeated_and_csv_flags_are_flattened():
    args = parse_args([
        "scan", ".",
        "--ignore-folder", "tmp,vendor",
        "--ignore-folder", "cache",
        "--ignore-file", "secrets.json",
        "--ignore-pattern", r"^x{1,3}$",
        "--max-file-size", "2048",
    ])
    overrides = args_to_overrides(args)

    assert overrides["ignore_folder_names"] == ["tmp", "vendor", "cache"]
    assert overrides["ignore_file_names"] == ["secrets.json"]
    assert overrides["ignore_patterns"] == [r"^x{1,3}$"]
    assert overrides["max_file_size"] == 2048


def test_load_flags():
    args = parse_args(["load", "doc.json", "--print-tree", "--debug"])
    assert args.command == "load"
    assert args.document_path == "doc.json"
    assert args.print_tree is True
    assert args.json_output is False
    assert args.debug is True


def test_command_is_required():
    with pytest.raises(SystemExit):
        parse_args([])
