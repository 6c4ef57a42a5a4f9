from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to generate options.
2. Tri-state wrapper flags (--x / --no-x / unset).
3. CSV exclude patterns turned into a node filter.
"""

import pytest

from evbgen.domain.options import accept_all
from evbgen.interface.cli.args import args_to_options, build_parser

POSITIONALS = ["app.evb", "in.exe", "out.exe", "dist"]


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(POSITIONALS + arg_list)


def test_positional_paths():
    args = parse_args([])

    assert (args.project_name, args.input_exe, args.output_exe, args.path2pack) == tuple(POSITIONALS)


def test_no_flags_yield_empty_options():
    """Unset flags are omitted so documented defaults apply."""
    assert args_to_options(parse_args([])) == {}


def test_wrapper_flags_mapping():
    args = parse_args(["--no-compress-files", "--share-virtual-system"])

    options = args_to_options(args)

    assert options["evb_options"] == {
        "compress_files": False,
        "share_virtual_system": True,
    }


def test_template_arguments():
    args = parse_args(["--dir-template", "d.xml", "--file-template", "f.xml"])

    assert args_to_options(args)["template_path"] == {"dir": "d.xml", "file": "f.xml"}


def test_exclude_patterns_build_filter():
    args = parse_args(["--exclude", r"\.pdb$, ^logs$ ,"])

    node_filter = args_to_options(args)["filter"]

    assert node_filter is not accept_all
    assert node_filter("/dist/app.pdb", "app.pdb", False) is False
    assert node_filter("/dist/logs", "logs", True) is False
    assert node_filter("/dist/app.dll", "app.dll", False) is True


def test_escape_xml_flag():
    assert args_to_options(parse_args(["--escape-xml"]))["escape_xml"] is True


def test_missing_positionals_exit():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["only.evb"])
