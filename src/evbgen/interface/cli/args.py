from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
the option mapping accepted by resolve_options.
"""

import argparse
from typing import Any, Dict, List, Optional

from evbgen.core.filters import build_exclude_filter

# Wrapper flags: (CLI stem, option field, help text)
_EVB_FLAGS = [
    ("delete-extracted-on-exit", "delete_extracted_on_exit",
     "Delete files extracted at runtime when the packed exe exits"),
    ("compress-files", "compress_files",
     "Compress packed files inside the output exe"),
    ("share-virtual-system", "share_virtual_system",
     "Share the virtual system with child processes"),
    ("map-executable-with-temporary-file", "map_executable_with_temporary_file",
     "Map virtual executables through a temporary file"),
    ("allow-running-of-virtual-exe-files", "allow_running_of_virtual_exe_files",
     "Allow packed executables to be run"),
]

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the evbgen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="evbgen",
        description="Generate an Enigma Virtual Box project packing a whole directory tree.",
    )

    # --- Positional Paths ---
    p.add_argument("project_name", help="Path of the .evb project file to write")
    p.add_argument("input_exe", help="Executable the files are packed into")
    p.add_argument("output_exe", help="Path of the packed executable Enigma produces")
    p.add_argument("path2pack", help="Directory whose content is packed")

    # --- Templates ---
    p.add_argument("--project-template", dest="project_template", default=None,
                   help="Project template path (UTF-16LE)")
    p.add_argument("--dir-template", dest="dir_template", default=None,
                   help="Directory template path (UTF-16LE)")
    p.add_argument("--file-template", dest="file_template", default=None,
                   help="File template path (UTF-16LE)")

    # --- Content Selection ---
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes; matching file/directory names are not packed",
    )
    p.add_argument("--escape-xml", action="store_true",
                   help="Escape XML-significant characters in names and paths")

    # --- Wrapper Flags ---
    flags = p.add_argument_group("wrapper options")
    for stem, dest, help_text in _EVB_FLAGS:
        flags.add_argument(f"--{stem}", dest=dest, action=argparse.BooleanOptionalAction,
                           default=None, help=help_text)

    # --- Runtime ---
    p.add_argument("--dump-options", action="store_true",
                   help="Print the resolved options as JSON and exit")
    p.add_argument("--dry-run", action="store_true",
                   help="Print the project to stdout instead of writing it")
    p.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a generate options mapping.

    Flags left unset on the command line are omitted so defaults apply.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Options mapping.
    """
    options: Dict[str, Any] = {}

    template_path = {
        "project": args.project_template,
        "dir": args.dir_template,
        "file": args.file_template,
    }
    template_path = {k: v for k, v in template_path.items() if v}
    if template_path:
        options["template_path"] = template_path

    evb_options = {
        dest: getattr(args, dest)
        for _, dest, _ in _EVB_FLAGS
        if getattr(args, dest) is not None
    }
    if evb_options:
        options["evb_options"] = evb_options

    patterns = _split_csv(args.exclude_patterns)
    if patterns:
        options["filter"] = build_exclude_filter(patterns)

    if args.escape_xml:
        options["escape_xml"] = True

    return options

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
