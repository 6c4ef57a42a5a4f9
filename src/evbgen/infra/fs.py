from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path resolution and directory helpers shared by the template loader, the
project writer and the CLI. Project documents are consumed by an external
tool that requires absolute paths, so every path embedded in a document
goes through resolve_path first.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

# UTF-16LE, no byte order mark: the layout Enigma Virtual Box reads and writes
PROJECT_ENCODING = "utf-16-le"
BOM = "\ufeff"

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
TEMPLATES_DIR = os.path.join(PACKAGE_DIR, "templates")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def resolve_path(path: str) -> str:
    """
    Resolve a path to an absolute, normalized path against the CWD.

    Args:
        path: Absolute or relative path.

    Returns:
        str: Absolute path.
    """
    return os.path.abspath(path)


def bundled_template(file_name: str) -> str:
    """Return the absolute path of a template shipped with the package."""
    return os.path.join(TEMPLATES_DIR, file_name)


def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy of a target file if missing.

    Args:
        path: Absolute path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.isdir(parent):
        os.makedirs(parent, exist_ok=True)
