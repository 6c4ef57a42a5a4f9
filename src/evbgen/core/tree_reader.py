from __future__ import annotations

"""
Directory Tree Reader.

Captures an ordered snapshot of everything under a root directory.
Entries are classified with lstat, so symbolic links are never followed:
a link to a directory becomes a leaf entry and link cycles cannot cause
unbounded descent. The walk uses an explicit worklist instead of
recursion so tree depth is not limited by the interpreter stack.
"""

import logging
import os
import stat
from typing import List, Tuple

from evbgen.domain.errors import FilesystemError
from evbgen.domain.tree_models import DirEntry, FileEntry, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_tree(path: str) -> List[TreeNode]:
    """
    Read the full tree below a directory.

    Entries of each directory are sorted by name so repeated reads of an
    unchanged tree always yield the same order.

    Args:
        path: Root directory to capture.

    Returns:
        List[TreeNode]: Ordered top-level nodes of the root.

    Raises:
        FilesystemError: A directory could not be listed or an entry stat-ed.
    """
    root: List[TreeNode] = []
    pending: List[Tuple[str, List[TreeNode]]] = [(path, root)]
    dir_count = 0
    file_count = 0

    while pending:
        current, children = pending.pop()
        for name in _list_dir(current):
            full_path = os.path.join(current, name)
            if _is_real_dir(full_path):
                node = DirEntry(name=name)
                pending.append((full_path, node.children))
                dir_count += 1
            else:
                node = FileEntry(name=name)
                file_count += 1
            children.append(node)

    logger.debug(f"Captured {file_count} files and {dir_count} directories under: {path}")
    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _list_dir(path: str) -> List[str]:
    """List directory entry names in sorted order."""
    try:
        return sorted(os.listdir(path))
    except OSError as e:
        raise FilesystemError(f"Cannot list directory '{path}': {e}", path=path) from e


def _is_real_dir(path: str) -> bool:
    """Check for a directory without following symlinks."""
    try:
        return stat.S_ISDIR(os.lstat(path).st_mode)
    except OSError as e:
        raise FilesystemError(f"Cannot stat '{path}': {e}", path=path) from e
