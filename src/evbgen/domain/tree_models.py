from __future__ import annotations

"""
Directory Tree Snapshot Models.

Provides the tagged node types captured by the tree reader and consumed
by the renderer. A snapshot mirrors the filesystem at read time and is
never mutated once the reader returns it.
"""

from dataclasses import dataclass, field
from typing import List, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileEntry:
    """
    Represents a leaf entry in the snapshot.

    Symlinks (including links to directories) are captured as file entries.

    Attributes:
        name: Entry name, without any path component.
    """
    name: str


@dataclass(frozen=True)
class DirEntry:
    """
    Represents a directory and the entries it owns.

    Attributes:
        name: Directory name, without any path component.
        children: Ordered child nodes.
    """
    name: str
    children: List["TreeNode"] = field(default_factory=list)


TreeNode = Union[FileEntry, DirEntry]
