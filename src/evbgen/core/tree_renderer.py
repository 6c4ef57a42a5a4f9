from __future__ import annotations

"""
Tree Renderer.

Converts a tree snapshot into the XML fragment placed inside the project's
Files element. Each directory is rendered from the directory template with
its children's fragments injected; each file is rendered from the file
template. Fragments are joined in traversal order with no separator.
"""

import os
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from evbgen.core.placeholders import (
    DIR_NAME,
    FILE_NAME,
    FILE_PATH,
    FILES,
    escape_value,
    substitute,
)
from evbgen.domain.options import NodeFilter, accept_all
from evbgen.domain.tree_models import DirEntry, TreeNode

# -----------------------------------------------------------------------------
# TRAVERSAL STATE
# -----------------------------------------------------------------------------

@dataclass
class _Frame:
    """One directory level being rendered."""
    base_path: str
    nodes: Iterator[TreeNode]
    # Directory template with dirName already injected; None for the root level
    shell: Optional[str] = None
    parts: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        base_path: str,
        tree: Sequence[TreeNode],
        dir_template: str,
        file_template: str,
        node_filter: NodeFilter = accept_all,
        *,
        escape_xml: bool = False,
) -> str:
    """
    Render a tree snapshot into its templated XML fragment.

    The filter is called once per visited node with (full_path, name,
    is_dir). A rejected directory contributes nothing, neither for itself
    nor for any of its descendants.

    Args:
        base_path: Path the top-level nodes live in.
        tree: Ordered top-level nodes.
        dir_template: Template carrying 'dirName' and 'files' markers.
        file_template: Template carrying 'fileName' and 'filePath' markers.
        node_filter: Inclusion predicate.
        escape_xml: Escape names and paths before injecting them.

    Returns:
        str: Concatenated fragments of all included nodes.
    """
    quote = escape_value if escape_xml else _verbatim
    root = _Frame(base_path=base_path, nodes=iter(tree))
    stack: List[_Frame] = [root]

    while stack:
        frame = stack[-1]
        node = next(frame.nodes, None)

        # Level exhausted: close the directory into its parent
        if node is None:
            stack.pop()
            if frame.shell is not None:
                stack[-1].parts.append(substitute(frame.shell, FILES, "".join(frame.parts)))
            continue

        full_path = os.path.join(frame.base_path, node.name)
        is_dir = isinstance(node, DirEntry)
        if not node_filter(full_path, node.name, is_dir):
            continue

        if is_dir:
            shell = substitute(dir_template, DIR_NAME, quote(node.name))
            stack.append(_Frame(base_path=full_path, nodes=iter(node.children), shell=shell))
        else:
            part = substitute(file_template, FILE_NAME, quote(node.name))
            frame.parts.append(substitute(part, FILE_PATH, quote(full_path)))

    return "".join(root.parts)


def _verbatim(value: str) -> str:
    return value
