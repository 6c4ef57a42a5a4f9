from __future__ import annotations

"""
Node Filter Helpers.

Builds inclusion predicates for the tree renderer from regex lists so
CLI users (and library callers who prefer patterns over code) can keep
build noise out of the packed executable.
"""

import re
from typing import List

from evbgen.domain.options import NodeFilter, accept_all

__all__ = [
    "accept_all",
    "build_exclude_filter",
    "compile_patterns",
    "matches_any",
]

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are discarded.

    Args:
        patterns: List of raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """Verify if a name matches at least one compiled pattern."""
    return any(rx.search(name) for rx in compiled_patterns)

# -----------------------------------------------------------------------------
# FILTER FACTORIES
# -----------------------------------------------------------------------------

def build_exclude_filter(patterns: List[str], *, match_full_path: bool = False) -> NodeFilter:
    """
    Create a node filter rejecting entries that match any pattern.

    Args:
        patterns: Regex strings tested with search semantics.
        match_full_path: Test the full path instead of the bare entry name.

    Returns:
        NodeFilter: Predicate suitable for GenerateOptions.filter.
    """
    compiled = compile_patterns(patterns)
    if not compiled:
        return accept_all

    def _exclude(full_path: str, name: str, is_dir: bool) -> bool:
        target = full_path if match_full_path else name
        return not matches_any(target, compiled)

    return _exclude
