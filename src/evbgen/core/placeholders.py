from __future__ import annotations

"""
Placeholder Engine.

Templates mark injection points with comment-like tokens of the form
'<!-- inject: key -->'. Matching is case-insensitive and tolerates any
whitespace inside the marker. Only the first marker for a key is replaced;
markers with no value supplied stay in the text untouched.
"""

import re
from typing import Dict
from xml.sax.saxutils import escape

from evbgen.domain.options import EVB_OPTION_KEYS

# -----------------------------------------------------------------------------
# PLACEHOLDER KEYS
# -----------------------------------------------------------------------------

DIR_NAME = "dirName"
FILES = "files"
FILE_NAME = "fileName"
FILE_PATH = "filePath"
INPUT_EXE = "inputExe"
OUTPUT_EXE = "outputExe"

_XML_ENTITIES: Dict[str, str] = {'"': "&quot;", "'": "&apos;"}

_PATTERNS: Dict[str, re.Pattern] = {}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def inject_pattern(key: str) -> re.Pattern:
    """
    Return the compiled marker pattern for a key, compiling it on first use.

    Args:
        key: Placeholder key (e.g. 'fileName').

    Returns:
        re.Pattern: Case-insensitive pattern matching the marker.
    """
    rx = _PATTERNS.get(key)
    if rx is None:
        rx = re.compile(r"<!--\s*?inject\s*?:\s*?" + re.escape(key) + r"\s*?-->", re.IGNORECASE)
        _PATTERNS[key] = rx
    return rx


def substitute(template: str, key: str, value: str) -> str:
    """
    Replace the first marker for a key with a literal value.

    The value is inserted as-is: backslashes are not treated as group
    references and no XML escaping is applied (see escape_value).

    Args:
        template: Template text.
        key: Placeholder key.
        value: Replacement text.

    Returns:
        str: New text with at most one marker replaced.
    """
    return inject_pattern(key).sub(lambda _m: value, template, count=1)


def escape_value(value: str) -> str:
    """Escape XML-significant characters for use inside element text."""
    return escape(value, _XML_ENTITIES)


def format_flag(flag: bool) -> str:
    """Render a boolean the way project documents expect it."""
    return "true" if flag else "false"


# Precompile the fixed key set used by the bundled templates
for _key in (DIR_NAME, FILES, FILE_NAME, FILE_PATH, INPUT_EXE, OUTPUT_EXE) + EVB_OPTION_KEYS:
    inject_pattern(_key)
