from __future__ import annotations

"""
Template Loader.

Resolves the project, directory and file template locations and loads
their contents. Templates are stored as UTF-16LE text, the encoding Enigma
Virtual Box uses for its project files.
"""

import logging
import re
from typing import Dict, Mapping

from evbgen.domain.errors import TemplateLoadError
from evbgen.domain.options import TEMPLATE_ROLES, TemplatePaths
from evbgen.infra.fs import BOM, PROJECT_ENCODING, bundled_template, resolve_path

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_PATHS: Dict[str, str] = {
    "project": bundled_template("project-template.xml"),
    "dir": bundled_template("dir-template.xml"),
    "file": bundled_template("file-template.xml"),
}

# Indentation before a tag; removed to keep the generated project small
_PRE_TAG_INDENT = re.compile(r"^\s+?<", re.MULTILINE)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_template_paths(template_path: TemplatePaths) -> Dict[str, str]:
    """
    Resolve the absolute location of each template role.

    Args:
        template_path: Caller overrides; empty entries use the bundled default.

    Returns:
        Dict[str, str]: Role ('project', 'dir', 'file') to absolute path.
    """
    return {
        role: resolve_path(getattr(template_path, role) or DEFAULT_TEMPLATE_PATHS[role])
        for role in TEMPLATE_ROLES
    }


def load_template(path: str) -> str:
    """
    Read a template and strip the indentation preceding each tag.

    Args:
        path: Template file path.

    Returns:
        str: Template text.

    Raises:
        TemplateLoadError: The file is missing, unreadable or badly encoded.
    """
    try:
        with open(path, "r", encoding=PROJECT_ENCODING, newline="") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError(f"Failed to load template. Template path: '{path}'.\n{e}", path=path) from e

    if contents.startswith(BOM):
        contents = contents[len(BOM):]

    logger.debug(f"Loaded template: {path}")
    return _PRE_TAG_INDENT.sub("<", contents)


def load_templates(paths: Mapping[str, str]) -> Dict[str, str]:
    """Load every template role from already resolved paths."""
    return {role: load_template(paths[role]) for role in TEMPLATE_ROLES}
