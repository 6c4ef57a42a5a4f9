from __future__ import annotations

"""
Project File Writer.

Persists the assembled document as UTF-16LE without a byte order mark.
The destination is overwritten unconditionally.
"""

import logging

from evbgen.domain.errors import OutputWriteError
from evbgen.infra.fs import PROJECT_ENCODING, ensure_parent_dir, resolve_path

logger = logging.getLogger(__name__)


def write_project(path: str, document: str) -> str:
    """
    Write a project document to disk.

    Args:
        path: Destination file path (relative paths resolve against the CWD).
        document: Project text.

    Returns:
        str: Absolute path that was written.

    Raises:
        OutputWriteError: The destination could not be written.
    """
    target = resolve_path(path)

    # Encode before opening so a bad document never truncates the destination
    try:
        data = document.encode(PROJECT_ENCODING)
    except UnicodeEncodeError as e:
        raise OutputWriteError(
            f"Failed to encode project file: '{target}'.\n{e}", path=target
        ) from e

    try:
        ensure_parent_dir(target)
        with open(target, "wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputWriteError(f"Failed to write project file: '{target}'.\n{e}", path=target) from e

    logger.info(f"Project saved to file: {target}")
    return target
