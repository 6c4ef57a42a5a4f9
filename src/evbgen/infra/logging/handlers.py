from __future__ import annotations

"""
Logging Handler Factories.

Handlers created here are tagged so reconfiguration only removes what
evbgen attached, never handlers installed by a host application.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from evbgen.infra.fs import ensure_parent_dir

_HANDLER_TAG_ATTR: str = "_evbgen_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as owned by evbgen and return it."""
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_own_handler(handler: logging.Handler) -> bool:
    """Check whether a handler carries the evbgen tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def create_stream_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Build the stderr handler."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    return tag_handler(sh)


def create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Build a rotating file handler.

    A log file that cannot be opened must not abort generation, so the
    failure is reported on stderr and None is returned.

    Args:
        log_file: Target path for the log file.
        level_int: Numeric logging level.
        formatter: Record formatter.
        max_bytes: Rollover threshold in bytes.
        backup_count: Number of archived files to keep.

    Returns:
        Optional[RotatingFileHandler]: Handler, or None if the file cannot be opened.
    """
    try:
        ensure_parent_dir(log_file)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    tag_handler(fh)
    return fh
