from __future__ import annotations

"""
Logging Bootstrap.

Configures the root logger once per process. Records go through a single
QueueHandler; a QueueListener thread forwards them to the stderr and file
handlers so slow log I/O never delays a generation run.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from evbgen.infra.logging.config import LoggingConfig, parse_level
from evbgen.infra.logging.handlers import (
    create_rotating_file_handler,
    create_stream_handler,
    is_own_handler,
    tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_evbgen_configured"
_QUEUE_LISTENER_ATTR: str = "_evbgen_queue_listener"

_atexit_registered: bool = False


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger; repeated calls are no-ops unless forced.

    Args:
        cfg: Logging settings.
        force: Tear down previously attached evbgen handlers and rebuild.

    Returns:
        logging.Logger: The root logger.
    """
    global _atexit_registered

    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = parse_level(cfg.level)
    root.setLevel(level_int)

    _remove_own_handlers(root)
    _stop_listener(root)

    handlers: List[logging.Handler] = []
    if cfg.console:
        handlers.append(create_stream_handler(level_int, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers.append(fh)

    if not handlers:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush queued records on interpreter shutdown; one hook serves every rebuild
    if not _atexit_registered:
        atexit.register(_stop_listener, root)
        _atexit_registered = True
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a named logger (usually __name__)."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Flush pending records and detach every evbgen handler."""
    root = logging.getLogger()
    _stop_listener(root)
    _remove_own_handlers(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _remove_own_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if is_own_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_listener(root: logging.Logger) -> None:
    listener: Optional[QueueListener] = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is None:
        return
    setattr(root, _QUEUE_LISTENER_ATTR, None)
    # stop() on a listener that is not running raises
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
    for h in listener.handlers:
        h.close()
