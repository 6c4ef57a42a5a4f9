from __future__ import annotations

"""
Generation Error Taxonomy.

Every failure raised while building a project carries the path it refers
to. Wrappers are raised with the underlying exception chained as the cause
so callers get a single error describing the first failure.
"""


class EvbGenError(Exception):
    """Base class for all project generation failures."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class TemplateLoadError(EvbGenError):
    """A template file is missing, unreadable or not valid UTF-16LE."""


class FilesystemError(EvbGenError):
    """A directory could not be listed or one of its entries stat-ed."""


class TreeReadError(EvbGenError):
    """The tree under the packing root could not be captured."""


class OutputWriteError(EvbGenError):
    """The generated project could not be written to its destination."""
