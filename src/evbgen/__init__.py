from __future__ import annotations

from evbgen.core.generator import build_project, generate
from evbgen.domain.errors import (
    EvbGenError,
    FilesystemError,
    OutputWriteError,
    TemplateLoadError,
    TreeReadError,
)
from evbgen.domain.options import EvbOptions, GenerateOptions, TemplatePaths

__version__ = "0.5.0"

__all__ = [
    "EvbGenError",
    "EvbOptions",
    "FilesystemError",
    "GenerateOptions",
    "OutputWriteError",
    "TemplateLoadError",
    "TemplatePaths",
    "TreeReadError",
    "build_project",
    "generate",
]
