from __future__ import annotations

"""
Project Generator.

Entry point that produces an Enigma Virtual Box project listing every file
and directory under a packing root, so processing the project with the
Enigma GUI/CLI yields a copy of the input executable with those files
embedded. Runs synchronously; the first failure aborts the whole call and
nothing is written unless the document was fully produced.
"""

import logging
from typing import Any

from evbgen.core.assembler import assemble_document
from evbgen.core.templates import load_templates, resolve_template_paths
from evbgen.core.tree_reader import read_tree
from evbgen.core.tree_renderer import render_tree
from evbgen.core.writer import write_project
from evbgen.domain.errors import FilesystemError, TreeReadError
from evbgen.domain.options import resolve_options
from evbgen.infra.fs import resolve_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_project(
        input_exe: str,
        output_exe: str,
        path2pack: str,
        options: Any = None,
) -> str:
    """
    Build the project document text without writing it.

    Args:
        input_exe: Executable the files are packed into.
        output_exe: Destination of the packed executable.
        path2pack: Directory whose content is packed.
        options: GenerateOptions or a mapping accepted by resolve_options.

    Returns:
        str: Complete project document.

    Raises:
        TemplateLoadError: A template could not be loaded.
        TreeReadError: The tree under path2pack could not be read.
    """
    opts, _ = resolve_options(options)

    templates = load_templates(resolve_template_paths(opts.template_path))

    root = resolve_path(path2pack)
    logger.info(f"Reading directory tree of: {root}")
    try:
        tree = read_tree(root)
    except FilesystemError as e:
        raise TreeReadError(f"Failed to read the directory tree of: '{root}'.\n{e}", path=root) from e

    files_xml = render_tree(
        root,
        tree,
        templates["dir"],
        templates["file"],
        opts.filter,
        escape_xml=opts.escape_xml,
    )

    return assemble_document(
        templates["project"],
        input_exe,
        output_exe,
        files_xml,
        opts.evb_options,
        escape_xml=opts.escape_xml,
    )


def generate(
        project_name: str,
        input_exe: str,
        output_exe: str,
        path2pack: str,
        options: Any = None,
) -> None:
    """
    Generate an Enigma Virtual Box project file.

    Args:
        project_name: Path of the .evb file to write (e.g. 'build/app.evb').
        input_exe: Executable the files are packed into.
        output_exe: Destination of the packed executable.
        path2pack: Directory whose content is packed.
        options: GenerateOptions or a mapping with 'filter', 'template_path',
            'evb_options' and 'escape_xml' keys.

    Raises:
        TemplateLoadError: A template could not be loaded.
        TreeReadError: The tree under path2pack could not be read.
        OutputWriteError: The project file could not be written.
    """
    document = build_project(input_exe, output_exe, path2pack, options)
    write_project(project_name, document)
