from __future__ import annotations

"""
Project Document Assembler.

Fills the top-level project template: executable paths, wrapper flags and,
last, the rendered Files section.
"""

from evbgen.core.placeholders import (
    FILES,
    INPUT_EXE,
    OUTPUT_EXE,
    escape_value,
    format_flag,
    substitute,
)
from evbgen.domain.options import EvbOptions
from evbgen.infra.fs import resolve_path


def assemble_document(
        project_template: str,
        input_exe: str,
        output_exe: str,
        rendered_files: str,
        evb_options: EvbOptions,
        *,
        escape_xml: bool = False,
) -> str:
    """
    Produce the final project document text.

    Executable paths are made absolute against the CWD before injection.
    The rendered files fragment is never escaped; it is already XML.

    Args:
        project_template: Loaded project template.
        input_exe: Executable the files are packed into.
        output_exe: Destination of the packed executable.
        rendered_files: Output of render_tree.
        evb_options: Wrapper behaviour flags.
        escape_xml: Escape the executable paths before injecting them.

    Returns:
        str: Complete project document.
    """
    input_path = resolve_path(input_exe)
    output_path = resolve_path(output_exe)
    if escape_xml:
        input_path, output_path = escape_value(input_path), escape_value(output_path)

    doc = substitute(project_template, INPUT_EXE, input_path)
    doc = substitute(doc, OUTPUT_EXE, output_path)
    for key, flag in evb_options.placeholders().items():
        doc = substitute(doc, key, format_flag(flag))
    return substitute(doc, FILES, rendered_files)
