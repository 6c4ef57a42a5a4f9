from __future__ import annotations

"""
Integration tests for template loading and project writing.

Validates the UTF-16LE on-disk format, indentation stripping, default
template resolution and path-carrying error reports.
"""

import os
from pathlib import Path

import pytest

from conftest import write_utf16
from evbgen.core.generator import generate
from evbgen.core.templates import (
    DEFAULT_TEMPLATE_PATHS,
    load_template,
    load_templates,
    resolve_template_paths,
)
from evbgen.core.writer import write_project
from evbgen.domain.errors import EvbGenError, OutputWriteError, TemplateLoadError
from evbgen.domain.options import TemplatePaths

# -----------------------------------------------------------------------------
# TEMPLATE LOADER
# -----------------------------------------------------------------------------

def test_load_template_strips_tag_indentation(tmp_path: Path) -> None:
    path = write_utf16(tmp_path / "t.xml", "<A>\r\n    <B>x</B>\r\n\t<C/>\r\n</A>")

    assert load_template(str(path)) == "<A>\r\n<B>x</B>\r\n<C/>\r\n</A>"


def test_load_template_keeps_text_indentation(tmp_path: Path) -> None:
    """Only whitespace directly before a tag is removed."""
    path = write_utf16(tmp_path / "t.xml", "<A>\n  text\n</A>")

    assert load_template(str(path)) == "<A>\n  text\n</A>"


def test_load_template_drops_leading_bom(tmp_path: Path) -> None:
    path = write_utf16(tmp_path / "t.xml", "\ufeff<A/>")

    assert load_template(str(path)) == "<A/>"


def test_load_template_missing_file_reports_path(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.xml")

    with pytest.raises(TemplateLoadError) as exc_info:
        load_template(missing)

    assert exc_info.value.path == missing
    assert f"Template path: '{missing}'" in str(exc_info.value)


def test_load_template_bad_encoding_reports_path(tmp_path: Path) -> None:
    path = tmp_path / "odd.xml"
    path.write_bytes(b"<\x00A\x00>")  # odd byte count is not valid UTF-16

    with pytest.raises(TemplateLoadError) as exc_info:
        load_template(str(path))

    assert str(path) in str(exc_info.value)


def test_bundled_templates_load_with_all_markers() -> None:
    templates = load_templates(resolve_template_paths(TemplatePaths()))

    assert "inject: files" in templates["project"]
    assert "inject: inputExe" in templates["project"]
    assert "inject: compressFiles" in templates["project"]
    assert "inject: dirName" in templates["dir"]
    assert "inject: filePath" in templates["file"]


def test_resolve_template_paths_uses_overrides(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    paths = resolve_template_paths(TemplatePaths(dir="custom_dir.xml"))

    assert paths["dir"] == os.path.join(str(tmp_path), "custom_dir.xml")
    assert paths["project"] == DEFAULT_TEMPLATE_PATHS["project"]
    assert all(os.path.isabs(p) for p in paths.values())

# -----------------------------------------------------------------------------
# PROJECT WRITER
# -----------------------------------------------------------------------------

def test_write_project_utf16le_without_bom(tmp_path: Path) -> None:
    target = tmp_path / "out" / "app.evb"

    written = write_project(str(target), "<>ñ</>")

    assert written == str(target)
    raw = target.read_bytes()
    assert raw == "<>ñ</>".encode("utf-16-le")
    assert not raw.startswith(b"\xff\xfe")


def test_write_project_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "app.evb"
    target.write_bytes(b"old content that is longer")

    write_project(str(target), "<>")

    assert target.read_bytes() == "<>".encode("utf-16-le")


def test_write_project_unwritable_destination(tmp_path: Path) -> None:
    """A directory in place of the file cannot be written."""
    target = tmp_path / "app.evb"
    target.mkdir()

    with pytest.raises(OutputWriteError) as exc_info:
        write_project(str(target), "<>")

    assert exc_info.value.path == str(target)


def test_write_project_unencodable_document_keeps_previous_file(tmp_path: Path) -> None:
    """Lone surrogates (undecodable file names) fail before the target is touched."""
    target = tmp_path / "app.evb"
    target.write_bytes(b"OLD")

    with pytest.raises(OutputWriteError) as exc_info:
        write_project(str(target), "<Name>bad\udcff.txt</Name>")

    assert exc_info.value.path == str(target)
    assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
    assert target.read_bytes() == b"OLD"


@pytest.mark.skipif(os.name != "posix", reason="needs bytes file names")
def test_generate_undecodable_entry_name_keeps_previous_project(tmp_path: Path, template_files) -> None:
    root = tmp_path / "pack"
    sub = root / "sub"
    sub.mkdir(parents=True)
    try:
        with open(os.path.join(os.fsencode(str(sub)), b"bad\xff.txt"), "wb") as f:
            f.write(b"x")
    except OSError:
        pytest.skip("filesystem rejects non UTF-8 names")
    project = tmp_path / "app.evb"
    project.write_bytes(b"OLD")

    with pytest.raises(EvbGenError) as exc_info:
        generate(str(project), "in.exe", "out.exe", str(root), {"template_path": template_files})

    assert isinstance(exc_info.value, OutputWriteError)
    assert project.read_bytes() == b"OLD"
