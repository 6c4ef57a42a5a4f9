from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Compact templates and a controlled directory tree shared by the suites.
"""

import os
import sys
from pathlib import Path
from typing import Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

# -----------------------------------------------------------------------------
# Compact Templates
# -----------------------------------------------------------------------------
DIR_TEMPLATE = "<Dir><Name><!-- inject: dirName --></Name><Files><!-- inject: files --></Files></Dir>"
FILE_TEMPLATE = "<File><Name><!-- inject: fileName --></Name><Path><!-- inject: filePath --></Path></File>"
PROJECT_TEMPLATE = (
    "<Project>"
    "<In><!-- inject: inputExe --></In>"
    "<Out><!-- inject: outputExe --></Out>"
    "<Delete><!-- inject: deleteExtractedOnExit --></Delete>"
    "<Compress><!-- inject: compressFiles --></Compress>"
    "<Share><!-- inject: shareVirtualSystem --></Share>"
    "<Map><!-- inject: mapExecutableWithTemporaryFile --></Map>"
    "<Run><!-- inject: allowRunningOfVirtualExeFiles --></Run>"
    "<Files><!-- inject: files --></Files>"
    "</Project>"
)


def write_utf16(path: Path, text: str) -> Path:
    """Write text the way project templates are stored (UTF-16LE, no BOM)."""
    path.write_bytes(text.encode("utf-16-le"))
    return path


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def template_files(tmp_path: Path) -> Dict[str, str]:
    """
    Write the compact templates to disk.

    Returns:
        Dict[str, str]: template_path mapping for generate options.
    """
    tpl_dir = tmp_path / "templates"
    tpl_dir.mkdir()
    return {
        "project": str(write_utf16(tpl_dir / "project.xml", PROJECT_TEMPLATE)),
        "dir": str(write_utf16(tpl_dir / "dir.xml", DIR_TEMPLATE)),
        "file": str(write_utf16(tpl_dir / "file.xml", FILE_TEMPLATE)),
    }


@pytest.fixture
def pack_root(tmp_path: Path) -> Path:
    """
    Create a controlled tree to pack.

    Structure:
    /pack
      a.txt
      /sub
        b.txt
    """
    root = tmp_path / "pack"
    root.mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("b", encoding="utf-8")
    return root
