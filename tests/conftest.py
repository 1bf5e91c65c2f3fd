"""Shared pytest fixtures for the create-modern-fullstack test suite.

Provides reusable fixtures for:
- Throwaway template roots laid out like the bundled ``templates/`` directory
- Settings that skip or fake the dependency install step
- Output directories for generated projects
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from modern_fullstack.config import Settings


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

# Smallest valid PNG: signature plus IHDR/IEND chunks, full of non-UTF-8 bytes.
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\x00IEND\xaeB`\x82"
)


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create *files* (``{relative_path: content}``) under *root*."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def tree_writer():
    """The :func:`write_tree` helper, for tests that build their own trees."""
    return write_tree


@pytest.fixture
def png_bytes() -> bytes:
    """A tiny binary file that is not valid UTF-8."""
    return PNG_BYTES


# ---------------------------------------------------------------------------
# Template roots
# ---------------------------------------------------------------------------

@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A templates root with small ``basic`` and ``advanced`` trees."""
    root = tmp_path / "templates"
    write_tree(root / "basic", {
        "package.json.j2": '{\n  "name": "{{projectName}}"\n}\n',
        "README.md": "# Static readme\n\nNot rendered: {{ projectName }}\n",
        "a/b/file.j2": "project={{ project_name }} missing=[{{ not_defined }}] nested=[{{ user.name.first }}]\n",
        "a/static.png": PNG_BYTES,
    })
    write_tree(root / "advanced", {
        "features.txt.j2": (
            "{% for f in features %}{{ f }}\n{% endfor %}"
            "auth={{ with_auth }} database={{ with_database }}\n"
        ),
    })
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects."""
    out = tmp_path / "out"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Install step
# ---------------------------------------------------------------------------

@pytest.fixture
def no_install() -> Settings:
    """Settings that skip the install step."""
    return Settings(install=False)


@pytest.fixture
def fake_installer() -> AsyncMock:
    """An installer that records its calls and succeeds."""
    return AsyncMock(return_value=None)
