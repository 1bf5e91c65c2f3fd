"""Tests for template path resolution and the bundled template directories."""

from __future__ import annotations

from pathlib import Path

import pytest

from modern_fullstack.scaffolder.catalog import template_names
from modern_fullstack.scaffolder.locator import (
    TEMPLATES_ROOT,
    resolve_template_path,
    template_exists,
)


pytestmark = pytest.mark.unit


class TestResolveTemplatePath:
    def test_joins_root_and_name(self):
        assert resolve_template_path("basic") == TEMPLATES_ROOT / "basic"

    def test_custom_root(self, tmp_path: Path):
        assert resolve_template_path("advanced", tmp_path) == tmp_path / "advanced"

    def test_does_not_touch_filesystem(self, tmp_path: Path):
        path = resolve_template_path("missing", tmp_path / "nowhere")
        assert path == tmp_path / "nowhere" / "missing"
        assert not path.exists()

    def test_root_lives_inside_package(self):
        assert TEMPLATES_ROOT.name == "templates"
        assert TEMPLATES_ROOT.parent.name == "modern_fullstack"


class TestTemplateExists:
    @pytest.mark.parametrize("name", template_names())
    def test_every_catalog_entry_is_bundled(self, name: str):
        assert template_exists(name)

    def test_missing_template(self, tmp_path: Path):
        assert template_exists("basic", tmp_path) is False

    def test_file_is_not_a_template(self, tmp_path: Path):
        (tmp_path / "basic").write_text("not a directory", encoding="utf-8")
        assert template_exists("basic", tmp_path) is False

    def test_directory_is_a_template(self, templates_root: Path):
        assert template_exists("basic", templates_root) is True
