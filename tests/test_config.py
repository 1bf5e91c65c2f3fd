"""Unit tests for Settings (modern_fullstack.config).

Tests cover:
- Defaults and the derived install command
- Field validation
- from_env with and without overrides
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from modern_fullstack.config import Settings


class TestSettings:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings()
        assert settings.package_manager == "npm"
        assert settings.install_args == ["install"]
        assert settings.install is True

    @pytest.mark.unit
    def test_install_command(self):
        settings = Settings(package_manager="pnpm", install_args=["install", "--frozen-lockfile"])
        assert settings.install_command == ["pnpm", "install", "--frozen-lockfile"]

    @pytest.mark.unit
    def test_empty_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            Settings(package_manager="")

    @pytest.mark.unit
    def test_install_args_are_not_shared(self):
        a = Settings()
        b = Settings()
        a.install_args.append("--silent")
        assert b.install_args == ["install"]


class TestFromEnv:
    @pytest.mark.unit
    def test_no_variables(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings == Settings()

    @pytest.mark.unit
    def test_overrides(self):
        env = {
            "CMF_PACKAGE_MANAGER": "yarn",
            "CMF_INSTALL_ARGS": "install --immutable",
            "CMF_SKIP_INSTALL": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.package_manager == "yarn"
        assert settings.install_args == ["install", "--immutable"]
        assert settings.install is False

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["1", "yes", "ON", " True "])
    def test_skip_install_truthy(self, value: str):
        with patch.dict(os.environ, {"CMF_SKIP_INSTALL": value}, clear=True):
            assert Settings.from_env().install is False

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "0", "no", "false"])
    def test_skip_install_falsy(self, value: str):
        with patch.dict(os.environ, {"CMF_SKIP_INSTALL": value}, clear=True):
            assert Settings.from_env().install is True
