"""create-modern-fullstack configuration.

Typed settings for the tool itself (as opposed to ``ProjectConfig``, which
describes one scaffolding request). Uses a Pydantic v2 model so values are
validated at construction time and can be read from environment variables.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Tunables for the install step.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to ``ProjectGenerator``.
    """

    package_manager: str = Field(
        default="npm", min_length=1, description="Executable used to install dependencies"
    )
    install_args: list[str] = Field(
        default_factory=lambda: ["install"],
        description="Arguments passed to the package manager",
    )
    install: bool = Field(
        default=True, description="Run the install step after scaffolding"
    )

    @property
    def install_command(self) -> list[str]:
        """Full argv of the install step."""
        return [self.package_manager, *self.install_args]

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CMF_PACKAGE_MANAGER, CMF_INSTALL_ARGS (space separated),
            CMF_SKIP_INSTALL (1/true/yes/on).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CMF_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CMF_PACKAGE_MANAGER"]
        if os.environ.get("CMF_INSTALL_ARGS"):
            kwargs["install_args"] = os.environ["CMF_INSTALL_ARGS"].split()
        if os.environ.get("CMF_SKIP_INSTALL", "").strip().lower() in _TRUTHY:
            kwargs["install"] = False
        return cls(**kwargs)
