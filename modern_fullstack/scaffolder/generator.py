"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and materializes a new project directory from one
of the bundled templates, then installs its dependencies.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..config import Settings
from ..errors import DestinationExists, InstallFailed, TemplateNotFound, UnknownFeature, WriteError
from ..utils import print_step, run_command
from .catalog import Template, get_template
from .locator import TEMPLATES_ROOT, resolve_template_path, template_exists
from .templates import TemplateRenderer


PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

Installer = Callable[[Path, Settings], Awaitable[None]]


def validate_project_name(name: str) -> str | None:
    """Return a description of what is wrong with *name*, or ``None``."""
    if not name or not name.strip():
        return "Project name is required"
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        return "Project name can only contain letters, numbers, hyphens, and underscores"
    return None


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    project_name: str = Field(..., description="Directory name of the new project")
    template_name: str = Field(default="basic", description="Catalog name of the template")
    features: list[str] = Field(
        default_factory=list,
        description="Feature tags selected from the template's declared features",
    )
    extra: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional render variables, merged last",
    )

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        problem = validate_project_name(value)
        if problem:
            raise ValueError(problem)
        return value


# ---------------------------------------------------------------------------
# Install step
# ---------------------------------------------------------------------------


async def install_dependencies(project_root: Path, settings: Settings) -> None:
    """Run the package manager's install command inside *project_root*.

    Standard streams are inherited so the user sees the package manager's
    own output.  There is no timeout.

    Raises:
        InstallFailed: If the command exits non-zero or cannot be started.
    """
    command = settings.install_command
    label = " ".join(command)
    try:
        returncode = await run_command(command, cwd=project_root)
    except FileNotFoundError:
        raise InstallFailed(127, label) from None
    if returncode != 0:
        raise InstallFailed(returncode, label)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Materializes a project from a bundled template.

    The run is a single linear pass: check the destination, resolve the
    template, create the directory, render the tree, install dependencies.
    Any failure aborts the run.  Files already written are left in place.
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: Settings | None = None,
        *,
        templates_root: Path = TEMPLATES_ROOT,
        installer: Installer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.templates_root = Path(templates_root)
        self.installer = installer or install_dependencies

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path | None = None) -> Path:
        """Generate the project and return its root directory.

        Args:
            output_dir: Parent directory of the new project.  Defaults to the
                current working directory.

        Raises:
            DestinationExists: The project directory is already present.
            TemplateNotFound: The template is not in the catalog or not
                bundled.
            UnknownFeature: A selected feature is not declared by the
                template.
            ReadError, WriteError, RenderError: Scaffolding failed midway.
            InstallFailed: The install command exited non-zero.
        """
        parent = Path(output_dir) if output_dir is not None else Path.cwd()
        project_root = parent.resolve() / self.config.project_name

        if project_root.exists() or project_root.is_symlink():
            raise DestinationExists(project_root)

        template = get_template(self.config.template_name)
        if not template_exists(template.name, self.templates_root):
            raise TemplateNotFound(template.name)
        unknown = [f for f in self.config.features if f not in template.features]
        if unknown:
            raise UnknownFeature(template.name, unknown)

        print_step(f"Creating project in {project_root}...")
        try:
            await asyncio.to_thread(project_root.mkdir, parents=True)
        except OSError as exc:
            raise WriteError(project_root, exc) from exc

        context = build_context(self.config, template)
        renderer = TemplateRenderer(resolve_template_path(template.name, self.templates_root))
        await renderer.render_tree(project_root, context)

        if self.settings.install:
            print_step("Installing dependencies...")
            await self.installer(project_root, self.settings)

        return project_root


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------


def build_context(config: ProjectConfig, template: Template) -> dict[str, Any]:
    """Build the Jinja2 template context for *config*.

    ``projectName`` mirrors ``project_name`` for templates of JavaScript
    projects.  Every declared feature gets a ``with_<feature>`` flag.
    """
    selected = [f for f in template.features if f in config.features]
    context: dict[str, Any] = {
        "project_name": config.project_name,
        "projectName": config.project_name,
        "template": template.name,
        "template_version": template.version,
        "features": selected,
    }
    for feature in template.features:
        context[f"with_{_flag_name(feature)}"] = feature in selected
    context.update(config.extra)
    return context


def _flag_name(feature: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", feature.lower()).strip("_")
