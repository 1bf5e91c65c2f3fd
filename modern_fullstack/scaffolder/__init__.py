"""create-modern-fullstack scaffolder -- materializes projects from templates.

Looks up a template in the bundled catalog, mirrors its directory into a new
project directory (rendering ``.j2`` files with Jinja2) and installs the
project's dependencies.

Quick usage::

    from modern_fullstack.scaffolder import ProjectConfig, ProjectGenerator

    config = ProjectConfig(project_name="demo-app", template_name="basic")
    project_path = await ProjectGenerator(config).generate("/tmp/output")
"""

from .catalog import Template, get_template, list_templates, template_names
from .generator import (
    ProjectConfig,
    ProjectGenerator,
    build_context,
    install_dependencies,
    validate_project_name,
)
from .locator import TEMPLATES_ROOT, resolve_template_path, template_exists
from .templates import TEMPLATE_SUFFIX, TemplateRenderer

__all__ = [
    # Catalog
    "Template",
    "get_template",
    "list_templates",
    "template_names",
    # Locator
    "TEMPLATES_ROOT",
    "resolve_template_path",
    "template_exists",
    # Renderer
    "TEMPLATE_SUFFIX",
    "TemplateRenderer",
    # Generator
    "ProjectConfig",
    "ProjectGenerator",
    "build_context",
    "install_dependencies",
    "validate_project_name",
]
