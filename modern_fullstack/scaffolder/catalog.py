"""Catalog of the project templates bundled with the tool.

The catalog is a fixed table built at import time. There is no registration
API; adding a template means adding an entry here and a matching directory
under ``modern_fullstack/templates/``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..errors import TemplateNotFound


class Template(BaseModel):
    """A named, versioned project template."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$", description="Kebab-case identifier")
    description: str = Field(..., min_length=1)
    features: tuple[str, ...] = Field(..., min_length=1, description="Declared capability tags")
    version: str = Field(..., pattern=r"^\d+\.\d+\.\d+$")


TEMPLATES: tuple[Template, ...] = (
    Template(
        name="basic",
        description="Basic fullstack template with TanStack Router and Hono",
        features=("router", "api", "typescript"),
        version="0.1.0",
    ),
    Template(
        name="advanced",
        description="Advanced template with auth, database, and testing",
        features=("router", "api", "typescript", "auth", "database", "testing"),
        version="0.1.0",
    ),
)

_BY_NAME: dict[str, Template] = {template.name: template for template in TEMPLATES}


def list_templates() -> list[Template]:
    """Return every template in declaration order."""
    return list(TEMPLATES)


def template_names() -> list[str]:
    """Return the template names in declaration order."""
    return [template.name for template in TEMPLATES]


def get_template(name: str) -> Template:
    """Look up a template by exact, case-sensitive name.

    Raises:
        TemplateNotFound: If no template has that name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise TemplateNotFound(name) from None
