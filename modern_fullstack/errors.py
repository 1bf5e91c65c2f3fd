"""Exception hierarchy for the scaffolding engine.

Every failure the engine can raise derives from ``ScaffoldError`` so the CLI
can report it with a single ``except`` clause and exit non-zero.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error raised while scaffolding a project."""


class TemplateNotFound(ScaffoldError):
    """Raised when a template name is not in the catalog or not bundled."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template {name} not found")


class DestinationExists(ScaffoldError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory {self.path} already exists")


class UnknownFeature(ScaffoldError):
    """Raised when a requested feature is not declared by the template."""

    def __init__(self, template: str, features: list[str]) -> None:
        self.template = template
        self.features = list(features)
        super().__init__(
            f"Template {template} does not provide feature(s): {', '.join(self.features)}"
        )


class _PathError(ScaffoldError):
    """Shared shape for filesystem and rendering failures on a single path."""

    action = "process"

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to {self.action} {self.path}: {cause}")


class ReadError(_PathError):
    """Raised when a source template file cannot be read."""

    action = "read"


class WriteError(_PathError):
    """Raised when a destination file or directory cannot be created."""

    action = "write"


class RenderError(_PathError):
    """Raised when Jinja2 cannot compile or render a template file."""

    action = "render"


class InstallFailed(ScaffoldError):
    """Raised when the dependency install command exits non-zero."""

    def __init__(self, code: int, command: str = "npm install") -> None:
        self.code = code
        self.command = command
        super().__init__(f"{command} failed with code {code}")
