"""Map template names to the directories bundled with the package."""

from __future__ import annotations

from pathlib import Path

TEMPLATES_ROOT = Path(__file__).resolve().parent.parent / "templates"


def resolve_template_path(name: str, root: Path = TEMPLATES_ROOT) -> Path:
    """Return the directory that holds template *name*.

    Pure path computation; the filesystem is not consulted.
    """
    return Path(root) / name


def template_exists(name: str, root: Path = TEMPLATES_ROOT) -> bool:
    """Return ``True`` if template *name* is bundled as a directory."""
    try:
        return resolve_template_path(name, root).is_dir()
    except OSError:
        return False
