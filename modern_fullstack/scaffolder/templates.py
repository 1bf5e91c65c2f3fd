"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which mirrors a template directory into a
new project directory.  Files ending in ``.j2`` are rendered with the project
context and written without the suffix; every other file is copied
byte-for-byte.
"""

from __future__ import annotations

import asyncio
import re
import shutil
from pathlib import Path
from typing import Any

from jinja2 import ChainableUndefined, Environment, FileSystemLoader, TemplateError

from ..errors import ReadError, RenderError, WriteError


TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders one template directory into a project directory.

    The Jinja2 loader is rooted at *template_dir*, so ``{% include %}`` and
    ``{% extends %}`` can only reach files inside the template.  Unknown
    variables, including attribute lookups on them such as
    ``{{ user.name }}``, render as empty strings.

    A template whose source contains ``\\r\\n`` is rendered with CRLF line
    endings; every other template keeps ``\\n``.
    """

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=ChainableUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self.env.filters["slugify"] = slugify
        self.crlf_env = self.env.overlay(newline_sequence="\r\n")

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: POSIX path relative to the template directory (e.g.
                ``"apps/api/package.json.j2"``).
            context: Dictionary of variables available inside the template.

        Raises:
            RenderError: On a syntax error, a reference to a template that is
                missing or outside the template directory, or any other
                Jinja2 failure.
            ReadError: If the template file cannot be read or decoded.
        """
        source_path = self.template_dir / template_path
        try:
            env = self.crlf_env if b"\r\n" in source_path.read_bytes() else self.env
            template = env.get_template(template_path)
            return template.render(**context)
        except TemplateError as exc:
            raise RenderError(source_path, exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(source_path, exc) from exc

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  Returns the output
        path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_text, out, content)
        return out

    async def render_tree(
        self,
        output_dir: str | Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Mirror the whole template directory into *output_dir*.

        The directory structure is preserved: ``apps/api/package.json.j2``
        is rendered to ``<output_dir>/apps/api/package.json`` and
        ``apps/web/public/logo.png`` is copied unchanged.  Entries are
        visited in sorted order and the first failure aborts the walk.

        Returns:
            List of written file paths, in the order they were written.
        """
        written: list[Path] = []
        await self._copy_dir(self.template_dir, Path(output_dir), context, written)
        return written

    async def _copy_dir(
        self,
        src_dir: Path,
        dst_dir: Path,
        context: dict[str, Any],
        written: list[Path],
    ) -> None:
        try:
            entries = sorted(src_dir.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise ReadError(src_dir, exc) from exc

        for entry in entries:
            if entry.is_dir():
                target = dst_dir / entry.name
                await asyncio.to_thread(_make_dir, target)
                await self._copy_dir(entry, target, context, written)
            elif is_template_file(entry.name):
                rel = entry.relative_to(self.template_dir).as_posix()
                target = dst_dir / output_name(entry.name)
                written.append(await self.render_to_file(rel, target, context))
            else:
                target = dst_dir / entry.name
                await asyncio.to_thread(_copy_bytes, entry, target)
                written.append(target)


# ---------------------------------------------------------------------------
# File classification
# ---------------------------------------------------------------------------


def is_template_file(filename: str) -> bool:
    """Return ``True`` if *filename* carries the template suffix."""
    return filename.endswith(TEMPLATE_SUFFIX) and len(filename) > len(TEMPLATE_SUFFIX)


def output_name(filename: str) -> str:
    """Return the destination name for *filename* (suffix stripped)."""
    if is_template_file(filename):
        return filename[: -len(TEMPLATE_SUFFIX)]
    return filename


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def slugify(value: str) -> str:
    """Lower-case *value* and collapse separators to single hyphens.

    Used as the ``slugify`` filter, e.g. ``"@{{ projectName | slugify }}/api"``
    for npm scopes, which must be lower case.
    """
    slug = re.sub(r"[^a-z0-9]+", "-", str(value).lower().strip())
    return slug.strip("-")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(path, exc) from exc


def _write_text(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content as-is."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise WriteError(path, exc) from exc


def _copy_bytes(src: Path, dst: Path) -> None:
    try:
        data = src.read_bytes()
    except OSError as exc:
        raise ReadError(src, exc) from exc
    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
        dst.write_bytes(data)
        shutil.copymode(src, dst)
    except OSError as exc:
        raise WriteError(dst, exc) from exc
