"""Command-line entry point for ``create-modern-fullstack``.

Usage::

    create-modern-fullstack my-app
    create-modern-fullstack my-app --template advanced --yes
    create-modern-fullstack list
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import datetime, timezone

from pydantic import ValidationError

from . import __version__
from .config import Settings
from .errors import InstallFailed, ScaffoldError
from .prompts import DEFAULT_PROJECT_NAME, collect_config
from .scaffolder import ProjectConfig, ProjectGenerator, list_templates, template_names
from .utils import console, print_banner, print_error, print_success, print_summary_table, print_warning

PROG = "create-modern-fullstack"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "A modern fullstack CLI tool to quickly bootstrap applications "
            "with TanStack Router and Hono"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} my-app\n"
            f"  {PROG} my-app --template advanced --yes\n"
            f"  {PROG} list\n"
        ),
    )
    parser.add_argument("project_name", nargs="?", default=None, help="Project name")
    parser.add_argument(
        "--template", "-t",
        default="basic",
        help=f"Template to use: {', '.join(template_names())} (default: basic)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Skip prompts and use defaults",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    return parser


def list_command() -> int:
    """Print the template catalog."""
    rows = [
        (t.name, t.description, ", ".join(t.features), t.version)
        for t in list_templates()
    ]
    print_summary_table(
        rows,
        title="Available templates",
        columns=("Name", "Description", "Features", "Version"),
    )
    return 0


def resolve_config(args: argparse.Namespace) -> ProjectConfig:
    """Turn parsed arguments into a ``ProjectConfig``, prompting unless ``--yes``."""
    if args.yes:
        config = ProjectConfig(
            project_name=args.project_name or DEFAULT_PROJECT_NAME,
            template_name=args.template,
        )
    else:
        config = collect_config(args.project_name, args.template)

    now = datetime.now(timezone.utc)
    extra = {"year": now.year, "created_at": now.isoformat(timespec="seconds"), **config.extra}
    return config.model_copy(update={"extra": extra})


def print_next_steps(project_name: str) -> None:
    console.print()
    print_success("Project created successfully!")
    console.print("\n[bold]Next steps:[/bold]")
    console.print(f"   cd {project_name}")
    console.print("   npm run dev")
    console.print("\n[bold]Your app will be running at:[/bold]")
    console.print("   Frontend: http://localhost:3000")
    console.print("   API: http://localhost:8000")
    console.print("   API Docs: http://localhost:8000/ui")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.  Returns the process exit code."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv[:1] == ["list"]:
        return list_command()

    args = build_parser().parse_args(argv)
    print_banner(
        "Welcome to Modern Fullstack CLI!",
        "Let's create something amazing together",
    )

    try:
        config = resolve_config(args)
        generator = ProjectGenerator(config, Settings.from_env())
        asyncio.run(generator.generate())
    except ValidationError as exc:
        for error in exc.errors():
            print_error(f"Error: {str(error['msg']).removeprefix('Value error, ')}")
        return 1
    except InstallFailed as exc:
        print_error(f"Error creating project: {exc}")
        print_warning(
            f"The project files were created. Run the install manually inside {config.project_name}/."
        )
        return 1
    except ScaffoldError as exc:
        print_error(f"Error creating project: {exc}")
        return 1

    print_next_steps(config.project_name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
