"""Interactive questions that turn user answers into a ``ProjectConfig``."""

from __future__ import annotations

from rich.prompt import Confirm, Prompt

from .scaffolder import ProjectConfig, get_template, template_names, validate_project_name
from .utils import console, print_error

DEFAULT_PROJECT_NAME = "my-awesome-app"


def ask_project_name() -> str:
    """Ask for a project name until a valid one is given."""
    while True:
        name = Prompt.ask(
            "What's your project name?", default=DEFAULT_PROJECT_NAME, console=console
        ).strip()
        problem = validate_project_name(name)
        if problem is None:
            return name
        print_error(problem)


def ask_template(default: str) -> str:
    """Ask which catalog template to use."""
    names = template_names()
    return Prompt.ask(
        "Which template would you like to use?",
        choices=names,
        default=default if default in names else names[0],
        console=console,
    )


def ask_features(template_name: str) -> list[str]:
    """Ask about each feature the template declares, in declaration order."""
    template = get_template(template_name)
    return [
        feature
        for feature in template.features
        if Confirm.ask(f"Enable [bold]{feature}[/bold]?", default=True, console=console)
    ]


def collect_config(project_name: str | None, template_name: str) -> ProjectConfig:
    """Run the interactive flow and return the resulting config.

    *project_name* is only asked for when it was not given on the command
    line.  *template_name* is the preselected answer of the template question.
    """
    name = project_name or ask_project_name()
    template = ask_template(template_name)
    features = ask_features(template)
    return ProjectConfig(project_name=name, template_name=template, features=features)
