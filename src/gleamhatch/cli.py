"""
gleamhatch.cli - Command Line Interface
=======================================

This module provides the command-line interface for gleamhatch using Typer.

Architecture
------------
    app (main entry point)
    └── new      - Create a new project

Options that are not given fall back to defaults (library template, empty
description). With --interactive the missing ones are asked for instead.

Usage Examples
--------------
    $ gleamhatch new mylib
    $ gleamhatch new myapp --template app --description "My application"
    $ gleamhatch new myapp -i

Show help:
    $ gleamhatch --help
    $ gleamhatch new --help
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import questionary
import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from gleamhatch import __gleam_version__, __version__
from gleamhatch.errors import GleamhatchError
from gleamhatch.generator import create_project
from gleamhatch.models import ProjectOptions, Template


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="gleamhatch",
    help="Create new Gleam projects for rebar3 and Erlang/OTP.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]gleamhatch[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]Gleam project bootstrapper[/]\n"
            f"[dim]Generated CI installs Gleam {__gleam_version__}[/]",
            border_style="green",
        ))
        raise typer.Exit()


# =============================================================================
# Interactive Prompts
# =============================================================================

def prompt_template() -> Template:
    """
    Interactively prompt the user to select a template.

    Returns
    -------
    Template
        The selected template.
    """
    choices = [
        questionary.Choice(
            title=f"{t.value:<5} - {t.description}",
            value=t,
        )
        for t in Template
    ]

    result = questionary.select(
        "Which template?",
        choices=choices,
        default=Template.LIB,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_description() -> str:
    result = questionary.text(
        "Project description:",
        default="",
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold]gleamhatch[/] - Gleam project bootstrapper.

    [bold]Quick Start:[/]

        gleamhatch new myproject
    """


# =============================================================================
# New Command - Create a New Project
# =============================================================================

@app.command()
def new(
    name: Annotated[
        str,
        typer.Argument(
            help="Name of the project to create",
        ),
    ],
    description: Annotated[
        str | None,
        typer.Option(
            "--description",
            "-d",
            help="Short project description",
        ),
    ] = None,
    template: Annotated[
        str | None,
        typer.Option(
            "--template",
            "-t",
            help="Project template: lib, app",
        ),
    ] = None,
    project_root: Annotated[
        Path | None,
        typer.Option(
            "--project-root",
            "-o",
            help="Directory to create the project in (default: ./NAME)",
        ),
    ] = None,
    gleam_version: Annotated[
        str,
        typer.Option(
            "--gleam-version",
            help="Gleam version installed by the generated CI workflow",
        ),
    ] = __gleam_version__,
    interactive: Annotated[
        bool,
        typer.Option(
            "--interactive",
            "-i",
            help="Prompt for options that were not given",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report errors",
        ),
    ] = False,
) -> None:
    """
    Create a new Gleam project.

    [bold]Examples:[/]

        # Library with defaults
        gleamhatch new mylib

        # OTP application
        gleamhatch new myapp --template app

        # Into a specific directory
        gleamhatch new myapp --project-root ./projects/myapp
    """
    resolved_template: Template
    if template:
        try:
            resolved_template = Template.parse(template)
        except ValueError as e:
            rprint(f"[red]Error:[/] {escape(str(e))}")
            raise typer.Exit(1)
    elif interactive:
        resolved_template = prompt_template()
    else:
        resolved_template = Template.LIB

    resolved_description: str
    if description is not None:
        resolved_description = description
    elif interactive:
        resolved_description = prompt_description()
    else:
        resolved_description = ""

    options = ProjectOptions(
        name=name,
        description=resolved_description,
        template=resolved_template,
        project_root=project_root,
    )

    try:
        create_project(options, gleam_version, verbose=not quiet)
    except GleamhatchError as e:
        rprint(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
