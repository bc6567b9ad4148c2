"""
gleamhatch.generator - Core Project Generation Logic
====================================================

This module turns a ``ProjectOptions`` into a Gleam project on disk.

Architecture
------------
The generator follows a linear pipeline:

    1. Validate the project name (via gleamhatch.validator)
    2. Derive the directory layout from the options
    3. Create the directories
    4. Render templates with Jinja2
    5. Write files to disk

Each step raises on failure and the remaining steps are skipped. Nothing is
rolled back: directories and files written before the failure stay on disk
and the caller decides what to do with them. Running the generator twice on
the same root overwrites the generated files.

Template System
---------------
Templates are Jinja2 files in the `templates/` directory. They only
interpolate a handful of values (see ``build_context``); the output is fully
determined by the options and the version constants below.

Usage Example
-------------
>>> from gleamhatch.generator import create_project
>>> from gleamhatch.models import ProjectOptions, Template
>>>
>>> options = ProjectOptions(name="myapp", template=Template.APP)
>>> result = create_project(options, "0.13.2", verbose=False)
>>> result.project_path
PosixPath('myapp')

See Also
--------
- models.py: Options and layout
- validator.py: Name validation
- templates/: Jinja2 template files
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, PackageLoader, select_autoescape
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from gleamhatch.errors import DirectoryCreationError, FileWriteError
from gleamhatch.models import ProjectLayout, ProjectOptions, Template
from gleamhatch.validator import DEFAULT_REGISTRY, NameRegistry, validate_name


if TYPE_CHECKING:
    from collections.abc import Callable


# =============================================================================
# Module-Level Configuration
# =============================================================================

# Console for rich output
console = Console()

# Versions written into generated files. These are the last known good
# releases, not detected from the environment.
PROJECT_VERSION = "1.0.0"
GLEAM_STDLIB_VERSION = "0.13.0"
GLEAM_OTP_VERSION = "0.1.0"
ERLANG_OTP_VERSION = "22.1"

# Template file mappings: template_name -> (output_path, condition_func)
# Files are written in this order. The condition_func decides if the
# template applies to the options.
TEMPLATE_MAPPINGS: dict[str, tuple[str, Callable[[ProjectOptions], bool] | None]] = {
    "gitignore.j2": (".gitignore", None),
    "github_ci.yml.j2": (".github/workflows/test.yml", None),
    "README.md.j2": ("README.md", None),
    "gleam.toml.j2": ("gleam.toml", None),
    "rebar.config.lib.j2": (
        "rebar.config",
        lambda o: o.template == Template.LIB,
    ),
    "rebar.config.app.j2": (
        "rebar.config",
        lambda o: o.template == Template.APP,
    ),
    "app.src.j2": ("src/{name}.app.src", None),
    "module.gleam.j2": ("src/{name}.gleam", None),
    "application.gleam.j2": (
        "src/{name}/application.gleam",
        lambda o: o.template == Template.APP,
    ),
    "test_module.gleam.j2": ("test/{name}_test.gleam", None),
}


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class GenerationResult:
    """
    Outcome of a successful generation run.

    Attributes
    ----------
    name : str
        The project name.

    project_path : Path
        Root directory the project was written to, as given by the options
        (relative paths stay relative).

    directories_created : list[Path]
        Directories ensured during the run, in creation order.

    files_created : list[Path]
        Files written during the run, in write order.
    """

    name: str
    project_path: Path
    directories_created: list[Path] = field(default_factory=list)
    files_created: list[Path] = field(default_factory=list)

    @property
    def message(self) -> str:
        """Confirmation text shown to the user once the project exists."""
        return (
            f'Your Gleam project "{self.name}" has been successfully created.\n'
            "The rebar3 program can be used to compile and test it.\n"
            "\n"
            f"    cd {self.project_path}\n"
            "    rebar3 eunit\n"
        )


# =============================================================================
# Template Engine Setup
# =============================================================================


def create_jinja_env() -> Environment:
    """
    Create and configure the Jinja2 template environment.

    The environment is configured with:
    - Package-based template loading from gleamhatch.templates
    - Autoescaping disabled (we're generating code, not HTML)
    - Trim blocks and lstrip_blocks so block tags leave no blank lines
    - Trailing newlines preserved

    Returns
    -------
    Environment
        Configured Jinja2 environment ready for template rendering.
    """
    return Environment(
        loader=PackageLoader("gleamhatch", "templates"),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def build_context(options: ProjectOptions, gleam_version: str) -> dict[str, Any]:
    """
    Build the values available to every template.

    Parameters
    ----------
    options : ProjectOptions
        Options of the project being generated.

    gleam_version : str
        Gleam release the generated CI workflow installs.

    Returns
    -------
    dict[str, Any]
        Template context.
    """
    return {
        "name": options.name,
        "description": options.description,
        "version": PROJECT_VERSION,
        "stdlib_version": GLEAM_STDLIB_VERSION,
        "otp_version": GLEAM_OTP_VERSION,
        "erlang_otp_version": ERLANG_OTP_VERSION,
        "gleam_version": gleam_version,
        "start_callback": options.start_callback,
    }


def render_template(
    env: Environment,
    template_name: str,
    context: dict[str, Any],
) -> str:
    """
    Render a single template.

    Raises
    ------
    jinja2.TemplateNotFound
        If the template file doesn't exist.
    """
    template = env.get_template(template_name)
    return template.render(**context)


def render_all_templates(options: ProjectOptions, gleam_version: str) -> dict[Path, str]:
    """
    Render every template that applies to the options.

    Parameters
    ----------
    options : ProjectOptions
        Project options.

    gleam_version : str
        Gleam release the generated CI workflow installs.

    Returns
    -------
    dict[Path, str]
        Output paths (relative to the project root) mapped to rendered
        content, in the order the files are to be written.
    """
    env = create_jinja_env()
    context = build_context(options, gleam_version)
    rendered: dict[Path, str] = {}

    for template_name, (output_pattern, condition) in TEMPLATE_MAPPINGS.items():
        if condition is not None and not condition(options):
            continue

        output_path = Path(output_pattern.format(name=options.name))
        rendered[output_path] = render_template(env, template_name, context)

    return rendered


# =============================================================================
# Directory Structure Creation
# =============================================================================


def make_directory(path: Path) -> None:
    """
    Create ``path`` and any missing parents.

    An existing directory is accepted. An existing file at ``path`` or any
    other OS error raises ``DirectoryCreationError``.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(path, str(e)) from e


def create_directory_structure(
    layout: ProjectLayout,
    *,
    verbose: bool = False,
) -> list[Path]:
    """
    Create all directories of the layout, in order.

    Parameters
    ----------
    layout : ProjectLayout
        Layout to create.

    verbose : bool, default=False
        If True, print each directory as it is created.

    Returns
    -------
    list[Path]
        Directories that were ensured.

    Raises
    ------
    DirectoryCreationError
        On the first directory that cannot be created.
    """
    created_dirs: list[Path] = []

    for directory in layout.directories():
        make_directory(directory)
        created_dirs.append(directory)

        if verbose:
            console.print(f"* creating {escape(str(directory))}/")

    return created_dirs


# =============================================================================
# File Writing
# =============================================================================


def write_file(path: Path, content: str) -> None:
    """
    Create or truncate ``path`` and write ``content`` to it.

    Raises
    ------
    FileWriteError
        With action ``"create"`` if the file cannot be opened, or ``"write"``
        if writing the content fails. A failed write may leave the file
        truncated.
    """
    try:
        f = path.open("w", encoding="utf-8")
    except OSError as e:
        raise FileWriteError(path, "create", str(e)) from e

    with f:
        try:
            f.write(content)
        except OSError as e:
            raise FileWriteError(path, "write", str(e)) from e


def write_files(
    project_dir: Path,
    files: dict[Path, str],
    *,
    verbose: bool = False,
) -> list[Path]:
    """
    Write rendered files into the project directory.

    Parameters
    ----------
    project_dir : Path
        Root directory of the project.

    files : dict[Path, str]
        Mapping of relative paths to file contents, in write order.

    verbose : bool, default=False
        If True, print each file as it is written.

    Returns
    -------
    list[Path]
        Paths of the written files.

    Raises
    ------
    FileWriteError
        On the first file that cannot be written.
    """
    created_files: list[Path] = []

    for relative_path, content in files.items():
        full_path = project_dir / relative_path

        if verbose:
            console.print(f"* creating {escape(str(full_path))}")

        write_file(full_path, content)
        created_files.append(full_path)

    return created_files


# =============================================================================
# Main Generation Function
# =============================================================================


def create_project(
    options: ProjectOptions,
    gleam_version: str,
    *,
    verbose: bool = True,
    registry: NameRegistry = DEFAULT_REGISTRY,
) -> GenerationResult:
    """
    Create a new Gleam project from the given options.

    This is the main entry point for project generation. It validates the
    name, creates the directories and writes every file of the template.

    Parameters
    ----------
    options : ProjectOptions
        Project options.

    gleam_version : str
        Gleam release pinned in the generated CI workflow. Usually the
        version that accompanies the running generator.

    verbose : bool, default=True
        If True, display progress information to the console.

    registry : NameRegistry
        Word tables used for name validation.

    Returns
    -------
    GenerationResult
        Name, root path and the created directories and files.

    Raises
    ------
    InvalidProjectNameError
        If the name is rejected. Nothing has been created at that point.
    DirectoryCreationError
        If a directory cannot be created.
    FileWriteError
        If a file cannot be written.

    Notes
    -----
    A failure part way through leaves the directories and files created so
    far on disk.
    """
    validate_name(options.name, registry)

    layout = options.layout()
    result = GenerationResult(name=options.name, project_path=layout.root)

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold blue]Creating project:[/] [green]{escape(options.name)}[/]\n"
                f"[dim]Template: {options.template.value} | "
                f"Gleam: {escape(gleam_version)}[/]",
                title="[bold]gleamhatch[/]",
                border_style="blue",
            )
        )
        console.print()

    result.directories_created.extend(
        create_directory_structure(layout, verbose=verbose)
    )

    rendered_files = render_all_templates(options, gleam_version)
    result.files_created.extend(
        write_files(layout.root, rendered_files, verbose=verbose)
    )

    if verbose:
        console.print()
        console.print(
            Panel(
                escape(result.message.rstrip()),
                title="[bold green]Success[/]",
                border_style="green",
            )
        )

    return result
