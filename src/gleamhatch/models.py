"""
gleamhatch.models - Project Options and Layout
==============================================

This module defines the data passed into the generator. The options are a
frozen Pydantic model so they cannot change once the run has started, and
the layout derived from them is a frozen dataclass computed exactly once.

Architecture Notes
------------------
    ProjectOptions (input)
    ├── name: str
    ├── description: str
    ├── template: Template (enum)
    └── project_root: Path | None

    ProjectLayout (derived from ProjectOptions)
    ├── root
    ├── src, test
    ├── github, workflows
    └── application (APP template only)

The project name is deliberately not validated by the model. Validation
lives in ``gleamhatch.validator`` so that a rejected name carries a precise
``InvalidNameReason`` instead of a generic Pydantic ``ValidationError``.

Usage Example
-------------
>>> from gleamhatch.models import ProjectOptions, Template
>>> options = ProjectOptions(name="myapp", template=Template.APP)
>>> options.layout().application
PosixPath('myapp/src/myapp')
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enumerations
# =============================================================================

class Template(str, Enum):
    """
    Project shapes the generator can produce.

    Attributes
    ----------
    LIB : str
        A plain library. Depends on gleam_stdlib only and has no
        application callback module.

    APP : str
        An OTP application. Adds gleam_otp, an ``application`` module that
        starts a supervisor, and registers it in the ``.app.src`` file.

    Examples
    --------
    >>> Template("app") is Template.APP
    True
    >>> str(Template.LIB)
    'lib'
    """

    LIB = "lib"
    APP = "app"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Template:
        """
        Convert user input such as ``"App"`` or ``" lib "`` to a Template.

        Raises
        ------
        ValueError
            If the text names no template.
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            msg = f"Invalid template '{text}'. Valid: {valid}"
            raise ValueError(msg) from None

    @property
    def description(self) -> str:
        """Human-readable description for CLI prompts."""
        descriptions = {
            Template.LIB: "Library package with gleam_stdlib",
            Template.APP: "OTP application with a supervision tree",
        }
        return descriptions[self]

    @property
    def is_application(self) -> bool:
        return self is Template.APP


# =============================================================================
# Derived Layout
# =============================================================================

@dataclass(frozen=True)
class ProjectLayout:
    """
    Directory paths of a generated project.

    Attributes
    ----------
    root : Path
        Project root directory.

    src, test : Path
        Source and test directories.

    github, workflows : Path
        ``.github`` and ``.github/workflows``.

    application : Path | None
        ``src/<name>``, holding the application callback module.
        None for library projects.
    """

    root: Path
    src: Path
    test: Path
    github: Path
    workflows: Path
    application: Path | None = None

    @classmethod
    def from_options(cls, options: ProjectOptions) -> ProjectLayout:
        root = options.root
        src = root / "src"
        github = root / ".github"
        return cls(
            root=root,
            src=src,
            test=root / "test",
            github=github,
            workflows=github / "workflows",
            application=src / options.name if options.template.is_application else None,
        )

    def directories(self) -> Iterator[Path]:
        """Yield every directory in the order it must be created."""
        yield self.root
        yield self.src
        yield self.test
        yield self.github
        yield self.workflows
        if self.application is not None:
            yield self.application


# =============================================================================
# Main Options Model
# =============================================================================

class ProjectOptions(BaseModel):
    """
    Everything the caller decides about the project to generate.

    Attributes
    ----------
    name : str
        Project name. Becomes the Erlang application name and the name of
        the main Gleam module.

    description : str
        Free-form description, written verbatim into README.md and the
        ``.app.src`` file. May be empty.

    template : Template
        Which project shape to generate.

    project_root : Path | None
        Directory to generate into. Defaults to ``./<name>``.

    Examples
    --------
    >>> options = ProjectOptions(name="mylib")
    >>> options.root
    PosixPath('mylib')
    >>> options.start_callback is None
    True
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Project name")
    description: str = Field(
        default="",
        description="Short project description",
    )
    template: Template = Field(
        default=Template.LIB,
        description="Project template to generate",
    )
    project_root: Path | None = Field(
        default=None,
        description="Directory to create the project in (default: ./<name>)",
    )

    @property
    def root(self) -> Path:
        if self.project_root is not None:
            return self.project_root
        return Path(self.name)

    @property
    def start_callback(self) -> str | None:
        """
        Erlang ``{Module, Args}`` tuple registered as the application's
        ``mod`` entry, or None for libraries.

        Gleam compiles ``src/<name>/application.gleam`` to the Erlang module
        ``<name>@application``.
        """
        if self.template.is_application:
            return f"{{{self.name}@application, []}}"
        return None

    def layout(self) -> ProjectLayout:
        return ProjectLayout.from_options(self)
