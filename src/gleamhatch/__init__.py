"""
gleamhatch - Gleam Project Bootstrapper
=======================================

A CLI tool that creates new Gleam projects ready to be built and tested
with rebar3 on Erlang/OTP.

Features
--------
- **Two Templates**: a plain library, or an OTP application with a
  supervision tree
- **Safe Names**: rejects names that clash with Erlang reserved words,
  Erlang/OTP standard library modules or Gleam keywords
- **CI Ready**: GitHub Actions test workflow included

Quick Start
-----------
```bash
# Create a library
gleamhatch new mylib

# Create an OTP application
gleamhatch new myapp --template app --description "My application"
```

Example
-------
>>> from gleamhatch import ProjectOptions, Template, create_project
>>> result = create_project(ProjectOptions(name="mylib"), "0.13.2")

Architecture
------------
The package is organized into these main modules:

- ``cli``: Typer-based command line interface
- ``generator``: Core project generation logic
- ``templates``: Jinja2 templates for generated files
- ``validator``: Project name validation
- ``keywords``: Erlang and Gleam word tables used by the validator
- ``models``: Pydantic options model and derived layout
- ``errors``: Exceptions reported to callers

License
-------
Apache License 2.0.
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__author__ = "gleamhatch contributors"
__license__ = "Apache-2.0"

# Gleam release the generated CI workflow installs by default
__gleam_version__ = "0.13.2"

# =============================================================================
# Public API Exports
# =============================================================================

from gleamhatch.errors import (
    DirectoryCreationError,
    FileWriteError,
    GleamhatchError,
    InvalidNameReason,
    InvalidProjectNameError,
)
from gleamhatch.generator import GenerationResult, create_project
from gleamhatch.models import ProjectLayout, ProjectOptions, Template
from gleamhatch.validator import NameRegistry, validate_name


__all__ = [
    "DirectoryCreationError",
    "FileWriteError",
    "GenerationResult",
    "GleamhatchError",
    "InvalidNameReason",
    "InvalidProjectNameError",
    "NameRegistry",
    "ProjectLayout",
    "ProjectOptions",
    "Template",
    "__author__",
    "__gleam_version__",
    "__version__",
    "create_project",
    "validate_name",
]
