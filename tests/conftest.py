"""
pytest configuration and shared fixtures for gleamhatch tests.

Fixtures
--------
temp_dir : Path
    A temporary directory that is cleaned up after each test.

lib_options, app_options : ProjectOptions
    Options for a library and an application named ``myapp`` rooted in
    ``temp_dir``.
"""

from pathlib import Path

import pytest

from gleamhatch.models import ProjectOptions, Template



@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for test output."""
    return tmp_path


@pytest.fixture
def lib_options(temp_dir: Path) -> ProjectOptions:
    """Options for a library project."""
    return ProjectOptions(
        name="myapp",
        description="A test project",
        template=Template.LIB,
        project_root=temp_dir / "myapp",
    )


@pytest.fixture
def app_options(temp_dir: Path) -> ProjectOptions:
    """Options for an application project."""
    return ProjectOptions(
        name="myapp",
        description="A test application",
        template=Template.APP,
        project_root=temp_dir / "myapp",
    )


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the test suite."""
    config.addinivalue_line(
        "markers", "integration: marks end-to-end generation tests"
    )
