"""
gleamhatch test suite
=====================

Test Modules
------------
- test_models.py: Tests for the options model, template enum and layout
- test_validator.py: Tests for project name validation
- test_generator.py: Tests for project generation logic
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_validator.py

    # Run specific test class
    pytest tests/test_generator.py::TestCreateProject
"""
