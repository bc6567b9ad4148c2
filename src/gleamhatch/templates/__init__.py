"""
gleamhatch.templates - Jinja2 Template Files
============================================

This package contains the Jinja2 templates for every generated file.
Templates use the .j2 extension and are rendered by the generator module.

Template Naming Convention
--------------------------
- Templates end with `.j2` extension
- Output paths are listed in ``generator.TEMPLATE_MAPPINGS``
- `rebar.config.lib.j2` and `rebar.config.app.j2` both render `rebar.config`;
  the template kind picks one

Available Templates
-------------------
Core:
    - gitignore.j2: Git ignore patterns
    - github_ci.yml.j2: GitHub Actions test workflow
    - README.md.j2: Project readme
    - gleam.toml.j2: Gleam project manifest

Build:
    - rebar.config.lib.j2: rebar3 config for libraries
    - rebar.config.app.j2: rebar3 config for OTP applications
    - app.src.j2: OTP application resource file

Source Files:
    - module.gleam.j2: Main module with a hello_world function
    - application.gleam.j2: Application callback module (app template only)

Tests:
    - test_module.gleam.j2: Test for the main module

Template Context
----------------
Templates only interpolate values; see ``generator.build_context``:

    name, description
        From the project options.

    version, stdlib_version, otp_version, erlang_otp_version
        Fixed version constants of the generator.

    gleam_version
        Gleam release the CI workflow installs, chosen by the caller.

    start_callback
        ``{<name>@application, []}`` for applications, None for libraries.
"""
