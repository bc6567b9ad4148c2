"""
gleamhatch.validator - Project Name Validation
==============================================

A project name ends up as an Erlang application atom, an Erlang module name
and a Gleam module name, so it has to be acceptable to all three. The checks
run in a fixed order and the first failing rule decides the reported reason:

    1. Erlang reserved word          -> RESERVED_WORD
    2. Erlang/OTP stdlib module      -> STDLIB_MODULE_COLLISION
    3. Gleam keyword                 -> LANGUAGE_RESERVED_WORD
    4. Not matching ``^[a-z_]+$``    -> INVALID_FORMAT

Usage Example
-------------
>>> from gleamhatch.validator import validate_name
>>> validate_name("my_project")
>>> validate_name("case")
Traceback (most recent call last):
    ...
gleamhatch.errors.InvalidProjectNameError: "case" is a reserved word in Erlang.
"""

from __future__ import annotations

import re
from collections.abc import Container
from dataclasses import dataclass

from gleamhatch.errors import InvalidNameReason, InvalidProjectNameError
from gleamhatch.keywords import (
    ERLANG_RESERVED_WORDS,
    ERLANG_STANDARD_LIBRARY_MODULES,
    GLEAM_KEYWORDS,
)


NAME_PATTERN = re.compile(r"[a-z_]+")


@dataclass(frozen=True)
class NameRegistry:
    """
    Membership tables consulted by the validator.

    Any container supporting ``in`` works, which lets callers and tests
    supply their own word lists.

    Attributes
    ----------
    reserved_words : Container[str]
        Reserved words of the host runtime language (Erlang).

    stdlib_modules : Container[str]
        Module names of the host runtime's standard library.

    language_keywords : Container[str]
        Keywords of the scaffolded project's language (Gleam).
    """

    reserved_words: Container[str]
    stdlib_modules: Container[str]
    language_keywords: Container[str]


DEFAULT_REGISTRY = NameRegistry(
    reserved_words=ERLANG_RESERVED_WORDS,
    stdlib_modules=ERLANG_STANDARD_LIBRARY_MODULES,
    language_keywords=GLEAM_KEYWORDS,
)


def validate_name(name: str, registry: NameRegistry = DEFAULT_REGISTRY) -> None:
    """
    Check that ``name`` can be used as a project name.

    Parameters
    ----------
    name : str
        Candidate project name.

    registry : NameRegistry
        Word tables to check against.

    Raises
    ------
    InvalidProjectNameError
        With the reason of the first rule the name breaks.
    """
    if name in registry.reserved_words:
        raise InvalidProjectNameError(name, InvalidNameReason.RESERVED_WORD)
    if name in registry.stdlib_modules:
        raise InvalidProjectNameError(name, InvalidNameReason.STDLIB_MODULE_COLLISION)
    if name in registry.language_keywords:
        raise InvalidProjectNameError(name, InvalidNameReason.LANGUAGE_RESERVED_WORD)
    if NAME_PATTERN.fullmatch(name) is None:
        raise InvalidProjectNameError(name, InvalidNameReason.INVALID_FORMAT)


def is_valid_name(name: str, registry: NameRegistry = DEFAULT_REGISTRY) -> bool:
    """Return True if ``validate_name`` would accept ``name``."""
    try:
        validate_name(name, registry)
    except InvalidProjectNameError:
        return False
    return True
