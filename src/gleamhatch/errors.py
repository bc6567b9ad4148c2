"""Exception types raised while validating names and generating projects."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class InvalidNameReason(str, Enum):
    """
    Why a project name was rejected.

    Members are listed in the order the validator checks them; the first
    matching rule decides the reason.
    """

    RESERVED_WORD = "reserved_word"
    STDLIB_MODULE_COLLISION = "stdlib_module_collision"
    LANGUAGE_RESERVED_WORD = "language_reserved_word"
    INVALID_FORMAT = "invalid_format"

    @property
    def explanation(self) -> str:
        explanations = {
            InvalidNameReason.RESERVED_WORD: "is a reserved word in Erlang.",
            InvalidNameReason.STDLIB_MODULE_COLLISION: (
                "is a standard library module in Erlang."
            ),
            InvalidNameReason.LANGUAGE_RESERVED_WORD: "is a reserved word in Gleam.",
            InvalidNameReason.INVALID_FORMAT: (
                "does not have the correct format. Project names may only "
                "contain lowercase letters and underscores."
            ),
        }
        return explanations[self]


class GleamhatchError(Exception):
    """Base class for every error gleamhatch reports to its caller."""


class InvalidProjectNameError(GleamhatchError):
    """Raised when a project name fails validation."""

    def __init__(self, name: str, reason: InvalidNameReason) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f'"{name}" {reason.explanation}')


class DirectoryCreationError(GleamhatchError):
    """Raised when a directory of the project layout cannot be created."""

    def __init__(self, path: Path, cause: str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Could not create directory {path}: {cause}")


class FileWriteError(GleamhatchError):
    """
    Raised when a generated file cannot be created or fully written.

    ``action`` is ``"create"`` when opening/truncating the file failed and
    ``"write"`` when the content could not be written out.
    """

    def __init__(self, path: Path, action: str, cause: str) -> None:
        self.path = path
        self.action = action
        self.cause = cause
        super().__init__(f"Could not {action} file {path}: {cause}")
