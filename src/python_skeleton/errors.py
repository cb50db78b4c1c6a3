"""Exception types raised while validating names and building projects."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "AlreadyExistsError",
    "BuildError",
    "BuildIOError",
    "InvalidPackageName",
    "InvalidProjectName",
    "NamingError",
]


class NamingError(ValueError):
    """Raised when a user supplied name breaks its naming convention."""

    kind = "name"

    def __init__(self, value: str, rule: str) -> None:
        self.value = value
        self.rule = rule
        super().__init__(f"invalid {self.kind} {value!r}: {rule}")


class InvalidProjectName(NamingError):
    """The project name is not Train-Case."""

    kind = "project name"


class InvalidPackageName(NamingError):
    """The package name is not a snake_case identifier."""

    kind = "package name"


class BuildError(RuntimeError):
    """Raised when the project tree cannot be written to disk."""

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class AlreadyExistsError(BuildError):
    """The project root directory is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} already exists", path)


class BuildIOError(BuildError):
    """A directory or file could not be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(f"cannot create {path}: {reason}", path)
