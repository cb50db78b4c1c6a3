"""Naming convention checks for project and package names."""

from __future__ import annotations

import keyword
import re

from .errors import InvalidPackageName, InvalidProjectName

__all__ = [
    "is_snake_case",
    "is_train_case",
    "validate_package_name",
    "validate_project_name",
]


_TRAIN_CASE = re.compile(r"[A-Z][A-Za-z0-9]*(?:-[A-Z][A-Za-z0-9]*)*")
_SNAKE_CASE = re.compile(r"[a-z][a-z0-9]*(?:_[a-z0-9]+)*")
_TRAIN_WORD = re.compile(r"[A-Z][A-Za-z0-9]*")
_LOWER_WORD = re.compile(r"[a-z0-9]+")


def is_train_case(name: str) -> bool:
    """Return ``True`` when ``name`` is Train-Case, e.g. ``My-Project``."""

    if not isinstance(name, str):
        return False
    return _TRAIN_CASE.fullmatch(name) is not None


def is_snake_case(name: str) -> bool:
    """Return ``True`` when ``name`` is a snake_case identifier, e.g. ``my_package``."""

    if not isinstance(name, str):
        return False
    return _SNAKE_CASE.fullmatch(name) is not None and not keyword.iskeyword(name)


def _type_violation(name: object) -> str:
    return f"must be a string, not {type(name).__name__}"


def _train_case_violation(name: str) -> str:
    if not name:
        return "must not be empty"
    if name.startswith("-") or name.endswith("-"):
        return "must not start or end with a hyphen"
    if "--" in name:
        return "words must be separated by a single hyphen"
    for word in name.split("-"):
        if not word.isascii() or not word.isalnum():
            return "only ASCII letters, digits and hyphens are allowed"
        if _TRAIN_WORD.fullmatch(word) is None:
            return f"word {word!r} must start with an uppercase letter"
    return "must be Train-Case (e.g. My-Project)"


def _snake_case_violation(name: str) -> str:
    if not name:
        return "must not be empty"
    if name.startswith("_") or name.endswith("_"):
        return "must not start or end with an underscore"
    if "__" in name:
        return "words must be separated by a single underscore"
    if name[0].isdigit():
        return "must not start with a digit"
    if keyword.iskeyword(name):
        return "must not be a Python keyword"
    for word in name.split("_"):
        if _LOWER_WORD.fullmatch(word) is None:
            return "only lowercase ASCII letters, digits and underscores are allowed"
    return "must be snake_case (e.g. my_package)"


def validate_project_name(name: str) -> None:
    """Raise :class:`InvalidProjectName` unless ``name`` is Train-Case."""

    if not isinstance(name, str):
        raise InvalidProjectName(repr(name), _type_violation(name))
    if not is_train_case(name):
        raise InvalidProjectName(name, _train_case_violation(name))


def validate_package_name(name: str) -> None:
    """Raise :class:`InvalidPackageName` unless ``name`` is a snake_case identifier."""

    if not isinstance(name, str):
        raise InvalidPackageName(repr(name), _type_violation(name))
    if not is_snake_case(name):
        raise InvalidPackageName(name, _snake_case_violation(name))
