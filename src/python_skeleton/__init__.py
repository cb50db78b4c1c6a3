"""Scaffold the standard layout of a data science Python project.

The package validates a Train-Case project name and a snake_case package name,
renders a fixed set of template files and writes them, together with the
standard directories, below a new project root. Everything is usable both
programmatically and through the ``python-skeleton`` command.
"""

from __future__ import annotations

from .config import ProjectSpec
from .errors import (
    AlreadyExistsError,
    BuildError,
    BuildIOError,
    InvalidPackageName,
    InvalidProjectName,
    NamingError,
)
from .naming import is_snake_case, is_train_case, validate_package_name, validate_project_name
from .scaffold import ProjectScaffolder, build
from .template import TemplateRenderingError, render
from .templates import FileTemplate, directory_plan, render_templates

__all__ = [
    "AlreadyExistsError",
    "BuildError",
    "BuildIOError",
    "FileTemplate",
    "InvalidPackageName",
    "InvalidProjectName",
    "NamingError",
    "ProjectScaffolder",
    "ProjectSpec",
    "TemplateRenderingError",
    "build",
    "directory_plan",
    "is_snake_case",
    "is_train_case",
    "render",
    "render_templates",
    "validate_package_name",
    "validate_project_name",
]

__version__ = "0.1.0"
